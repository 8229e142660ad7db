"""
Tests for vote counting.
"""

import random
from collections import Counter

from game import GamePlayer, Winner
from game.voting import choose_eliminated, determine_winner, get_top_voted, tally_votes


def make_players(votes):
    return [GamePlayer(id=voter, name=voter, voted_for=target) for voter, target in votes.items()]


def test_tally_counts_only_cast_votes():
    players = make_players({"a": "x", "b": "x", "c": "y", "d": None})
    assert tally_votes(players) == {"x": 2, "y": 1}


def test_single_leader_is_eliminated_deterministically():
    counts = {"x": 2, "y": 1}
    for seed in range(20):
        assert choose_eliminated(counts, random.Random(seed)) == "x"


def test_tie_is_broken_among_leaders_only():
    counts = {"x": 2, "y": 2, "z": 1}
    assert sorted(get_top_voted(counts)) == ["x", "y"]

    rng = random.Random(99)
    picks = Counter(choose_eliminated(counts, rng) for _ in range(2000))

    assert set(picks) == {"x", "y"}
    assert 800 < picks["x"] < 1200


def test_no_votes_eliminates_nobody():
    assert choose_eliminated({}) is None
    assert get_top_voted({}) == []


def test_winner_when_impostor_eliminated():
    assert determine_winner("imp", "imp") == Winner.CIVILIANS


def test_winner_when_civilian_eliminated():
    assert determine_winner("civ", "imp") == Winner.IMPOSTOR
    assert determine_winner(None, "imp") == Winner.IMPOSTOR

"""
Tests for role assignment, turn order generation, word selection and helpers.
"""

import random
from collections import Counter

import pytest

from game import GamePlayer, Role, RoleAssigner, StaticWordProvider, TurnOrderGenerator
from utils.helpers import (
    generate_unique_room_code, normalize_clue, normalize_difficulty, normalize_player_name
)


def make_players(count):
    return [GamePlayer(id=f"p{i}", name=f"P{i}") for i in range(count)]


def test_assign_picks_single_impostor():
    players, impostor_id = RoleAssigner(random.Random(3)).assign(make_players(6))

    assert [p.id for p in players if p.role == Role.IMPOSTOR] == [impostor_id]
    assert sum(1 for p in players if p.role == Role.CIVILIAN) == 5


def test_assign_is_roughly_uniform():
    assigner = RoleAssigner(random.Random(11))
    picks = Counter(assigner.assign(make_players(4))[1] for _ in range(4000))

    assert set(picks) == {"p0", "p1", "p2", "p3"}
    assert all(800 < count < 1200 for count in picks.values())


def test_assign_resets_previous_roles():
    players = make_players(3)
    for player in players:
        player.role = Role.IMPOSTOR
    players, impostor_id = RoleAssigner(random.Random(0)).assign(players)

    assert sum(1 for p in players if p.role == Role.IMPOSTOR) == 1


def test_assign_requires_players():
    with pytest.raises(ValueError):
        RoleAssigner().assign([])


def test_turn_order_is_permutation():
    players = make_players(8)
    order = TurnOrderGenerator(random.Random(5)).generate(players)

    assert sorted(order) == sorted(p.id for p in players)


def test_turn_order_is_seedable():
    players = make_players(6)
    first = TurnOrderGenerator(random.Random(42)).generate(players)
    second = TurnOrderGenerator(random.Random(42)).generate(players)
    assert first == second


def test_word_provider_respects_difficulty():
    bank = {
        'easy': {'Food': ["Apple"]},
        'hard': {'Science': ["Entropy"]}
    }
    provider = StaticWordProvider(word_bank=bank, rng=random.Random(1))

    assert provider.select_word("hard") == ("Entropy", "Science")
    assert provider.select_word("easy") == ("Apple", "Food")


def test_word_provider_avoids_recent_words():
    bank = {'medium': {'Animals': ["Owl", "Cat", "Dog"]}}
    provider = StaticWordProvider(word_bank=bank, history_size=2, rng=random.Random(2))

    words = [provider.select_word("medium")[0] for _ in range(9)]
    for index in range(2, len(words)):
        assert words[index] not in words[index - 2:index]


def test_word_provider_default_bank_covers_all_difficulties():
    provider = StaticWordProvider(rng=random.Random(0))
    for difficulty in ("easy", "medium", "hard", "unknown"):
        word, category = provider.select_word(difficulty)
        assert word and category


def test_word_provider_with_empty_level_fails():
    with pytest.raises(ValueError):
        StaticWordProvider(word_bank={'easy': {}}).select_word("easy")


def test_unique_room_code_skips_existing():
    rng = random.Random(0)
    taken = {generate_unique_room_code(set(), rng=random.Random(0))}
    assert generate_unique_room_code(taken, rng=rng) not in taken


@pytest.mark.parametrize("raw,expected", [
    ("  Salty Breeze  ", "salty breeze"),
    ("WAVE", "wave"),
    ("   ", ""),
    (None, ""),
    ("x" * 100, "x" * 40),
])
def test_normalize_clue(raw, expected):
    assert normalize_clue(raw) == expected


def test_normalize_player_name_defaults():
    assert normalize_player_name("") == "Player"
    assert normalize_player_name(None) == "Player"
    assert normalize_player_name("  Ada   Lovelace ") == "Ada Lovelace"


def test_normalize_difficulty_defaults_to_medium():
    assert normalize_difficulty("HARD") == "hard"
    assert normalize_difficulty("extreme") == "medium"
    assert normalize_difficulty(None) == "medium"

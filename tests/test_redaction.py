"""
Tests for per-recipient redaction.
"""

import json
import pytest

from game import Phase, Role, filter_game_state, player_role_payload
from .helpers import vote_all


def test_shared_view_never_contains_secret_word(started_room):
    view = filter_game_state(started_room.game_state)

    assert 'secretWord' not in view
    assert "Lighthouse" not in json.dumps(view)


def test_shared_view_hides_roles_before_result(started_room):
    view = filter_game_state(started_room.game_state)

    assert view['impostorId'] is None
    assert view['category'] is None
    assert all(player['role'] is None for player in view['players'])


def test_recipient_view_shows_only_own_role(started_room):
    state = started_room.game_state
    view = filter_game_state(state, "p2")

    roles = {player['id']: player['role'] for player in view['players']}
    assert roles["p2"] == state.get_player("p2").role.value
    assert all(role is None for pid, role in roles.items() if pid != "p2")


def test_result_view_reveals_roles_but_not_word(voting_room, machine):
    vote_all(machine, voting_room, lambda voter: "p1")
    state = voting_room.game_state
    view = filter_game_state(state)

    assert state.phase == Phase.RESULT
    assert view['impostorId'] == state.impostor_id
    assert view['category'] == "Places"
    assert view['winner'] in ("civilians", "impostor")
    assert 'secretWord' not in view
    assert "Lighthouse" not in json.dumps(view)


def test_filter_does_not_mutate_state(started_room):
    state = started_room.game_state
    filter_game_state(state)

    assert state.secret_word == "Lighthouse"
    assert all(player.role in (Role.CIVILIAN, Role.IMPOSTOR) for player in state.players)


def test_civilians_share_the_secret_word(started_room):
    state = started_room.game_state
    civilians = [p for p in state.players if p.role == Role.CIVILIAN]
    payloads = [player_role_payload(state, p.id, True) for p in civilians]

    assert len(payloads) == 3
    assert {payload['secretWord'] for payload in payloads} == {"Lighthouse"}
    assert all(payload['role'] == "civilian" for payload in payloads)
    assert all('category' not in payload for payload in payloads)


@pytest.mark.parametrize("hint_enabled", [True, False])
def test_impostor_payload_never_has_word(started_room, hint_enabled):
    state = started_room.game_state
    payload = player_role_payload(state, state.impostor_id, hint_enabled)

    assert payload['role'] == "impostor"
    assert 'secretWord' not in payload
    if hint_enabled:
        assert payload['category'] == "Places"
    else:
        assert 'category' not in payload


def test_payload_for_stranger_is_none(started_room):
    assert player_role_payload(started_room.game_state, "stranger", True) is None

"""
Per-recipient redaction of game state.

Pure functions that build the views clients are allowed to see. They
never touch the transport layer, so every outbound payload can be
checked in isolation.

Rules:
- ``secretWord`` is never part of a shared snapshot.
- Before the result phase, player roles, ``impostorId`` and
  ``category`` are hidden from the shared snapshot; a recipient sees
  only their own role.
- A recipient's role payload carries the secret word for civilians and
  the category for the impostor when the hint setting is on.
"""

from typing import Any, Dict, Optional

from .models import GameState, Phase, Role

HIDDEN_UNTIL_RESULT = ('impostorId', 'category')

def filter_game_state(game_state: GameState, recipient_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the client view of a game state.

    Args:
        game_state: Authoritative game state
        recipient_id: Connection the view is for; None for a room broadcast

    Returns:
        JSON-serializable dictionary without server-only fields
    """
    view = game_state.to_dict()
    view.pop('secretWord', None)

    if game_state.phase == Phase.RESULT:
        return view

    for key in HIDDEN_UNTIL_RESULT:
        view[key] = None
    for player in view['players']:
        if player['id'] != recipient_id:
            player['role'] = None
    return view

def player_role_payload(game_state: GameState, recipient_id: str,
                        impostor_hint_enabled: bool) -> Optional[Dict[str, Any]]:
    """
    Build the secret role information for one recipient.

    Args:
        game_state: Authoritative game state
        recipient_id: Player the payload is addressed to
        impostor_hint_enabled: Whether the impostor may see the category

    Returns:
        Dictionary with ``id`` and ``role`` plus ``secretWord`` or
        ``category`` where allowed, or None if the id is not in the game
    """
    player = game_state.get_player(recipient_id)
    if player is None:
        return None

    payload = {'id': player.id, 'role': player.role.value}
    if player.role == Role.CIVILIAN:
        payload['secretWord'] = game_state.secret_word
    elif impostor_hint_enabled:
        payload['category'] = game_state.category
    return payload

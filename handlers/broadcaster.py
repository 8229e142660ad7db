"""
Outbound fan-out for Whisper Rooms.

Sends redacted room and game snapshots to Socket.IO rooms and single
connections. Every game payload goes through the redaction functions;
nothing here reads ``secret_word`` directly.
"""

import logging
from typing import Any, Dict, Optional

from game.redaction import filter_game_state, player_role_payload
from lobby.models import Room
from utils.constants import EVENTS

logger = logging.getLogger(__name__)

class Broadcaster:
    """Emits filtered state to every connection joined to a room."""

    def __init__(self, socketio):
        """
        Initialize broadcaster.

        Args:
            socketio: SocketIO instance used for emitting
        """
        self.socketio = socketio

    def send(self, event: str, data: Dict[str, Any], to: str):
        """Emit one event to a Socket.IO room or a single connection id."""
        self.socketio.emit(event, data, to=to)

    def room_updated(self, room: Room, to: Optional[str] = None):
        """Send the participant list to the room, or to one connection."""
        self.send(EVENTS['ROOM_UPDATED'], {'players': room.players_to_dict()}, to=to or room.code)

    def game_started(self, room: Room):
        """
        Announce a new game.

        Each participant gets a separate message holding the shared view of
        the game plus only their own role entry.
        """
        state = room.game_state
        for participant in room.players:
            role = player_role_payload(
                state, participant.id, room.settings.impostor_hint_enabled
            )
            self.send(EVENTS['GAME_STARTED'], {
                'gameState': filter_game_state(state),
                'playerRoles': [role] if role else []
            }, to=participant.id)
        logger.info(f"Sent game start to {room.player_count} players in room {room.code}")

    def game_state_updated(self, room: Room):
        """Broadcast the shared game view to the whole room."""
        if room.game_state is None:
            return
        self.send(EVENTS['GAME_STATE_UPDATED'], {
            'gameState': filter_game_state(room.game_state)
        }, to=room.code)

    def resync(self, room: Room, participant_id: str):
        """
        Send a full snapshot to one connection.

        Used by reconnecting clients: the participant list, and while a game
        is active the recipient's view of it plus their own role payload.
        """
        self.room_updated(room, to=participant_id)
        state = room.game_state
        if state is None:
            return

        data = {'gameState': filter_game_state(state, participant_id)}
        role = player_role_payload(state, participant_id, room.settings.impostor_hint_enabled)
        if role:
            data['playerRole'] = role
        self.send(EVENTS['GAME_STATE_UPDATED'], data, to=participant_id)

    def game_ended(self, room: Room, message: str):
        self.send(EVENTS['GAME_ENDED'], {'message': message}, to=room.code)

    def game_reset(self, room: Room):
        self.send(EVENTS['GAME_RESET'], {'roomCode': room.code}, to=room.code)

    def error(self, participant_id: str, message: str):
        """Report a rejected request to the initiating connection only."""
        self.send(EVENTS['ERROR'], {'message': message}, to=participant_id)

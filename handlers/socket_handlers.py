"""
Socket.IO Event Handlers for Whisper Rooms.

Routing layer that binds transport events to the room registry and the
session state machine. Each handler takes the room lock for its whole
guard-mutate-broadcast sequence, so broadcasts leave in the order the
transitions were applied.
"""

import logging
from functools import wraps
from flask import request
from flask_socketio import join_room, leave_room

from game.exceptions import GameError, RoomNotFound
from game.state_machine import DepartureOutcome
from lobby.models import Participant, RoomSettings
from utils.constants import EVENTS, NOT_ENOUGH_PLAYERS_MESSAGE
from utils.helpers import normalize_difficulty, normalize_player_name

logger = logging.getLogger(__name__)

def register_socket_handlers(socketio, registry, state_machine, broadcaster):
    """
    Register all Socket.IO event handlers.

    Args:
        socketio: SocketIO instance
        registry: RoomRegistry owning the rooms
        state_machine: SessionStateMachine applying game transitions
        broadcaster: Broadcaster used for all outbound messages
    """

    def reports_errors(action):
        """Send GameErrors and unexpected failures to the caller only."""
        def decorator(handler):
            @wraps(handler)
            def wrapper(*args):
                try:
                    return handler(*args)
                except GameError as e:
                    logger.info(f"Rejected {action} from {request.sid}: {e.message}")
                    broadcaster.error(request.sid, e.message)
                except Exception as e:
                    logger.error(f"Error handling {action}: {e}")
                    broadcaster.error(request.sid, f"Failed to {action}")
            return wrapper
        return decorator

    def payload(data) -> dict:
        return data if isinstance(data, dict) else {}

    def depart(code, sid):
        """Remove ``sid`` from a room and reconcile any running game."""
        with registry.locked_room(code) as room:
            if registry.leave(code, sid) is None:
                return
            broadcaster.room_updated(room)

            outcome = state_machine.handle_departure(room, sid)
            if outcome == DepartureOutcome.ABORTED:
                broadcaster.game_ended(room, NOT_ENOUGH_PLAYERS_MESSAGE)
            elif outcome == DepartureOutcome.STATE_CHANGED:
                broadcaster.game_state_updated(room)

    def leave_previous_room(sid, previous, new_code):
        """A connection sits in one room at a time; drop it from the old one."""
        if not previous or previous == new_code:
            return
        try:
            depart(previous, sid)
        except GameError:
            logger.debug(f"Previous room {previous} of {sid} is gone")
        leave_room(previous)

    @socketio.on('connect')
    def handle_connect():
        """Handle client connection."""
        logger.info(f"Client connected: {request.sid}")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle client disconnection."""
        sid = request.sid
        logger.info(f"Client disconnected: {sid}")

        code = registry.find_room_of(sid)
        if not code:
            return
        try:
            depart(code, sid)
        except GameError:
            logger.debug(f"Room {code} already gone when {sid} disconnected")
        except Exception as e:
            logger.error(f"Error handling disconnect: {e}")

    @socketio.on('create-room')
    @reports_errors('create room')
    def handle_create_room(data=None):
        """Handle room creation request."""
        data = payload(data)
        sid = request.sid
        previous = registry.find_room_of(sid)

        host = Participant(id=sid, name=normalize_player_name(data.get('playerName')))
        hint_enabled = data.get('impostorHintEnabled')
        settings = RoomSettings(
            difficulty=normalize_difficulty(data.get('difficulty')),
            impostor_hint_enabled=hint_enabled if isinstance(hint_enabled, bool) else True
        )
        code = registry.create_room(host, settings)

        with registry.locked_room(code) as room:
            join_room(code)
            broadcaster.send(EVENTS['ROOM_CREATED'], {'roomCode': code, 'playerId': sid}, to=sid)
            broadcaster.room_updated(room)

        leave_previous_room(sid, previous, code)

    @socketio.on('join-room')
    @reports_errors('join room')
    def handle_join_room(data=None):
        """Handle player joining a room."""
        data = payload(data)
        sid = request.sid
        code = data.get('roomCode')

        participant = Participant(id=sid, name=normalize_player_name(data.get('playerName')))
        previous = registry.find_room_of(sid)

        with registry.locked_room(code) as room:
            registry.join_room(code, participant)
            join_room(code)
            broadcaster.send(EVENTS['ROOM_JOINED'], {'roomCode': code, 'playerId': sid}, to=sid)
            broadcaster.room_updated(room)

        leave_previous_room(sid, previous, code)

    @socketio.on('leave-room')
    @reports_errors('leave room')
    def handle_leave_room(data=None):
        """Handle player leaving a room without disconnecting."""
        sid = request.sid
        code = payload(data).get('roomCode') or registry.find_room_of(sid)
        if not code or registry.find_room_of(sid) != code:
            return

        depart(code, sid)
        leave_room(code)
        broadcaster.send(EVENTS['LEFT_ROOM'], {'roomCode': code}, to=sid)

    @socketio.on('toggle-ready')
    def handle_toggle_ready(data=None):
        """Handle ready toggle; unknown rooms and players are ignored."""
        code = payload(data).get('roomCode')
        try:
            with registry.locked_room(code) as room:
                if registry.toggle_ready(code, request.sid):
                    broadcaster.room_updated(room)
        except RoomNotFound:
            logger.debug(f"Toggle ready for unknown room {code}")

    @socketio.on('start-game')
    @reports_errors('start game')
    def handle_start_game(data=None):
        """Handle game start request."""
        code = payload(data).get('roomCode')
        with registry.locked_room(code) as room:
            if state_machine.start_game(room, request.sid):
                broadcaster.game_started(room)

    @socketio.on('dismiss-role-reveal')
    @reports_errors('dismiss role reveal')
    def handle_dismiss_role_reveal(data=None):
        """Handle role reveal acknowledgment; broadcasts once everyone is done."""
        code = payload(data).get('roomCode')
        with registry.locked_room(code) as room:
            if state_machine.dismiss_role_reveal(room, request.sid):
                broadcaster.game_state_updated(room)

    @socketio.on('submit-clue')
    @reports_errors('submit clue')
    def handle_submit_clue(data=None):
        """Handle clue submission."""
        data = payload(data)
        with registry.locked_room(data.get('roomCode')) as room:
            if state_machine.submit_clue(room, request.sid, data.get('clue')):
                broadcaster.game_state_updated(room)

    @socketio.on('submit-vote')
    @reports_errors('submit vote')
    def handle_submit_vote(data=None):
        """Handle vote submission."""
        data = payload(data)
        with registry.locked_room(data.get('roomCode')) as room:
            if state_machine.submit_vote(room, request.sid, data.get('targetId')):
                broadcaster.game_state_updated(room)

    @socketio.on('play-again')
    @reports_errors('restart game')
    def handle_play_again(data=None):
        """Handle host request to return a finished room to the lobby."""
        code = payload(data).get('roomCode')
        with registry.locked_room(code) as room:
            if state_machine.play_again(room, request.sid):
                broadcaster.room_updated(room)
                broadcaster.game_reset(room)

    @socketio.on('get-room-state')
    @reports_errors('get room state')
    def handle_get_room_state(data=None):
        """Handle resync request from a (re)connecting client."""
        code = payload(data).get('roomCode')
        with registry.locked_room(code) as room:
            broadcaster.resync(room, request.sid)

    logger.info("Socket.IO handlers registered successfully")

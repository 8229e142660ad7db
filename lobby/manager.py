"""
Room registry for Whisper Rooms.

Owns every active room, keyed by room code. Handles room creation,
joining, leaving, ready toggles and reaping of empty rooms.

Locking: ``_lock`` guards the code -> room map and the participant
index; each room's own lock guards everything inside the room. The
registry lock is only ever held briefly, and never while waiting for a
room lock, so busy rooms do not block each other.
"""

import random
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from game.exceptions import GameInProgress, RoomFull, RoomNotFound
from utils.helpers import generate_unique_room_code
from .models import Participant, Room, RoomSettings

logger = logging.getLogger(__name__)

class RoomRegistry:
    """Main room management coordinator."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.rooms: Dict[str, Room] = {}
        self.participant_rooms: Dict[str, str] = {}  # participant_id -> room_code
        self._lock = threading.Lock()

    @property
    def room_count(self) -> int:
        with self._lock:
            return len(self.rooms)

    def create_room(self, host: Participant, settings: Optional[RoomSettings] = None) -> str:
        """
        Create a new room with ``host`` as its only participant.

        Args:
            host: Participant creating the room; marked host and ready
            settings: Room settings chosen by the host

        Returns:
            The new room code
        """
        host.is_host = True
        host.is_ready = True

        with self._lock:
            code = generate_unique_room_code(self.rooms, rng=self.rng)
            room = Room(code=code, host_id=host.id, settings=settings or RoomSettings())
            room.players.append(host)
            self.rooms[code] = room
            self.participant_rooms[host.id] = code

        logger.info(f"Created room {code} for host {host.id}")
        return code

    def get_room(self, code: str) -> Optional[Room]:
        """Look up a room without locking it."""
        with self._lock:
            return self.rooms.get(code)

    @contextmanager
    def locked_room(self, code: str) -> Iterator[Room]:
        """
        Context manager yielding a room with its lock held.

        Args:
            code: Room code

        Raises:
            RoomNotFound: If no active room has this code, or it was
                reaped while we waited for its lock
        """
        room = self.get_room(code) if isinstance(code, str) else None
        if room is None:
            raise RoomNotFound(code)

        with room.lock:
            if self.get_room(code) is not room:
                raise RoomNotFound(code)
            yield room

    def join_room(self, code: str, participant: Participant) -> Room:
        """
        Add a participant to an existing room.

        Args:
            code: Room code to join
            participant: Joining participant

        Returns:
            The joined room

        Raises:
            RoomNotFound: Unknown code
            GameInProgress: The room has an active game
            RoomFull: The room already has the maximum number of participants
        """
        with self.locked_room(code) as room:
            if room.get_player(participant.id):
                return room
            if room.game_state is not None:
                raise GameInProgress()
            if room.is_full:
                raise RoomFull()

            participant.is_host = False
            room.players.append(participant)
            with self._lock:
                self.participant_rooms[participant.id] = code

            logger.info(f"Player {participant.name} joined room {code} ({room.player_count} players)")
            return room

    def leave(self, code: str, participant_id: str) -> Optional[Participant]:
        """
        Remove a participant from a room.

        When the host leaves and others remain, the first remaining
        participant becomes host. An emptied room stays registered until
        the next reaping pass.

        Args:
            code: Room code
            participant_id: Id of the departing participant

        Returns:
            The removed participant, or None if they were not in the room
        """
        with self.locked_room(code) as room:
            participant = room.get_player(participant_id)
            if participant is None:
                return None

            room.players.remove(participant)
            with self._lock:
                if self.participant_rooms.get(participant_id) == code:
                    del self.participant_rooms[participant_id]

            if room.host_id == participant_id:
                if room.players:
                    new_host = room.players[0]
                    new_host.is_host = True
                    room.host_id = new_host.id
                    logger.info(f"Host of room {code} reassigned to {new_host.name}")
                else:
                    room.host_id = None

            logger.info(f"Player {participant.name} left room {code} ({room.player_count} players)")
            return participant

    def toggle_ready(self, code: str, participant_id: str) -> Optional[Participant]:
        """
        Flip a participant's ready flag.

        Returns:
            The updated participant, or None when room or participant is unknown
        """
        try:
            with self.locked_room(code) as room:
                participant = room.get_player(participant_id)
                if participant is None:
                    return None
                participant.is_ready = not participant.is_ready
                logger.debug(f"Player {participant.name} ready: {participant.is_ready}")
                return participant
        except RoomNotFound:
            logger.debug(f"Toggle ready for unknown room {code}")
            return None

    def find_room_of(self, participant_id: str) -> Optional[str]:
        """Get the code of the room a participant is in."""
        with self._lock:
            return self.participant_rooms.get(participant_id)

    def reap_empty_rooms(self) -> int:
        """
        Remove rooms that have no participants.

        Rooms whose lock is currently held are skipped until the next pass.

        Returns:
            Number of rooms removed
        """
        reaped: List[str] = []
        with self._lock:
            for code, room in list(self.rooms.items()):
                if not room.lock.acquire(blocking=False):
                    continue
                try:
                    if room.is_empty:
                        del self.rooms[code]
                        room.role_reveal_dismissals = None
                        reaped.append(code)
                finally:
                    room.lock.release()

        if reaped:
            logger.info(f"Reaped {len(reaped)} empty rooms")
        return len(reaped)

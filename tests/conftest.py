"""
Pytest fixtures for Whisper Rooms tests.
"""

import random
import pytest

from app import create_app
from game import SessionStateMachine
from lobby import Participant, RoomRegistry, RoomSettings
from .helpers import FixedWordProvider, dismiss_all, play_clue_round


@pytest.fixture
def rng():
    """Seeded random source for deterministic games."""
    return random.Random(1234)


@pytest.fixture
def word_provider():
    return FixedWordProvider()


@pytest.fixture
def machine(word_provider, rng):
    """State machine with seeded role, turn and tie-break randomness."""
    return SessionStateMachine(word_provider, rng=rng)


@pytest.fixture
def registry(rng):
    return RoomRegistry(rng=rng)


@pytest.fixture
def make_room(registry):
    """Create a room with ``count`` participants, all ready by default."""
    def _make_room(count=4, ready=True, hint=True):
        host = Participant(id="p0", name="Host")
        code = registry.create_room(host, RoomSettings(impostor_hint_enabled=hint))
        for index in range(1, count):
            participant = Participant(id=f"p{index}", name=f"Player {index}", is_ready=ready)
            registry.join_room(code, participant)
        return registry.get_room(code)
    return _make_room


@pytest.fixture
def started_room(make_room, machine):
    """A four player room whose game has just started."""
    room = make_room(4)
    machine.start_game(room, room.host_id)
    return room


@pytest.fixture
def voting_room(started_room, machine):
    """A four player room that has reached the voting phase."""
    dismiss_all(machine, started_room)
    play_clue_round(machine, started_room)
    play_clue_round(machine, started_room)
    return started_room


@pytest.fixture
def server(word_provider):
    """Flask app and SocketIO server running in threading mode."""
    app, socketio, registry = create_app(
        async_mode='threading', word_provider=word_provider, start_reaper=False
    )
    app.config['TESTING'] = True
    return app, socketio, registry


@pytest.fixture
def connect(server):
    """Factory for Socket.IO test clients; all are disconnected at teardown."""
    app, socketio, _ = server
    clients = []

    def _connect():
        client = socketio.test_client(app)
        clients.append(client)
        return client

    yield _connect

    for client in clients:
        if client.is_connected():
            client.disconnect()

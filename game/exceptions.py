"""
Game exceptions for Whisper Rooms.

Every rejection of a participant-initiated operation is raised as a
subclass of GameError. The handler layer reports ``message`` to the
initiating connection only; none of these are internal faults.
"""


class GameError(Exception):
    """Base class for all client-facing game errors."""
    message = "Invalid request"

    def __init__(self, message=None):
        self.message = message or self.message
        super().__init__(self.message)


# ============ Room errors ============

class RoomNotFound(GameError):
    """No active room has the requested code."""
    message = "Room not found"

    def __init__(self, room_code=None):
        self.room_code = room_code
        super().__init__()


class GameInProgress(GameError):
    """The room already has an active game."""
    message = "Game already in progress"


class RoomFull(GameError):
    """The room has reached the maximum number of participants."""
    message = "Room is full"


# ============ Start errors ============

class NotHost(GameError):
    """Only the host may perform this action."""
    message = "Only host can start the game"


class InsufficientPlayers(GameError):
    message = "Need at least 3 players"


class NotAllReady(GameError):
    message = "All players must be ready"


# ============ Turn and vote errors ============

class NotYourTurn(GameError):
    """Clue submitted by someone other than the current turn holder."""
    message = "Not your turn"


class InvalidClue(GameError):
    message = "Clue cannot be empty"


class NotVotingPhase(GameError):
    message = "Not voting phase"


class InvalidVoteTarget(GameError):
    """Vote cast for an id that is not a player in this game."""
    message = "Invalid vote target"


class GameNotFinished(GameError):
    """Play-again requested before the game reached its result."""
    message = "Game is not finished yet"

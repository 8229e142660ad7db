"""
Session state machine for Whisper Rooms.

Drives one room's game through its phases:

    setup -> roleReveal -> round1 -> round2 -> voting -> result

Every participant event is looked up in TRANSITIONS by the room's current
phase. A missing entry rejects the event (or ignores it, for events with
no client-visible rejection). Guards run before any mutation, so a
rejected event never changes state.

Callers must hold ``room.lock`` for the whole call; the machine itself
keeps no per-room state outside the Room object.
"""

import random
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple, Type, TYPE_CHECKING

from utils.constants import MIN_PLAYERS
from utils.helpers import normalize_clue
from .exceptions import (
    GameError, GameInProgress, GameNotFinished, InsufficientPlayers,
    InvalidClue, InvalidVoteTarget, NotAllReady, NotHost, NotVotingPhase,
    NotYourTurn
)
from .models import CLUE_PHASES, GamePlayer, GameState, Phase
from .roles import RoleAssigner
from .turns import TurnOrderGenerator
from .voting import choose_eliminated, determine_winner, tally_votes
from .words import WordProvider

if TYPE_CHECKING:
    from lobby.models import Room

logger = logging.getLogger(__name__)

class GameEvent(Enum):
    """Participant events that drive phase transitions."""
    START_GAME = "start-game"
    DISMISS_ROLE_REVEAL = "dismiss-role-reveal"
    SUBMIT_CLUE = "submit-clue"
    SUBMIT_VOTE = "submit-vote"
    PLAY_AGAIN = "play-again"

class DepartureOutcome(Enum):
    """Effect of a participant leaving on the room's game."""
    UNCHANGED = "unchanged"
    STATE_CHANGED = "state_changed"
    ABORTED = "aborted"

@dataclass(frozen=True)
class Transition:
    """Guard and action method names plus the phases the action may end in."""
    guard: str
    action: str
    next_phases: FrozenSet[Phase]

TRANSITIONS: Dict[Tuple[Phase, GameEvent], Transition] = {
    (Phase.SETUP, GameEvent.START_GAME):
        Transition('_guard_start', '_start_game', frozenset({Phase.ROLE_REVEAL})),
    (Phase.RESULT, GameEvent.START_GAME):
        Transition('_guard_start', '_start_game', frozenset({Phase.ROLE_REVEAL})),
    (Phase.ROLE_REVEAL, GameEvent.DISMISS_ROLE_REVEAL):
        Transition('_guard_dismiss', '_dismiss_role_reveal',
                   frozenset({Phase.ROLE_REVEAL, Phase.ROUND1})),
    (Phase.ROUND1, GameEvent.SUBMIT_CLUE):
        Transition('_guard_clue', '_submit_clue', frozenset({Phase.ROUND1, Phase.ROUND2})),
    (Phase.ROUND2, GameEvent.SUBMIT_CLUE):
        Transition('_guard_clue', '_submit_clue', frozenset({Phase.ROUND2, Phase.VOTING})),
    (Phase.VOTING, GameEvent.SUBMIT_VOTE):
        Transition('_guard_vote', '_submit_vote', frozenset({Phase.VOTING, Phase.RESULT})),
    (Phase.RESULT, GameEvent.PLAY_AGAIN):
        Transition('_guard_play_again', '_play_again', frozenset({Phase.SETUP})),
}

# Error raised when an event arrives in a phase with no transition for it.
# Events mapped to None are ignored silently.
REJECTIONS: Dict[GameEvent, Optional[Type[GameError]]] = {
    GameEvent.START_GAME: GameInProgress,
    GameEvent.DISMISS_ROLE_REVEAL: None,
    GameEvent.SUBMIT_CLUE: NotYourTurn,
    GameEvent.SUBMIT_VOTE: NotVotingPhase,
    GameEvent.PLAY_AGAIN: GameNotFinished,
}

def current_phase(room: 'Room') -> Phase:
    """Phase of the room's game; SETUP while the room is in the lobby."""
    return room.game_state.phase if room.game_state else Phase.SETUP

class SessionStateMachine:
    """
    Phase, turn and vote protocol for a single room.

    Public operations return a truthy value when the room's state changed
    and should be broadcast, and a falsy value for silent no-ops. Client
    mistakes raise GameError subclasses.
    """

    def __init__(self, word_provider: WordProvider,
                 role_assigner: Optional[RoleAssigner] = None,
                 turn_order_generator: Optional[TurnOrderGenerator] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the state machine.

        Args:
            word_provider: Source of (word, category) pairs
            role_assigner: Impostor selection; built from ``rng`` if omitted
            turn_order_generator: Turn shuffling; built from ``rng`` if omitted
            rng: Random source shared by the default collaborators and the
                vote tie-break
        """
        self.rng = rng or random.Random()
        self.word_provider = word_provider
        self.role_assigner = role_assigner or RoleAssigner(self.rng)
        self.turn_order_generator = turn_order_generator or TurnOrderGenerator(self.rng)

    # ============ Public operations ============

    def start_game(self, room: 'Room', actor_id: str) -> Optional[GameState]:
        """Start a new game; returns the fresh game state."""
        return self._fire(room, GameEvent.START_GAME, actor_id)

    def dismiss_role_reveal(self, room: 'Room', actor_id: str) -> bool:
        """Record a role-reveal acknowledgment; True once everyone dismissed."""
        return bool(self._fire(room, GameEvent.DISMISS_ROLE_REVEAL, actor_id))

    def submit_clue(self, room: 'Room', actor_id: str, clue: str) -> Optional[GameState]:
        return self._fire(room, GameEvent.SUBMIT_CLUE, actor_id, clue)

    def submit_vote(self, room: 'Room', actor_id: str, target_id: str) -> Optional[GameState]:
        return self._fire(room, GameEvent.SUBMIT_VOTE, actor_id, target_id)

    def play_again(self, room: 'Room', actor_id: str) -> bool:
        """Return a finished room to the lobby; True if it was reset."""
        return bool(self._fire(room, GameEvent.PLAY_AGAIN, actor_id))

    def handle_departure(self, room: 'Room', participant_id: str) -> DepartureOutcome:
        """
        Reconcile the game after a participant has been removed from the room.

        Aborts the game below the minimum player count. Otherwise makes sure
        the departed player cannot stall the game: the role reveal threshold
        is re-checked and their clue turn is skipped. During voting, votes
        cast for them are voided and a vote that is now complete is resolved.

        Args:
            room: Room the participant already left
            participant_id: Id of the departed participant

        Returns:
            DepartureOutcome describing what the caller should broadcast
        """
        state = room.game_state
        if state is None:
            return DepartureOutcome.UNCHANGED

        if room.player_count < MIN_PLAYERS:
            self.abort_game(room)
            return DepartureOutcome.ABORTED

        if state.phase == Phase.ROLE_REVEAL:
            if self._everyone_dismissed(room):
                self._finish_role_reveal(room)
                return DepartureOutcome.STATE_CHANGED
        elif state.phase in CLUE_PHASES:
            if state.current_turn_player_id == participant_id:
                self._advance_turn(room, state)
                return DepartureOutcome.STATE_CHANGED
        elif state.phase == Phase.VOTING:
            cleared = self._clear_votes_for(state, participant_id)
            if self._voting_complete(room, state):
                self._resolve_votes(room, state)
                return DepartureOutcome.STATE_CHANGED
            if cleared:
                return DepartureOutcome.STATE_CHANGED

        return DepartureOutcome.UNCHANGED

    def abort_game(self, room: 'Room'):
        """Drop the room's game and any role reveal tracking."""
        room.game_state = None
        room.role_reveal_dismissals = None
        logger.info(f"Game aborted in room {room.code}: not enough players")

    # ============ Dispatch ============

    def _fire(self, room: 'Room', event: GameEvent, actor_id: str, *args):
        phase = current_phase(room)
        transition = TRANSITIONS.get((phase, event))

        if transition is None:
            rejection = REJECTIONS.get(event)
            if rejection is not None and room.game_state is not None:
                raise rejection()
            logger.debug(f"Ignoring {event.value} in room {room.code} during {phase.value}")
            return None

        if not getattr(self, transition.guard)(room, actor_id, *args):
            logger.debug(f"Ignoring {event.value} from {actor_id} in room {room.code}")
            return None

        result = getattr(self, transition.action)(room, actor_id, *args)

        new_phase = current_phase(room)
        if new_phase not in transition.next_phases:
            logger.error(f"Illegal transition {phase.value} -> {new_phase.value} on {event.value}")
        elif new_phase != phase:
            logger.info(f"Room {room.code}: {phase.value} -> {new_phase.value}")
        return result

    # ============ start-game ============

    def _guard_start(self, room: 'Room', actor_id: str) -> bool:
        if actor_id != room.host_id:
            raise NotHost()
        if room.player_count < MIN_PLAYERS:
            raise InsufficientPlayers()
        if not room.all_ready:
            raise NotAllReady()
        return True

    def _start_game(self, room: 'Room', actor_id: str) -> GameState:
        word, category = self.word_provider.select_word(room.settings.difficulty)

        game_players = [GamePlayer(id=p.id, name=p.name) for p in room.players]
        game_players, impostor_id = self.role_assigner.assign(game_players)
        turn_order = self.turn_order_generator.generate(game_players)

        room.game_state = GameState(
            turn_order=turn_order,
            players=game_players,
            secret_word=word,
            category=category,
            impostor_id=impostor_id,
            phase=Phase.ROLE_REVEAL,
            current_round=1,
            current_turn_index=0,
            show_role_reveal=True
        )
        room.role_reveal_dismissals = set()

        logger.info(f"Game started in room {room.code} with {len(game_players)} players")
        return room.game_state

    # ============ dismiss-role-reveal ============

    def _guard_dismiss(self, room: 'Room', actor_id: str) -> bool:
        return room.get_player(actor_id) is not None

    def _dismiss_role_reveal(self, room: 'Room', actor_id: str) -> bool:
        if room.role_reveal_dismissals is None:
            room.role_reveal_dismissals = set()
        room.role_reveal_dismissals.add(actor_id)

        if not self._everyone_dismissed(room):
            logger.debug(f"Room {room.code}: {len(room.role_reveal_dismissals)}/"
                         f"{room.player_count} dismissed role reveal")
            return False

        self._finish_role_reveal(room)
        return True

    def _everyone_dismissed(self, room: 'Room') -> bool:
        dismissed = (room.role_reveal_dismissals or set()) & set(room.player_ids)
        return len(dismissed) >= room.player_count

    def _finish_role_reveal(self, room: 'Room'):
        room.game_state.show_role_reveal = False
        room.game_state.phase = Phase.ROUND1
        room.role_reveal_dismissals = None

    # ============ submit-clue ============

    def _guard_clue(self, room: 'Room', actor_id: str, clue: str) -> bool:
        state = room.game_state
        if state.get_player(actor_id) is None:
            return False
        if state.current_turn_player_id != actor_id:
            raise NotYourTurn()
        if not normalize_clue(clue):
            raise InvalidClue()
        return True

    def _submit_clue(self, room: 'Room', actor_id: str, clue: str) -> GameState:
        state = room.game_state
        state.get_player(actor_id).clues.append(normalize_clue(clue))
        self._advance_turn(room, state)
        return state

    def _advance_turn(self, room: 'Room', state: GameState):
        """
        Move to the next turn holder still in the room.

        Rolls round 1 over into round 2 and round 2 into voting when the
        turn order is exhausted.
        """
        present = set(room.player_ids)
        state.current_turn_index += 1

        while True:
            while (state.current_turn_index < len(state.turn_order)
                   and state.turn_order[state.current_turn_index] not in present):
                state.current_turn_index += 1
            if state.current_turn_index < len(state.turn_order):
                return

            if state.current_round == 1:
                state.current_round = 2
                state.current_turn_index = 0
                state.phase = Phase.ROUND2
            else:
                state.phase = Phase.VOTING
                state.current_turn_index = 0
                return

    # ============ submit-vote ============

    def _guard_vote(self, room: 'Room', actor_id: str, target_id: str) -> bool:
        state = room.game_state
        if state.get_player(actor_id) is None or room.get_player(actor_id) is None:
            return False
        if state.get_player(target_id) is None or room.get_player(target_id) is None:
            raise InvalidVoteTarget()
        return True

    def _submit_vote(self, room: 'Room', actor_id: str, target_id: str) -> GameState:
        state = room.game_state
        state.get_player(actor_id).voted_for = target_id

        if self._voting_complete(room, state):
            self._resolve_votes(room, state)
        return state

    def _voting_complete(self, room: 'Room', state: GameState) -> bool:
        present = set(room.player_ids)
        return all(p.has_voted for p in state.players if p.id in present)

    def _clear_votes_for(self, state: GameState, target_id: str) -> bool:
        """Void votes cast for a departed player so their voters vote again."""
        cleared = False
        for player in state.players:
            if player.voted_for == target_id:
                player.voted_for = None
                cleared = True
        return cleared

    def _resolve_votes(self, room: 'Room', state: GameState):
        present = set(room.player_ids)
        state.vote_counts = tally_votes(
            p for p in state.players if p.id in present and p.voted_for in present
        )
        state.eliminated_id = choose_eliminated(state.vote_counts, self.rng)
        state.winner = determine_winner(state.eliminated_id, state.impostor_id)
        state.phase = Phase.RESULT
        logger.info(f"Voting finished: {state.winner.value} win")

    # ============ play-again ============

    def _guard_play_again(self, room: 'Room', actor_id: str) -> bool:
        if actor_id != room.host_id:
            raise NotHost("Only host can restart the game")
        return True

    def _play_again(self, room: 'Room', actor_id: str) -> bool:
        room.game_state = None
        room.role_reveal_dismissals = None
        for participant in room.players:
            participant.is_ready = participant.is_host
        logger.info(f"Room {room.code} returned to lobby")
        return True

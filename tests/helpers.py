"""
Shared helpers for driving games in tests.
"""

from game import WordProvider


class FixedWordProvider(WordProvider):
    """Always serves the same word so tests can search payloads for it."""

    def __init__(self, word="Lighthouse", category="Places"):
        self.word = word
        self.category = category
        self.calls = []

    def select_word(self, difficulty):
        self.calls.append(difficulty)
        return self.word, self.category


def dismiss_all(machine, room):
    """Acknowledge the role reveal for every participant."""
    for participant in list(room.players):
        machine.dismiss_role_reveal(room, participant.id)


def play_clue_round(machine, room, clue="hint"):
    """Submit one clue per player in turn order."""
    state = room.game_state
    for player_id in list(state.turn_order):
        machine.submit_clue(room, player_id, clue)


def vote_all(machine, room, choose_target):
    """Have every game player vote for ``choose_target(player_id)``."""
    for player in list(room.game_state.players):
        machine.submit_vote(room, player.id, choose_target(player.id))


def events_named(received, name):
    """Payloads of every received Socket.IO event called ``name``."""
    return [event['args'][0] for event in received if event['name'] == name]

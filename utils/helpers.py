"""
Helper utilities for Whisper Rooms.

This module contains small pure functions used by the lobby and game
modules for code generation and input normalization.
"""

import random
from typing import Container, Optional

from .constants import (
    ROOM_CODE_ALPHABET, ROOM_CODE_LENGTH, DEFAULT_PLAYER_NAME,
    DEFAULT_DIFFICULTY, DIFFICULTIES, MAX_CLUE_LENGTH
)

def generate_room_code(length: int = ROOM_CODE_LENGTH,
                       rng: Optional[random.Random] = None) -> str:
    """Generate a random room code."""
    rng = rng or random
    return ''.join(rng.choices(ROOM_CODE_ALPHABET, k=length))

def generate_unique_room_code(existing: Container[str],
                              rng: Optional[random.Random] = None) -> str:
    """
    Generate a room code that is not already in use.

    Args:
        existing: Codes of rooms that are currently active
        rng: Optional random source

    Returns:
        A code not contained in ``existing``
    """
    code = generate_room_code(rng=rng)
    while code in existing:
        code = generate_room_code(rng=rng)
    return code

def normalize_clue(clue) -> str:
    """
    Normalize a clue for storage: trimmed, lower-cased and length-capped.

    Args:
        clue: Raw clue from the client

    Returns:
        Normalized clue (may be empty)
    """
    if not isinstance(clue, str):
        return ''
    return clue.strip().lower()[:MAX_CLUE_LENGTH]

def normalize_player_name(name) -> str:
    """Clean a player name, falling back to the default name."""
    if not isinstance(name, str) or not name.strip():
        return DEFAULT_PLAYER_NAME
    return ' '.join(name.split())[:20]

def normalize_difficulty(difficulty) -> str:
    """Return a known difficulty, defaulting to medium."""
    if isinstance(difficulty, str) and difficulty.lower() in DIFFICULTIES:
        return difficulty.lower()
    return DEFAULT_DIFFICULTY

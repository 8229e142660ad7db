"""
Game constants for Whisper Rooms.

This module contains all constant values used throughout the game,
including player limits, room code format, difficulties and event names.
"""

import string

# Player limits
MIN_PLAYERS = 3
MAX_PLAYERS = 8

# Room code format
ROOM_CODE_LENGTH = 6
ROOM_CODE_ALPHABET = string.ascii_uppercase + string.digits

# Room defaults
DEFAULT_PLAYER_NAME = 'Player'
DEFAULT_DIFFICULTY = 'medium'
DIFFICULTIES = ('easy', 'medium', 'hard')

# Clue limits
MAX_CLUE_LENGTH = 40

# Number of recent words the word provider avoids repeating
WORD_HISTORY_SIZE = 10

# Outbound Socket.IO event names
EVENTS = {
    'ROOM_CREATED': 'room-created',
    'ROOM_JOINED': 'room-joined',
    'ROOM_UPDATED': 'room-updated',
    'LEFT_ROOM': 'left-room',
    'GAME_STARTED': 'game-started',
    'GAME_STATE_UPDATED': 'game-state-updated',
    'GAME_ENDED': 'game-ended',
    'GAME_RESET': 'game-reset',
    'ERROR': 'error'
}

# Messages sent with non-error notifications
NOT_ENOUGH_PLAYERS_MESSAGE = 'Not enough players'

# Word bank by difficulty: category -> words
WORD_BANK = {
    'easy': {
        'Animals': ["Dog", "Cat", "Elephant", "Lion", "Horse", "Rabbit", "Penguin", "Monkey"],
        'Food': ["Pizza", "Apple", "Banana", "Bread", "Cheese", "Chocolate", "Ice Cream", "Sandwich"],
        'Places': ["Beach", "School", "Hospital", "Park", "Airport", "Library", "Zoo", "Farm"],
        'Objects': ["Chair", "Phone", "Umbrella", "Clock", "Bicycle", "Pillow", "Mirror", "Key"]
    },
    'medium': {
        'Animals': ["Octopus", "Flamingo", "Chameleon", "Kangaroo", "Hedgehog", "Peacock", "Walrus", "Squirrel"],
        'Food': ["Sushi", "Lasagna", "Pancake", "Avocado", "Popcorn", "Burrito", "Croissant", "Dumpling"],
        'Places': ["Casino", "Museum", "Submarine", "Lighthouse", "Castle", "Stadium", "Volcano", "Desert"],
        'Jobs': ["Firefighter", "Astronaut", "Chef", "Pilot", "Dentist", "Magician", "Detective", "Farmer"],
        'Sports': ["Tennis", "Surfing", "Boxing", "Bowling", "Archery", "Skiing", "Golf", "Volleyball"]
    },
    'hard': {
        'Concepts': ["Nostalgia", "Gravity", "Democracy", "Irony", "Karma", "Paradox", "Inflation", "Echo"],
        'Science': ["Photosynthesis", "Eclipse", "Magnetism", "Evolution", "Molecule", "Telescope", "Fossil", "Glacier"],
        'Culture': ["Renaissance", "Opera", "Graffiti", "Origami", "Mythology", "Haiku", "Carnival", "Ballet"],
        'Places': ["Observatory", "Monastery", "Catacombs", "Embassy", "Archipelago", "Refinery", "Greenhouse", "Aquarium"]
    }
}

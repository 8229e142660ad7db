"""
Handlers Module for Whisper Rooms.

Contains all web layer handlers (Socket.IO and API) and the outbound
broadcaster. Handlers coordinate between the transport and the lobby and
game modules.
"""

from .socket_handlers import register_socket_handlers
from .api_handlers import register_api_handlers
from .broadcaster import Broadcaster

__all__ = [
    'register_socket_handlers',
    'register_api_handlers',
    'Broadcaster'
]

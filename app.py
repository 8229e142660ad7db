"""
Whisper Rooms - A Social Deduction Word Game Backend

Flask-SocketIO backend that serves the game's web client.
Players take turns giving one-word clues about a secret word while one
impostor, who does not know the word, tries to blend in.

This module is pure server setup and handler registration; game rules
live in the lobby/ and game/ packages.
"""

import logging
from flask import Flask
from flask_socketio import SocketIO
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from config import settings
from game import SessionStateMachine, StaticWordProvider
from handlers import Broadcaster, register_api_handlers, register_socket_handlers
from lobby import RoomRegistry

logger = logging.getLogger(__name__)

def start_room_reaper(socketio, registry, interval_seconds=settings.ROOM_REAP_INTERVAL_SECONDS):
    """
    Start the background task that removes empty rooms.

    Args:
        socketio: SocketIO instance that owns the background task
        registry: RoomRegistry to sweep
        interval_seconds: Seconds between sweeps
    """
    def reap_forever():
        while True:
            socketio.sleep(interval_seconds)
            try:
                registry.reap_empty_rooms()
            except Exception as e:
                logger.error(f"Error reaping empty rooms: {e}")

    return socketio.start_background_task(reap_forever)

def create_app(async_mode=None, word_provider=None, start_reaper=True):
    """
    Application factory that creates and configures the Flask app.

    Args:
        async_mode: Socket.IO async mode; defaults to SOCKETIO_ASYNC_MODE
        word_provider: WordProvider for new games; defaults to the built-in word bank
        start_reaper: Whether to launch the empty-room reaper task

    Returns:
        Tuple of (app, socketio, registry)
    """
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Flask configuration
    app = Flask(__name__)
    app.config['SECRET_KEY'] = settings.SECRET_KEY

    # CORS configuration for the web client
    cors_origins = settings.CORS_ORIGINS.split(',')
    CORS(app, origins=cors_origins)

    # ProxyFix for deployment behind reverse proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)

    # SocketIO configuration
    socketio = SocketIO(
        app,
        cors_allowed_origins=cors_origins,
        async_mode=async_mode or settings.SOCKETIO_ASYNC_MODE,
        ping_timeout=60,
        ping_interval=25
    )

    # Initialize business logic components
    logger.info("Initializing room registry and game state machine...")
    registry = RoomRegistry()
    state_machine = SessionStateMachine(word_provider or StaticWordProvider())
    broadcaster = Broadcaster(socketio)

    # Register handlers (pure routing layer)
    register_socket_handlers(socketio, registry, state_machine, broadcaster)
    register_api_handlers(app, registry)

    if start_reaper:
        start_room_reaper(socketio, registry)

    logger.info("Application initialization complete")
    return app, socketio, registry

def main():
    """Main entry point for the server."""
    app, socketio, _ = create_app()

    logger.info(f"Starting Whisper Rooms server on port {settings.PORT}")
    logger.info(f"Debug mode: {settings.DEBUG}")
    logger.info(f"CORS origins: {settings.CORS_ORIGINS}")

    socketio.run(app, debug=settings.DEBUG, port=settings.PORT, host='0.0.0.0')

if __name__ == '__main__':
    main()

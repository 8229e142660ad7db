"""
API Route Handlers for Whisper Rooms.

Plain HTTP routes for liveness checks. Contains no game logic.
"""

import logging
from datetime import datetime, timezone
from flask import jsonify

logger = logging.getLogger(__name__)

def register_api_handlers(app, registry):
    """
    Register all API route handlers.

    Args:
        app: Flask application instance
        registry: RoomRegistry, for the active room count
    """

    def health_payload():
        return {
            'status': 'ok',
            'message': 'Whisper Rooms game server is running',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'rooms': registry.room_count
        }

    @app.route('/')
    def index():
        """Root liveness endpoint."""
        return jsonify(health_payload())

    @app.route('/api/health')
    def health_check():
        """Health check endpoint."""
        return jsonify(health_payload())

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        return jsonify({'error': 'Internal server error'}), 500

    logger.info("API handlers registered successfully")

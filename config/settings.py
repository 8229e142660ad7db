import os
from dotenv import load_dotenv

# Only load the .env file if we're not on Render (i.e., we are in a local environment)
if os.environ.get("RENDER") != "true":
    load_dotenv()

# Flask Configuration
SECRET_KEY = os.getenv('SECRET_KEY', 'a_very_secret_key_that_should_be_changed')
CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

# Socket.IO Configuration
SOCKETIO_ASYNC_MODE = os.getenv('SOCKETIO_ASYNC_MODE', 'eventlet')

# Room Reaper Configuration
ROOM_REAP_INTERVAL_SECONDS = int(os.getenv('ROOM_REAP_INTERVAL_SECONDS', 300))

# Logging Configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Server Configuration
PORT = int(os.getenv('PORT', 3001))
DEBUG = os.environ.get('RENDER', '') != 'true'

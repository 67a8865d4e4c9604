"""
Configuration
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Config:
    """Application configuration"""

    # Persistence
    WATCHLIST_BACKEND = os.getenv('WATCHLIST_BACKEND', 'json').lower()  # json, redis, memory
    WATCHLIST_FILE = Path(os.getenv('WATCHLIST_FILE', 'data/watchlist.json'))
    WATCHLIST_KEY = os.getenv('WATCHLIST_KEY', 'movies')
    REDIS_URL = os.getenv('REDIS_URL', 'redis://localhost:6379/0')

    # Web service
    HOST = os.getenv('WATCHLIST_HOST', '0.0.0.0')
    PORT = int(os.getenv('WATCHLIST_PORT', 8080))
    DEBUG = os.getenv('WATCHLIST_DEBUG', 'false').lower() == 'true'

    # Notices disappear after this many seconds
    ALERT_TIMEOUT = float(os.getenv('ALERT_TIMEOUT', 5))

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE = os.getenv('LOG_FILE', '')

    # Statuses offered by the add/edit form
    STATUSES = ['watching', 'completed', 'on-hold', 'plan-to-watch', 'dropped']

    # Statuses summarized in the statistics bar
    TRACKED_STATUSES = ['watching', 'completed', 'on-hold']

    GENRES = [
        'action', 'adventure', 'animation', 'comedy', 'crime', 'documentary',
        'drama', 'fantasy', 'horror', 'mystery', 'romance', 'sci-fi', 'thriller',
    ]

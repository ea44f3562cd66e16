"""
Configuration settings for the Dealership Inventory API
"""

import os
import logging

logger = logging.getLogger(__name__)

# Database configuration
DB_USER = os.getenv("DB_USER")
DB_HOST = os.getenv("DB_HOST")
DB_NAME = os.getenv("DB_NAME")
DB_PASSWORD = os.getenv("DB_PASSWORD")
DB_PORT = int(os.getenv("DB_PORT")) if os.getenv("DB_PORT") else None
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 1))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))

# Server configuration
PORT = int(os.getenv("PORT", 3333))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]

REQUIRED_DATABASE_SETTINGS = {
    "DB_USER": DB_USER,
    "DB_HOST": DB_HOST,
    "DB_NAME": DB_NAME,
    "DB_PASSWORD": DB_PASSWORD,
    "DB_PORT": DB_PORT,
}


def validate_database_settings():
    """Validate required database environment variables"""
    missing = [name for name, value in REQUIRED_DATABASE_SETTINGS.items() if not value]
    if missing:
        raise ValueError(f"Missing required environment variables: {', '.join(missing)}")
    logger.info(f"Database target: {DB_USER}@{DB_HOST}:{DB_PORT}/{DB_NAME}")

"""
Entry point for the Dealership Inventory API
"""

import sys
import os
import asyncio
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from config.settings import PORT, LOG_LEVEL, validate_database_settings
from database.connection import check_connection

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


def main() -> int:
    validate_database_settings()

    # Only start listening if the database is reachable
    if not asyncio.run(check_connection()):
        logger.error("Erro ao conectar com o banco de dados.")
        return 1

    import uvicorn
    from app import app

    logger.info(f"Endereço do servidor: http://localhost:{PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Database connection and pool management
"""

import asyncpg
import logging
from typing import Any, Dict

from config import settings

logger = logging.getLogger(__name__)


def build_connection_kwargs() -> Dict[str, Any]:
    """Connection parameters shared by the connectivity check and the pool"""
    return {
        "user": settings.DB_USER,
        "host": settings.DB_HOST,
        "database": settings.DB_NAME,
        "password": settings.DB_PASSWORD,
        "port": settings.DB_PORT,
    }


async def check_connection() -> bool:
    """
    Open a short-lived connection to check that the database is reachable.

    Never raises: connection errors are logged and reported as False so the
    caller decides whether the server should start.
    """
    conn = None
    try:
        conn = await asyncpg.connect(**build_connection_kwargs())
        logger.info("Database connected!")
        return True
    except Exception as e:
        logger.error(f"Error to connect database: {e}")
        return False
    finally:
        if conn is not None:
            await conn.close()


async def init_database() -> asyncpg.Pool:
    """Initialize database connection pool"""
    pool = await asyncpg.create_pool(
        min_size=settings.DB_POOL_MIN_SIZE,
        max_size=settings.DB_POOL_MAX_SIZE,
        **build_connection_kwargs()
    )
    logger.info(f"Database pool initialized (max_size={settings.DB_POOL_MAX_SIZE})")
    return pool


async def close_database(pool: asyncpg.Pool):
    """Close database connection pool"""
    if pool:
        await pool.close()
    logger.info("Database connections closed")

"""
Health check and welcome API routes
"""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException

from services.dependencies import DealershipServices, get_services

router = APIRouter()
logger = logging.getLogger(__name__)

MENSAGEM_BANCO_INDISPONIVEL = "Banco de dados indisponível"


@router.get("/")
async def boas_vindas():
    return {"mensagem": "Olá, mundo!"}


@router.get("/health")
async def health_check(services: DealershipServices = Depends(get_services)):
    """Check database connectivity through the shared pool"""
    if services.pool is None:
        logger.error("Health check failed: database pool not initialized")
        raise HTTPException(status_code=503, detail=MENSAGEM_BANCO_INDISPONIVEL)

    try:
        async with services.pool.acquire() as conn:
            await conn.fetchval("SELECT 1")

        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": "connected"
        }

    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(status_code=503, detail=MENSAGEM_BANCO_INDISPONIVEL)

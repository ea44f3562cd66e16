"""
Dealership Inventory API
Cars, customers and sales orders over PostgreSQL
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS
from database.connection import init_database, close_database
from api.routes import health, carros, clientes, pedidos
from services.dependencies import DealershipServices
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)


def create_app(services: Optional[DealershipServices] = None) -> FastAPI:
    """
    Build the FastAPI application.

    With no services given, the lifespan opens the database pool on startup
    and closes it on shutdown. Passing services skips the database entirely.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if services is not None:
            app.state.services = services
            yield
            return

        pool = await init_database()
        app.state.services = DealershipServices.from_pool(pool)
        try:
            yield
        finally:
            await close_database(pool)

    app = FastAPI(
        title="Dealership Inventory API",
        description="CRUD API for a car dealership's cars, customers and sales orders",
        version="1.0.0",
        lifespan=lifespan
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(carros.router, tags=["Carros"])
    app.include_router(clientes.router, tags=["Clientes"])
    app.include_router(pedidos.router, tags=["Pedidos"])

    return app


# Served by uvicorn from main.py at the project root
app = create_app()

"""
Service wiring for request handlers.

Services are built once at application startup and stored on app.state;
handlers receive them through FastAPI dependencies.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import Request

from services.carros_service import CarrosService
from services.clientes_service import ClientesService
from services.pedidos_service import PedidosService


@dataclass
class DealershipServices:
    """Data access services shared by all requests"""
    carros: Any
    clientes: Any
    pedidos: Any
    pool: Any = None

    @classmethod
    def from_pool(cls, pool) -> "DealershipServices":
        return cls(
            carros=CarrosService(pool),
            clientes=ClientesService(pool),
            pedidos=PedidosService(pool),
            pool=pool
        )


def get_services(request: Request) -> DealershipServices:
    return request.app.state.services


def get_carros_service(request: Request) -> CarrosService:
    return get_services(request).carros


def get_clientes_service(request: Request) -> ClientesService:
    return get_services(request).clientes


def get_pedidos_service(request: Request) -> PedidosService:
    return get_services(request).pedidos

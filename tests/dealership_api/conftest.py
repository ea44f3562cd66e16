"""
pytest configuration and fixtures for the dealership API suite
"""

import pytest
from fastapi.testclient import TestClient

from app import create_app
from services.dependencies import DealershipServices
from infrastructure import InMemoryCarrosService, InMemoryClientesService, InMemoryPedidosService


@pytest.fixture
def services():
    """Fresh in-memory services for each test"""
    carros = InMemoryCarrosService()
    clientes = InMemoryClientesService()
    return DealershipServices(
        carros=carros,
        clientes=clientes,
        pedidos=InMemoryPedidosService(carros, clientes)
    )


@pytest.fixture
def client(services):
    """Test client wired to the in-memory services"""
    with TestClient(create_app(services)) as test_client:
        yield test_client


@pytest.fixture
def carro_payload():
    return {"marca": "Toyota", "modelo": "Corolla", "ano": 2022, "cor": "preto"}


@pytest.fixture
def cliente_payload():
    return {"nome": "Maria Souza", "cpf": "123.456.789-00", "telefone": "(11) 98888-7777"}

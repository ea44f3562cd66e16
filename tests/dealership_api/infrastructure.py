"""
Testing infrastructure for the dealership API suite
In-memory services with the same coroutine contract as the asyncpg services,
plus helpers for mocking an asyncpg pool.
"""

from typing import Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

from models.carro import Carro
from models.cliente import Cliente
from models.pedido_venda import PedidoVenda, PedidoVendaListagem


class InMemoryService:
    """Dict-backed storage keyed by the entity id field"""

    id_field: str = ""

    def __init__(self):
        self.rows: Dict[int, object] = {}
        self.next_id = 1
        self.broken = False

    def _id(self, entity) -> int:
        return getattr(entity, self.id_field)

    async def listar(self) -> Optional[List]:
        if self.broken:
            return None
        return [self.rows[key].model_copy() for key in sorted(self.rows)]

    async def cadastrar(self, entity) -> bool:
        if self.broken:
            return False
        setattr(entity, self.id_field, self.next_id)
        self.rows[self.next_id] = entity.model_copy()
        self.next_id += 1
        return True

    async def remover(self, record_id: int) -> bool:
        if self.broken:
            return False
        return self.rows.pop(record_id, None) is not None

    async def atualizar(self, entity) -> bool:
        if self.broken or self._id(entity) not in self.rows:
            return False
        self.rows[self._id(entity)] = entity.model_copy()
        return True


class InMemoryCarrosService(InMemoryService):
    id_field = "id_carro"


class InMemoryClientesService(InMemoryService):
    id_field = "id_cliente"


class InMemoryPedidosService(InMemoryService):
    """Emulates the foreign keys and the joined listing of pedido_venda"""

    id_field = "id_pedido"

    def __init__(self, carros: InMemoryCarrosService, clientes: InMemoryClientesService):
        super().__init__()
        self.carros = carros
        self.clientes = clientes

    def _references_exist(self, pedido: PedidoVenda) -> bool:
        return pedido.id_carro in self.carros.rows and pedido.id_cliente in self.clientes.rows

    async def listar(self) -> Optional[List[PedidoVendaListagem]]:
        if self.broken:
            return None
        listagem = []
        for key in sorted(self.rows):
            pedido = self.rows[key]
            if not self._references_exist(pedido):
                continue
            carro: Carro = self.carros.rows[pedido.id_carro]
            cliente: Cliente = self.clientes.rows[pedido.id_cliente]
            listagem.append(PedidoVendaListagem(
                id_pedido=pedido.id_pedido,
                id_carro=pedido.id_carro,
                id_cliente=pedido.id_cliente,
                nome_cliente=cliente.nome,
                cpf_cliente=cliente.cpf,
                marca_carro=carro.marca,
                modelo_carro=carro.modelo,
                data_pedido=pedido.data_pedido,
                valor_pedido=pedido.valor_pedido
            ))
        return listagem

    async def cadastrar(self, pedido: PedidoVenda) -> bool:
        if not self._references_exist(pedido):
            return False
        return await super().cadastrar(pedido)

    async def atualizar(self, pedido: PedidoVenda) -> bool:
        if not self._references_exist(pedido):
            return False
        return await super().atualizar(pedido)


class ExplodingService:
    """Every operation raises, as if the service itself were broken"""

    async def listar(self):
        raise RuntimeError("listar exploded")

    async def cadastrar(self, entity):
        raise RuntimeError("cadastrar exploded")

    async def remover(self, record_id):
        raise RuntimeError("remover exploded")

    async def atualizar(self, entity):
        raise RuntimeError("atualizar exploded")


def make_pool(conn) -> MagicMock:
    """Mock asyncpg pool whose acquire() yields the given connection"""
    pool = MagicMock()
    acquire_cm = MagicMock()
    acquire_cm.__aenter__ = AsyncMock(return_value=conn)
    acquire_cm.__aexit__ = AsyncMock(return_value=False)
    pool.acquire.return_value = acquire_cm
    return pool

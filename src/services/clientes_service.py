"""
Customers service - data access for the cliente table
"""

import logging
from typing import List, Optional

from models.cliente import Cliente
from services.base_service import BaseService

logger = logging.getLogger(__name__)


class ClientesService(BaseService):
    """Service for customer operations"""

    table_name = "cliente"
    id_field = "id_cliente"
    resource_label = "Cliente"

    async def listar(self) -> Optional[List[Cliente]]:
        try:
            rows = await self._fetch("SELECT id_cliente, nome, cpf, telefone FROM cliente ORDER BY id_cliente;")
            return [
                Cliente(
                    id_cliente=row["id_cliente"],
                    nome=row["nome"],
                    cpf=row["cpf"],
                    telefone=row["telefone"]
                )
                for row in rows
            ]
        except Exception as e:
            logger.error(f"Erro ao buscar lista de clientes: {e}", exc_info=True)
            return None

    async def cadastrar(self, cliente: Cliente) -> bool:
        try:
            query = """
                INSERT INTO cliente (nome, cpf, telefone)
                VALUES ($1, $2, $3)
                RETURNING id_cliente;
            """
            rows = await self._fetch(query, cliente.nome, cliente.cpf, cliente.telefone)

            if len(rows) == 1:
                cliente.id_cliente = rows[0]["id_cliente"]
                logger.info(f"Cliente cadastrado com sucesso! ID do cliente: {cliente.id_cliente}")
                return True

            return False

        except Exception as e:
            logger.error(f"Erro ao cadastrar o cliente: {e}", exc_info=True)
            return False

    async def atualizar(self, cliente: Cliente) -> bool:
        try:
            query = """
                UPDATE cliente
                SET nome = $1, cpf = $2, telefone = $3
                WHERE id_cliente = $4;
            """
            count = await self._execute(query, cliente.nome, cliente.cpf, cliente.telefone, cliente.id_cliente)

            if count != 0:
                logger.info(f"Cliente atualizado com sucesso! ID do cliente: {cliente.id_cliente}")
                return True

            return False

        except Exception as e:
            logger.error(f"Erro ao atualizar o cliente {cliente.id_cliente}: {e}", exc_info=True)
            return False

"""
Sales orders service - data access for the pedido_venda table
"""

import logging
from decimal import Decimal
from typing import List, Optional

from models.pedido_venda import PedidoVenda, PedidoVendaListagem
from services.base_service import BaseService

logger = logging.getLogger(__name__)

# Only active rows of all three tables show up in the order listing
LISTAGEM_PEDIDOS_QUERY = """
    SELECT pv.id_pedido, pv.id_carro, pv.id_cliente, pv.data_pedido, pv.valor_pedido,
           cl.nome AS nome_cliente, cl.cpf AS cpf_cliente,
           ca.marca AS marca_carro, ca.modelo AS modelo_carro
    FROM pedido_venda pv
    JOIN cliente cl ON pv.id_cliente = cl.id_cliente
    JOIN carro ca ON pv.id_carro = ca.id_carro
    WHERE pv.situacao = TRUE AND cl.situacao = TRUE AND ca.situacao = TRUE
    ORDER BY pv.id_pedido;
"""


class PedidosService(BaseService):
    """Service for sales order operations"""

    table_name = "pedido_venda"
    id_field = "id_pedido"
    resource_label = "Pedido"

    async def listar(self) -> Optional[List[PedidoVendaListagem]]:
        """
        List active sales orders with customer and car display fields

        Returns:
            Denormalized order rows, or None if the query fails
        """
        try:
            rows = await self._fetch(LISTAGEM_PEDIDOS_QUERY)
            return [
                PedidoVendaListagem(
                    id_pedido=row["id_pedido"],
                    id_carro=row["id_carro"],
                    id_cliente=row["id_cliente"],
                    nome_cliente=row["nome_cliente"],
                    cpf_cliente=row["cpf_cliente"],
                    marca_carro=row["marca_carro"],
                    modelo_carro=row["modelo_carro"],
                    data_pedido=row["data_pedido"],
                    # numeric comes back as Decimal (or text on older schemas)
                    valor_pedido=float(row["valor_pedido"])
                )
                for row in rows
            ]
        except Exception as e:
            logger.error(f"Erro ao buscar lista de pedidos: {e}", exc_info=True)
            return None

    async def cadastrar(self, pedido: PedidoVenda) -> bool:
        """
        Insert a sales order. Existence of the referenced car and customer is
        left to the database foreign keys.
        """
        try:
            query = """
                INSERT INTO pedido_venda (id_carro, id_cliente, data_pedido, valor_pedido)
                VALUES ($1, $2, $3, $4)
                RETURNING id_pedido;
            """
            rows = await self._fetch(
                query,
                pedido.id_carro,
                pedido.id_cliente,
                pedido.data_pedido,
                Decimal(str(pedido.valor_pedido))
            )

            if len(rows) == 1:
                pedido.id_pedido = rows[0]["id_pedido"]
                logger.info(f"Pedido cadastrado com sucesso! ID do pedido: {pedido.id_pedido}")
                return True

            return False

        except Exception as e:
            logger.error(f"Erro ao cadastrar o pedido: {e}", exc_info=True)
            return False

    async def atualizar(self, pedido: PedidoVenda) -> bool:
        try:
            query = """
                UPDATE pedido_venda
                SET id_carro = $1, id_cliente = $2, data_pedido = $3, valor_pedido = $4
                WHERE id_pedido = $5;
            """
            count = await self._execute(
                query,
                pedido.id_carro,
                pedido.id_cliente,
                pedido.data_pedido,
                Decimal(str(pedido.valor_pedido)),
                pedido.id_pedido
            )

            if count != 0:
                logger.info(f"Pedido atualizado com sucesso! ID do pedido: {pedido.id_pedido}")
                return True

            return False

        except Exception as e:
            logger.error(f"Erro ao atualizar o pedido {pedido.id_pedido}: {e}", exc_info=True)
            return False

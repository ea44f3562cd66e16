"""
Cars service - data access for the carro table
"""

import logging
from typing import List, Optional

from models.carro import Carro
from services.base_service import BaseService

logger = logging.getLogger(__name__)


class CarrosService(BaseService):
    """Service for car inventory operations"""

    table_name = "carro"
    id_field = "id_carro"
    resource_label = "Carro"

    async def listar(self) -> Optional[List[Carro]]:
        """
        List every car in the table

        Returns:
            List of Carro ordered by id, or None if the query fails
        """
        try:
            rows = await self._fetch("SELECT id_carro, marca, modelo, ano, cor FROM carro ORDER BY id_carro;")
            return [
                Carro(
                    id_carro=row["id_carro"],
                    marca=row["marca"],
                    modelo=row["modelo"],
                    ano=row["ano"],
                    cor=row["cor"]
                )
                for row in rows
            ]
        except Exception as e:
            logger.error(f"Erro ao buscar lista de carros: {e}", exc_info=True)
            return None

    async def cadastrar(self, carro: Carro) -> bool:
        """
        Insert a car and store the generated id on the entity

        Returns:
            True if exactly one row was inserted
        """
        try:
            query = """
                INSERT INTO carro (marca, modelo, ano, cor)
                VALUES ($1, $2, $3, $4)
                RETURNING id_carro;
            """
            rows = await self._fetch(query, carro.marca, carro.modelo, carro.ano, carro.cor)

            if len(rows) == 1:
                carro.id_carro = rows[0]["id_carro"]
                logger.info(f"Carro cadastrado com sucesso! ID do carro: {carro.id_carro}")
                return True

            return False

        except Exception as e:
            logger.error(f"Erro ao cadastrar o carro: {e}", exc_info=True)
            return False

    async def atualizar(self, carro: Carro) -> bool:
        """Update every mutable column of a car by id"""
        try:
            query = """
                UPDATE carro
                SET marca = $1, modelo = $2, ano = $3, cor = $4
                WHERE id_carro = $5;
            """
            count = await self._execute(query, carro.marca, carro.modelo, carro.ano, carro.cor, carro.id_carro)

            if count != 0:
                logger.info(f"Carro atualizado com sucesso! ID do carro: {carro.id_carro}")
                return True

            return False

        except Exception as e:
            logger.error(f"Erro ao atualizar o carro {carro.id_carro}: {e}", exc_info=True)
            return False

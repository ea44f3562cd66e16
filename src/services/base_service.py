"""
Base service layer for per-table data access over an asyncpg pool
"""

import logging
from typing import Any, List

import asyncpg

logger = logging.getLogger(__name__)


def affected_rows(status: str) -> int:
    """
    Extract the row count from an asyncpg command status tag.

    asyncpg returns tags such as "DELETE 1", "UPDATE 0" or "INSERT 0 1";
    the row count is always the last token.
    """
    try:
        return int(status.split()[-1])
    except (AttributeError, IndexError, ValueError):
        logger.warning(f"Unexpected command status: {status!r}")
        return 0


class BaseService:
    """
    Data access for a single table.

    Subclasses set table_name/id_field and implement listar, cadastrar and
    atualizar. Every operation downgrades database errors to None/False and
    logs them; callers never see the exception.
    """

    table_name: str = ""
    id_field: str = ""
    resource_label: str = ""

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool
        logger.info(f"{type(self).__name__} initialized for table: {self.table_name}")

    async def _fetch(self, query: str, *params: Any) -> List[asyncpg.Record]:
        async with self.pool.acquire() as conn:
            return await conn.fetch(query, *params)

    async def _execute(self, query: str, *params: Any) -> int:
        async with self.pool.acquire() as conn:
            status = await conn.execute(query, *params)
        return affected_rows(status)

    async def remover(self, record_id: int) -> bool:
        """
        Delete a record by primary key

        Args:
            record_id: Primary key value of record to delete

        Returns:
            True if at least one row was removed
        """
        try:
            query = f"DELETE FROM {self.table_name} WHERE {self.id_field} = $1;"
            count = await self._execute(query, record_id)

            if count != 0:
                logger.info(f"{self.resource_label} removido com sucesso. ID removido: {record_id}")
                return True

            logger.info(f"No {self.table_name} row removed for id {record_id}")
            return False

        except Exception as e:
            logger.error(f"Erro ao remover {self.resource_label} {record_id}: {e}", exc_info=True)
            return False

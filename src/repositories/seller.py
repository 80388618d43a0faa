import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Callable

import asyncpg

from src.errors import StorageError
from src.models.seller import STORAGE_ERRORS, SellerRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SellerRepository:
    pool_getter: Callable[[], asyncpg.Pool | None]

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[asyncpg.Connection]:
        pool = self.pool_getter()
        if pool is None:
            raise StorageError('Database pool is not available')

        # errors from the record body are already StorageError and pass through
        try:
            async with pool.acquire() as conn:
                yield conn
        except STORAGE_ERRORS as exc:
            logger.error('Seller database connection failed: %s', exc, exc_info=True)
            raise StorageError(f'Database connection failed: {exc}') from exc

    async def insert(self, seller: SellerRecord) -> int:
        async with self._connection() as conn:
            return await seller.insert(conn)

    async def update(self, seller: SellerRecord) -> int:
        async with self._connection() as conn:
            return await seller.update(conn)

    async def delete(self, seller: SellerRecord) -> int:
        async with self._connection() as conn:
            return await seller.delete(conn)

    async def get_by_id(self, seller_id: int) -> SellerRecord | None:
        async with self._connection() as conn:
            return await SellerRecord.get_by_id(conn, seller_id)

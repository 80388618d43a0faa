import logging
import os
from dataclasses import dataclass
from typing import Optional

import asyncpg

logger = logging.getLogger(__name__)

_db_pool: Optional[asyncpg.Pool] = None


@dataclass(frozen=True)
class DatabaseSettings:
    dsn: str
    connect_timeout: float = 2.0
    min_size: int = 1
    max_size: int = 10

    @classmethod
    def from_env(cls) -> 'DatabaseSettings | None':
        dsn = os.getenv('DATABASE_URL')
        if not dsn:
            return None

        return cls(
            dsn=dsn,
            connect_timeout=float(os.getenv('DATABASE_CONNECT_TIMEOUT', '2')),
            min_size=int(os.getenv('DATABASE_POOL_MIN_SIZE', '1')),
            max_size=int(os.getenv('DATABASE_POOL_MAX_SIZE', '10')),
        )


async def init_db(settings: DatabaseSettings | None = None) -> None:
    """Create the shared seller pool unless one already exists.

    Without explicit settings the environment is read; a missing DATABASE_URL
    or a failed connection leaves the pool unset.
    """
    global _db_pool
    if _db_pool is not None:
        return

    settings = settings or DatabaseSettings.from_env()
    if settings is None:
        logger.warning('DATABASE_URL is not set. Seller storage is disabled.')
        return

    try:
        _db_pool = await asyncpg.create_pool(
            dsn=settings.dsn,
            timeout=settings.connect_timeout,
            min_size=settings.min_size,
            max_size=settings.max_size,
        )
        logger.info('Seller database pool initialized (max_size=%s)', settings.max_size)
    except Exception as exc:
        logger.warning('Seller database pool initialization failed: %s', exc)
        _db_pool = None


async def close_db() -> None:
    global _db_pool
    if _db_pool is None:
        return

    await _db_pool.close()
    _db_pool = None
    logger.info('Seller database pool closed')


def get_db_pool() -> Optional[asyncpg.Pool]:
    return _db_pool

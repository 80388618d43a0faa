from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def conn():
    conn = AsyncMock()
    conn.execute = AsyncMock(return_value='UPDATE 1')
    conn.fetchval = AsyncMock(return_value=1)
    conn.fetchrow = AsyncMock(return_value=None)
    return conn


@pytest.fixture
def mock_pool(conn):
    pool = MagicMock()
    acquire_ctx = AsyncMock()
    acquire_ctx.__aenter__.return_value = conn
    pool.acquire.return_value = acquire_ctx
    return pool


@pytest.fixture
def mock_pool_getter(mock_pool):
    return lambda: mock_pool

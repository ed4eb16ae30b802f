"""
Shared fixtures for integration tests.

PostgreSQL-backed tests are skipped when the configured database
cannot be reached.
"""

from collections.abc import AsyncGenerator

import psycopg
import pytest
import pytest_asyncio
from psycopg_pool import AsyncConnectionPool

from src.adapters.repository.postgres import PostgresAccountRepository, run_migrations
from src.config.settings import get_settings


def _database_available() -> bool:
    try:
        with psycopg.connect(get_settings().database_url, connect_timeout=2):
            return True
    except psycopg.Error:
        return False


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip tests marked integration when the database is unreachable."""
    integration_items = [item for item in items if "integration" in item.keywords]
    if not integration_items or _database_available():
        return
    skip = pytest.mark.skip(reason="PostgreSQL is not reachable")
    for item in integration_items:
        item.add_marker(skip)


@pytest_asyncio.fixture
async def pool() -> AsyncGenerator[AsyncConnectionPool, None]:
    """Open a connection pool, migrate, and start every test with an empty table."""
    settings = get_settings()
    pool = AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=False,
    )
    await pool.open()
    await run_migrations(pool)
    async with pool.connection() as conn:
        await conn.execute("DELETE FROM accounts")
    yield pool
    await pool.close()


@pytest.fixture
def pg_repository(pool: AsyncConnectionPool) -> PostgresAccountRepository:
    """Create repository instance for each test."""
    return PostgresAccountRepository(pool)

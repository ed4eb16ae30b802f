"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL over an async connection pool.

Identifiers are generated by the database (gen_random_uuid()) inside the
same INSERT that stores the row, so creation is a single atomic statement:
either the full record exists with its id, or nothing was written.
"""

import logging
from pathlib import Path

from psycopg_pool import AsyncConnectionPool

from src.domain.ports import AccountRecord, NewAccount

logger = logging.getLogger(__name__)


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool for database connections
        """
        self._pool = pool

    async def create(self, account: NewAccount) -> AccountRecord:
        """
        Insert a new account and return it with its assigned id.

        No retry on failure: psycopg errors propagate unmodified.

        Args:
            account: Name, email and bcrypt password hash

        Returns:
            AccountRecord with the database-generated UUID as a string
        """
        sql = """
            INSERT INTO accounts (name, email, password_hash)
            VALUES (%s, %s, %s)
            RETURNING id::text
        """

        async with self._pool.connection() as conn, conn.cursor() as cursor:
            await cursor.execute(sql, (account.name, account.email, account.password_hash))
            row = await cursor.fetchone()
            await conn.commit()

        account_id = row[0]
        logger.debug("Inserted account %s", account_id)
        return AccountRecord(
            id=account_id,
            name=account.name,
            email=account.email,
            password_hash=account.password_hash,
        )


async def run_migrations(pool: AsyncConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 AsyncConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            async with pool.connection() as conn:
                await conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e

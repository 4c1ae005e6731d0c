"""
Shared fixtures for integration tests.

Integration tests run against a real PostgreSQL database reachable through
DATABASE_URL. They are skipped when the variable is not set.
"""

import os
from collections.abc import Callable, Generator

import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresAccountRepository, run_migrations


@pytest.fixture(scope="session")
def database_url() -> str:
    """DATABASE_URL of the test database."""
    url = os.environ.get("DATABASE_URL")
    if not url:
        pytest.skip("DATABASE_URL not set")
    return url


@pytest.fixture(scope="module")
def pool(database_url: str) -> Generator[ConnectionPool, None, None]:
    """Create connection pool with the schema migrated."""
    pool = ConnectionPool(conninfo=database_url, min_size=1, max_size=10, open=True)
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def repository(pool: ConnectionPool) -> PostgresAccountRepository:
    """Create repository instance for each test."""
    return PostgresAccountRepository(pool)


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean users table before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM users")
        conn.commit()
    yield


@pytest.fixture
def count_rows(pool: ConnectionPool) -> Callable[[str], int]:
    """Return a function counting stored accounts for an email."""

    def _count(email: str) -> int:
        with pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("SELECT COUNT(*) FROM users WHERE email = %s", (email,))
            return cursor.fetchone()[0]

    return _count

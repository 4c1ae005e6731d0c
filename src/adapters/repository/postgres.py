"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Duplicate Detection:
-------------------
Email uniqueness is enforced by the database through the users_email_key
constraint, so concurrent registrations for one email resolve to exactly
one winner. A failed INSERT is classified from psycopg's structured error:
the UniqueViolation class (SQLSTATE 23505) together with the constraint
name reported in the error diagnostics. Every other psycopg error becomes
a PersistenceError. Driver messages are chained, never surfaced.
"""

import logging
from pathlib import Path

import psycopg
from psycopg import errors
from psycopg.rows import class_row
from psycopg_pool import ConnectionPool

from src.domain.exceptions import EmailAlreadyExists, PersistenceError
from src.domain.ports import Account

logger = logging.getLogger(__name__)

EMAIL_UNIQUE_CONSTRAINT = "users_email_key"


def is_email_conflict(error: psycopg.Error) -> bool:
    """Return True if the error is a unique violation of the email constraint."""
    return (
        isinstance(error, errors.UniqueViolation)
        and error.diag.constraint_name == EMAIL_UNIQUE_CONSTRAINT
    )


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def create(
        self,
        email: str,
        password_hash: str,
        fullname: str,
        discord: str,
        age: int,
        verification_code: str,
    ) -> int:
        """
        Insert a new unverified account in a single transaction.

        Args:
            email: Normalized email address (lowercase, stripped)
            password_hash: bcrypt-hashed password from domain layer
            fullname: Display name
            discord: Discord handle
            age: Age in years
            verification_code: 6-character alphanumeric code

        Returns:
            Identifier of the inserted row

        Raises:
            EmailAlreadyExists: users_email_key was violated
            PersistenceError: Any other database failure
        """
        sql = """
            INSERT INTO users (email, password_hash, fullname, discord, age, verification_code, is_verified)
            VALUES (%s, %s, %s, %s, %s, %s, FALSE)
            RETURNING id
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    sql, (email, password_hash, fullname, discord, age, verification_code)
                )
                row = cursor.fetchone()
                conn.commit()
        except psycopg.Error as e:
            if is_email_conflict(e):
                raise EmailAlreadyExists(email) from e
            logger.error("Account insert failed: %s", type(e).__name__)
            raise PersistenceError("Account could not be stored") from e

        return row[0]

    def get_by_email(self, email: str) -> Account | None:
        """
        Fetch the account stored for an email.

        Args:
            email: Normalized email address

        Returns:
            Account if found, None otherwise

        Raises:
            PersistenceError: On database failure
        """
        sql = """
            SELECT id, email, password_hash, fullname, discord, age,
                   verification_code, is_verified, created_at
            FROM users
            WHERE email = %s
        """

        try:
            with self._pool.connection() as conn, conn.cursor(
                row_factory=class_row(Account)
            ) as cursor:
                cursor.execute(sql, (email,))
                return cursor.fetchone()
        except psycopg.Error as e:
            raise PersistenceError("Account could not be loaded") from e


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e

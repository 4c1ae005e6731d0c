"""Repository adapters - Database implementations."""

from .postgres import PostgresAccountRepository, is_email_conflict, run_migrations

__all__ = ["PostgresAccountRepository", "is_email_conflict", "run_migrations"]

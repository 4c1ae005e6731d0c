"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
Everything is read from app.state, populated once during lifespan startup.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresAccountRepository
from src.config.settings import Settings
from src.domain.ports import EmailSender
from src.domain.registration import RegistrationService


def get_app_settings(request: Request) -> Settings:
    """Get the settings loaded at startup."""
    return request.app.state.settings


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresAccountRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresAccountRepository(pool)


def get_email_sender(request: Request) -> EmailSender:
    """Get the email sender built at startup."""
    return request.app.state.email_sender


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository, email sender and bcrypt cost.
    """
    settings = get_app_settings(request)
    return RegistrationService(
        repository=get_repository(request),
        email_sender=get_email_sender(request),
        bcrypt_cost=settings.bcrypt_cost,
    )

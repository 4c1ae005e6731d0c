"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for account registration.
It defines its own port interfaces for infrastructure abstraction, so the
PostgreSQL and SMTP adapters can be swapped without touching the workflow.
"""

from .exceptions import (
    AuthenticationFailed,
    DispatchError,
    EmailAlreadyExists,
    InvalidRecipient,
    PersistenceError,
    RegistrationError,
    TransportUnavailable,
)
from .ports import Account, AccountRepository, EmailSender
from .registration import RegistrationService

__all__ = [
    "Account",
    "AccountRepository",
    "AuthenticationFailed",
    "DispatchError",
    "EmailAlreadyExists",
    "EmailSender",
    "InvalidRecipient",
    "PersistenceError",
    "RegistrationError",
    "RegistrationService",
    "TransportUnavailable",
]

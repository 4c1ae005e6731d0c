"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.

Hierarchy:
    RegistrationError
    +-- EmailAlreadyExists
    +-- PersistenceError
    +-- DispatchError
        +-- AuthenticationFailed
        +-- TransportUnavailable
        +-- InvalidRecipient
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class EmailAlreadyExists(RegistrationError):
    """An account with this email is already stored."""

    pass


class PersistenceError(RegistrationError):
    """The account could not be stored for a reason other than a duplicate email."""

    pass


class DispatchError(RegistrationError):
    """The verification email could not be delivered."""

    pass


class AuthenticationFailed(DispatchError):
    """The mail relay rejected the sender credentials."""

    pass


class TransportUnavailable(DispatchError):
    """The mail relay could not be reached or aborted the exchange."""

    pass


class InvalidRecipient(DispatchError):
    """The destination address is malformed or was refused by the relay."""

    pass

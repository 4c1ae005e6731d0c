"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class Account:
    """
    Stored account record.

    Created once by the registration workflow with is_verified=False.
    Verification and redemption of the code happen outside this service.
    """

    id: int
    email: str
    password_hash: str
    fullname: str
    discord: str
    age: int
    verification_code: str | None
    is_verified: bool
    created_at: datetime | None = None


class AccountRepository(Protocol):
    """Port interface for account persistence."""

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
        Insert a new unverified account.

        Args:
            email: Normalized email address
            password_hash: bcrypt hashed password
            fullname: Display name
            discord: Discord handle
            age: Age in years
            verification_code: 6-character alphanumeric code

        Returns:
            Identifier of the new account

        Raises:
            EmailAlreadyExists: If an account with this email exists
            PersistenceError: On any other storage failure
        """
        ...

    def get_by_email(self, email: str) -> Account | None:
        """Return the account stored for a normalized email, if any."""
        ...


class EmailSender(Protocol):
    """Port interface for email delivery."""

    def send_verification_code(self, email: str, fullname: str, code: str) -> None:
        """
        Send verification code to email address.

        Args:
            email: Recipient email address
            fullname: Recipient name used in the greeting
            code: 6-character verification code

        Raises:
            DispatchError: If the message could not be delivered
        """
        ...

"""
Registration domain service - account creation and verification dispatch.

This module contains the core business logic for user registration:
credential preparation, verification code generation, account persistence
and delivery of the verification email.

Registration Workflow
=====================

States:
- RECEIVED:  Submission accepted by the HTTP layer
- PREPARED:  Password hashed, verification code generated
- PERSISTED: Account stored, unverified, with the code on record
- NOTIFIED:  Verification email handed to the mail relay
- COMPLETE:  Registration succeeded

Failure exits:
    PREPARED  -> DUPLICATE_REJECTED   (EmailAlreadyExists)
    PREPARED  -> PERSISTENCE_FAILED   (PersistenceError)
    PERSISTED -> NOTIFICATION_FAILED  (DispatchError)

The email is only sent after the account is durably stored, so the code
in the message is always the code on record. A failed dispatch does not
remove the account: it stays unverified and the code can be re-sent.
"""

import logging
from dataclasses import dataclass

from .exceptions import DispatchError
from .ports import AccountRepository, EmailSender
from .security import generate_verification_code, hash_password

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: email normalization,
    password hashing, code generation, persistence and notification.
    """

    repository: AccountRepository
    email_sender: EmailSender
    bcrypt_cost: int = 10

    def register(
        self,
        email: str,
        password: str,
        fullname: str,
        discord: str,
        age: int,
    ) -> str:
        """
        Register a new account and send its verification code.

        Args:
            email: User's email address (will be normalized)
            password: User's password (will be hashed)
            fullname: Display name, also used in the email greeting
            discord: Discord handle
            age: Age in years

        Returns:
            Normalized email address

        Raises:
            EmailAlreadyExists: If email is already registered
            PersistenceError: If the account could not be stored
            DispatchError: If the account was stored but the email failed
        """
        normalized_email = self._normalize_email(email)
        password_hash = hash_password(password, rounds=self.bcrypt_cost)
        code = generate_verification_code()

        account_id = self.repository.create(
            normalized_email, password_hash, fullname, discord, age, code
        )
        logger.info("Account %s created, sending verification code", account_id)

        try:
            self.email_sender.send_verification_code(normalized_email, fullname, code)
        except DispatchError as e:
            logger.warning(
                "Account %s stored unverified, verification email failed: %s",
                account_id,
                type(e).__name__,
            )
            raise

        return normalized_email

    def _normalize_email(self, email: str) -> str:
        """
        Normalize email address for consistent storage and lookup.

        Applies: strip whitespace + lowercase
        """
        return email.strip().lower()

"""
SMTP relay email sender adapter - Implements EmailSender protocol.

Delivers the verification email through an authenticated SMTP relay
(Gmail by default). One attempt per call, bounded by a socket timeout.
Transport failures are translated into DispatchError subclasses and
raised to the caller; nothing is retried or swallowed here.
"""

import logging
import smtplib
from email.headerregistry import Address
from email.message import EmailMessage

from email_validator import EmailNotValidError, validate_email

from src.config.settings import Settings
from src.domain.exceptions import (
    AuthenticationFailed,
    InvalidRecipient,
    TransportUnavailable,
)

from .templates import (
    VERIFICATION_SUBJECT,
    render_verification_email,
    render_verification_text,
)

logger = logging.getLogger(__name__)


class SmtpEmailSender:
    """
    Implements EmailSender protocol via smtplib.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_name: str = "Dutchville",
        use_ssl: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._from_name = from_name
        self._use_ssl = use_ssl
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpEmailSender":
        """Build a sender from application settings."""
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_email,
            password=settings.smtp_password,
            from_name=settings.email_from_name,
            use_ssl=settings.smtp_use_ssl,
            timeout=settings.smtp_timeout_seconds,
        )

    def build_message(self, email: str, fullname: str, code: str) -> EmailMessage:
        """
        Build the verification message.

        Raises:
            InvalidRecipient: If the destination address is malformed
        """
        try:
            recipient = validate_email(email, check_deliverability=False).normalized
        except EmailNotValidError as e:
            raise InvalidRecipient("Malformed recipient address") from e

        msg = EmailMessage()
        msg["Subject"] = VERIFICATION_SUBJECT
        msg["From"] = Address(display_name=self._from_name, addr_spec=self._username)
        msg["To"] = recipient
        msg.set_content(render_verification_text(fullname, code))
        msg.add_alternative(render_verification_email(fullname, code), subtype="html")
        return msg

    def send_verification_code(self, email: str, fullname: str, code: str) -> None:
        """
        Send the verification email through the relay.

        Args:
            email: Recipient email address (normalized by domain layer)
            fullname: Recipient name for the greeting
            code: 6-character verification code

        Raises:
            InvalidRecipient: Malformed address or recipient refused by relay
            AuthenticationFailed: Relay rejected the sender credentials
            TransportUnavailable: Connection, TLS, timeout or protocol failure
        """
        msg = self.build_message(email, fullname, code)

        try:
            with self._connect() as smtp:
                if not self._use_ssl:
                    smtp.starttls()
                smtp.login(self._username, self._password)
                smtp.send_message(msg)
        except smtplib.SMTPAuthenticationError as e:
            logger.error("SMTP authentication failed for relay %s", self._host)
            raise AuthenticationFailed("Mail relay rejected credentials") from e
        except smtplib.SMTPRecipientsRefused as e:
            logger.warning("SMTP relay refused recipient")
            raise InvalidRecipient("Recipient refused by mail relay") from e
        except (smtplib.SMTPException, OSError) as e:
            logger.error("SMTP delivery via %s failed: %s", self._host, type(e).__name__)
            raise TransportUnavailable("Mail relay unavailable") from e

        logger.info("Verification email sent via %s", self._host)

    def _connect(self) -> smtplib.SMTP:
        if self._use_ssl:
            return smtplib.SMTP_SSL(self._host, self._port, timeout=self._timeout)
        return smtplib.SMTP(self._host, self._port, timeout=self._timeout)

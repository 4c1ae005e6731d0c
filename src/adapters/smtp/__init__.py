"""Email sender adapters - SMTP relay and console implementations."""

from src.config.settings import Settings

from .console import ConsoleEmailSender
from .relay import SmtpEmailSender


def build_email_sender(settings: Settings) -> SmtpEmailSender | ConsoleEmailSender:
    """Select the email sender configured by EMAIL_BACKEND."""
    if settings.email_backend == "console":
        return ConsoleEmailSender()
    return SmtpEmailSender.from_settings(settings)


__all__ = ["ConsoleEmailSender", "SmtpEmailSender", "build_email_sender"]

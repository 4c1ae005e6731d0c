"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging verification codes for local development.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Selected with EMAIL_BACKEND=console; never fails.
    """

    def send_verification_code(self, email: str, fullname: str, code: str) -> None:
        """
        Log verification code (simulates email delivery).

        The code is logged at INFO level to be visible in container logs.

        Args:
            email: Recipient email address (normalized by domain layer)
            fullname: Recipient name
            code: 6-character verification code
        """
        logger.info("[VERIFICATION] Email: %s Name: %s Code: %s", email, fullname, code)

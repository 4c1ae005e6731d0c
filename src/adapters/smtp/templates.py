"""Verification email content."""

from html import escape

VERIFICATION_SUBJECT = "Dutchville Account Verification"

_HTML_TEMPLATE = """\
<html>
    <body style="font-family: Arial, sans-serif; text-align: center; background-color: #f0f2f5; padding: 30px;">
        <div style="background-color: #ffffff; border-radius: 10px; padding: 40px; display: inline-block;">
            <h2 style="color: #4A90E2;">Welcome to Dutchville!</h2>
            <p>Hello, <strong>{fullname}</strong></p>
            <p>Your verification code is:</p>
            <h1 style="letter-spacing: 4px; color: #333;">{code}</h1>
            <p>Please enter this code to verify your account.</p>
            <hr style="margin-top: 30px; margin-bottom: 10px;">
            <p style="font-size: 12px; color: #888;">This is an automated message, please do not reply.</p>
        </div>
    </body>
</html>
"""

_TEXT_TEMPLATE = """\
Welcome to Dutchville!

Hello, {fullname}

Your verification code is: {code}

Please enter this code to verify your account.
This is an automated message, please do not reply.
"""


def render_verification_email(fullname: str, code: str) -> str:
    """Render the HTML body. The name is escaped; the code is shown as plain text."""
    return _HTML_TEMPLATE.format(fullname=escape(fullname), code=escape(code))


def render_verification_text(fullname: str, code: str) -> str:
    """Render the plain-text alternative."""
    return _TEXT_TEMPLATE.format(fullname=fullname, code=code)

"""
Credential and verification code primitives.

Verification codes are short human-readable tokens; they are not secrets
derived from anything else and carry no expiry here. Passwords are stored
as bcrypt hashes only.
"""

import secrets
import string

import bcrypt

VERIFICATION_CODE_ALPHABET = string.ascii_letters + string.digits
VERIFICATION_CODE_LENGTH = 6

# bcrypt only reads the first 72 bytes of its input.
_BCRYPT_MAX_BYTES = 72


def generate_verification_code() -> str:
    """Generate a 6-character code over a-z, A-Z and 0-9."""
    return "".join(
        secrets.choice(VERIFICATION_CODE_ALPHABET) for _ in range(VERIFICATION_CODE_LENGTH)
    )


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """
    Hash password using bcrypt.

    Args:
        password: Plaintext password as submitted
        rounds: bcrypt cost factor

    Returns:
        bcrypt modular-crypt string ($2b$...)
    """
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    return bcrypt.checkpw(_password_bytes(password), password_hash.encode())

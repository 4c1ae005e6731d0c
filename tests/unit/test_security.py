"""
Unit tests for verification code generation and password hashing.
"""

import re
import string

import bcrypt

from src.domain.security import (
    VERIFICATION_CODE_ALPHABET,
    VERIFICATION_CODE_LENGTH,
    generate_verification_code,
    hash_password,
    verify_password,
)

CODE_PATTERN = re.compile(r"^[A-Za-z0-9]{6}$")


class TestVerificationCodeGeneration:
    """Tests for generate_verification_code."""

    def test_alphabet_is_62_alphanumerics(self) -> None:
        """Alphabet holds lowercase, uppercase and digits exactly once."""
        assert len(VERIFICATION_CODE_ALPHABET) == 62
        assert set(VERIFICATION_CODE_ALPHABET) == set(
            string.ascii_lowercase + string.ascii_uppercase + string.digits
        )

    def test_code_length_is_6(self) -> None:
        """Code length constant is 6."""
        assert VERIFICATION_CODE_LENGTH == 6

    def test_every_code_matches_pattern(self) -> None:
        """Generated codes are always 6 alphanumeric characters."""
        for _ in range(500):
            code = generate_verification_code()
            assert isinstance(code, str)
            assert CODE_PATTERN.match(code), code

    def test_codes_vary(self) -> None:
        """Repeated calls do not return one fixed value."""
        codes = {generate_verification_code() for _ in range(20)}
        # Probability of all-equal is 62^-114
        assert len(codes) > 1

    def test_codes_cover_letter_and_digit_classes(self) -> None:
        """Over many draws, all three character classes appear."""
        chars = "".join(generate_verification_code() for _ in range(300))
        assert any(c in string.ascii_lowercase for c in chars)
        assert any(c in string.ascii_uppercase for c in chars)
        assert any(c in string.digits for c in chars)


class TestPasswordHashing:
    """Tests for hash_password and verify_password."""

    def test_hash_is_not_plaintext(self) -> None:
        """Stored secret never equals the submitted password."""
        for password in ["p1", "password123", "x", "$2b$04$looks-like-a-hash"]:
            assert hash_password(password, rounds=4) != password

    def test_hash_is_bcrypt(self) -> None:
        """Hash uses the bcrypt modular-crypt format."""
        assert re.match(r"^\$2[aby]\$04\$", hash_password("p1", rounds=4))

    def test_default_cost_factor_is_10(self) -> None:
        """Default work factor is 10."""
        password_hash = hash_password("p1")
        assert int(password_hash.split("$")[2]) == 10

    def test_hash_is_salted(self) -> None:
        """Hashing the same password twice gives different secrets."""
        assert hash_password("p1", rounds=4) != hash_password("p1", rounds=4)

    def test_verify_accepts_correct_password(self) -> None:
        """verify_password matches the original password."""
        password_hash = hash_password("p1", rounds=4)
        assert verify_password("p1", password_hash) is True
        assert bcrypt.checkpw(b"p1", password_hash.encode())

    def test_verify_rejects_wrong_password(self) -> None:
        """verify_password rejects a different password."""
        password_hash = hash_password("p1", rounds=4)
        assert verify_password("p2", password_hash) is False

    def test_long_password_does_not_raise(self) -> None:
        """Passwords beyond 72 bytes are accepted and verifiable."""
        password = "é" * 100
        password_hash = hash_password(password, rounds=4)
        assert verify_password(password, password_hash) is True

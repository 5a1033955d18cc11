"""Password Hashing — tests for PBKDF2 hashes and temporary passwords."""

from mentorship.core.validators import validate_password
from mentorship.infrastructure.passwords import (
    generate_temporary_password, hash_password, verify_password,
)


def test_hash_round_trip():
    stored = hash_password("admin123", iterations=1_000)
    assert stored.startswith("pbkdf2_sha256$1000$")
    assert verify_password("admin123", stored) is True
    assert verify_password("admin124", stored) is False


def test_hashes_are_salted():
    assert hash_password("same", iterations=1_000) != hash_password("same", iterations=1_000)


def test_verify_rejects_malformed_hashes():
    assert verify_password("x", "") is False
    assert verify_password("x", "plaintext") is False
    assert verify_password("x", "bcrypt$10$aa$bb") is False
    assert verify_password("x", "pbkdf2_sha256$notanint$aa$bb") is False
    assert verify_password("x", None) is False


def test_temporary_password_passes_validation():
    password = generate_temporary_password()
    assert len(password) == 12
    assert validate_password(password)
    assert generate_temporary_password() != password

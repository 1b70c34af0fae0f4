"""Password hashing and verification service."""

from functools import lru_cache

from pwdlib import PasswordHash

from studyhub.config import get_settings

password_hash = PasswordHash.recommended()


def hash_password(plain_password: str) -> str:
    """Hash a plain password for storage with pepper."""
    peppered_password = plain_password + get_settings().PASSWORD_PEPPER
    return password_hash.hash(peppered_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password."""
    peppered_password = plain_password + get_settings().PASSWORD_PEPPER
    return password_hash.verify(peppered_password, hashed_password)


@lru_cache
def get_dummy_hash() -> str:
    """Get a real hash to verify unknown users against, for timing attack prevention."""
    return password_hash.hash("studyhub-dummy-password")

"""Password hashing and verification."""

import logging

import bcrypt

from config import BCRYPT_ROUNDS, MAX_PASSWORD_BYTES


logger = logging.getLogger(__name__)


class HashingError(RuntimeError):
    """Raised when a password cannot be hashed."""


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    """
    Hash a password with bcrypt using a fresh salt.

    The work factor comes from BCRYPT_ROUNDS and is embedded in the result,
    so hashes created under an older setting keep verifying.
    """
    try:
        salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
    except (TypeError, ValueError) as e:
        # bcrypt rejects passwords over 72 bytes
        raise HashingError("Password could not be hashed") from e


def verify_password(plain: str, hashed: str) -> bool:
    """Return True if `plain` matches `hashed`. Never raises on mismatch."""
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except (TypeError, ValueError):
        logger.warning("Stored password hash could not be checked")
        return False

"""Model package exports for database initialization."""

from models.account import Account
from models.password_reset import PasswordResetToken

__all__ = [
    "Account",
    "PasswordResetToken",
]

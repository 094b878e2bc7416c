"""Password reset token model for account recovery."""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String

from database import Base


class PasswordResetToken(Base):
    """Stores hashed password reset tokens with expiration."""

    __tablename__ = "password_reset_tokens"

    # SHA-256 hex digest of the raw token; the raw token is never stored
    token_hash = Column(String(64), primary_key=True)
    account_id = Column(
        String(64),
        ForeignKey("accounts.username", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Address the link was sent to, kept for audit
    email = Column(String(255), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    used = Column(Boolean, default=False, nullable=False)
    used_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

"""Issuance, validation and consumption of password reset tokens."""

import hashlib
import logging
import secrets
from datetime import datetime, timedelta

from sqlalchemy import delete, or_, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import RESET_TOKEN_EXPIRE_MINUTES
from models.password_reset import PasswordResetToken
from services.errors import ExpiredTokenError, InvalidTokenError, TokenAlreadyUsedError


logger = logging.getLogger(__name__)


def hash_token(raw_token: str) -> str:
    """SHA-256 hex digest used as the store key for a raw token."""
    return hashlib.sha256(raw_token.encode()).hexdigest()


class ResetTokenService:
    """Service for the reset token lifecycle."""

    def __init__(self, db: Session):
        self.db = db

    def issue(self, account_id: str, email: str) -> tuple[PasswordResetToken, str]:
        """
        Create a reset token for the account.

        Returns the stored record and the raw token. The raw token is only
        ever handed to the mailer; the store keeps its digest.
        """
        raw_token = secrets.token_urlsafe(32)
        now = datetime.utcnow()

        record = PasswordResetToken(
            token_hash=hash_token(raw_token),
            account_id=account_id,
            email=email,
            expires_at=now + timedelta(minutes=RESET_TOKEN_EXPIRE_MINUTES),
            used=False,
            created_at=now,
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)

        return record, raw_token

    def validate(self, raw_token: str) -> PasswordResetToken:
        """Return the live token record or raise the matching ResetTokenError."""
        record = self.db.get(PasswordResetToken, hash_token(raw_token))

        if record is None:
            raise InvalidTokenError()
        if record.used:
            raise TokenAlreadyUsedError()
        if datetime.utcnow() >= record.expires_at:
            raise ExpiredTokenError()

        return record

    def consume(self, raw_token: str, account_id: str) -> None:
        """
        Mark the token used, provided nobody else has.

        The update is conditional on `used` still being false, so only one
        of two concurrent resets can match the row. Flushes only; the caller
        commits together with the password change.
        """
        result = self.db.execute(
            update(PasswordResetToken)
            .where(
                PasswordResetToken.token_hash == hash_token(raw_token),
                PasswordResetToken.account_id == account_id,
                PasswordResetToken.used.is_(False),
            )
            .values(used=True, used_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise TokenAlreadyUsedError()

    def delete_all_for_account(self, account_id: str) -> int:
        """Delete every token for the account in one transaction."""
        try:
            result = self.db.execute(
                delete(PasswordResetToken).where(PasswordResetToken.account_id == account_id)
            )
            deleted = result.rowcount
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        return deleted

    def purge_expired(self) -> int:
        """Remove tokens that can no longer be consumed."""
        result = self.db.execute(
            delete(PasswordResetToken).where(
                or_(
                    PasswordResetToken.used.is_(True),
                    PasswordResetToken.expires_at <= datetime.utcnow(),
                )
            )
        )
        purged = result.rowcount
        self.db.commit()
        logger.info("Purged %s stale reset tokens", purged)
        return purged

"""Account lifecycle: login, password reset and account deletion."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import MIN_PASSWORD_LENGTH
from models.account import Account
from services.account_service import AccountService
from services.auth import hash_password, password_too_long, verify_password
from services.email_service import EmailService
from services.errors import (
    AccountNotFoundError,
    InvalidCredentialsError,
    MailDeliveryError,
    StoreUnavailableError,
    ValidationError,
    WeakPasswordError,
)
from services.reset_token_service import ResetTokenService


logger = logging.getLogger(__name__)


class PasswordService:
    """Coordinates the account registry, reset tokens and the mailer."""

    def __init__(self, db: Session, email_service: EmailService | None = None):
        self.db = db
        self.accounts = AccountService(db)
        self.tokens = ResetTokenService(db)
        self.email_service = email_service

    def register(self, username: str, email: str, password: str) -> Account:
        account = self.accounts.register(username, email, password)
        logger.info("Registered account %s", account.username)
        return account

    def login(self, identifier: str, password: str) -> Account:
        """
        Authenticate by username or email.

        Unknown identifiers and wrong passwords raise the same
        InvalidCredentialsError so callers cannot tell which accounts exist.
        """
        try:
            account = self.accounts.find_by_identifier(identifier)
        except AccountNotFoundError:
            raise InvalidCredentialsError()

        if password_too_long(password) or not verify_password(password, account.password_hash):
            raise InvalidCredentialsError()

        return account

    def request_password_reset(self, email: str) -> None:
        """
        Issue a reset token and email the link, if the address is known.

        Returns None either way; only a failed send for a known address
        raises (MailDeliveryError).
        """
        account = self.accounts.get_by_email(email)
        if account is None:
            logger.info("Password reset requested for unknown email")
            return

        record, raw_token = self.tokens.issue(account.username, account.email)
        logger.info("Issued reset token for %s, expires %s", account.username, record.expires_at)

        sent = self.email_service.send_password_reset(
            to_email=account.email,
            username=account.username,
            token=raw_token,
        )
        if not sent:
            raise MailDeliveryError()

    def complete_password_reset(self, raw_token: str, new_password: str) -> Account:
        """
        Set a new password using a reset token.

        The password update and the token consumption commit together: a
        failure before the commit leaves the token usable for a retry, and a
        concurrent reset that already consumed the token rolls this one back.
        """
        if not new_password or len(new_password) < MIN_PASSWORD_LENGTH:
            raise WeakPasswordError()
        if password_too_long(new_password):
            raise ValidationError("Password must be at most 72 bytes")

        record = self.tokens.validate(raw_token)

        account = self.accounts.get(record.account_id)
        if account is None:
            raise AccountNotFoundError()

        new_hash = hash_password(new_password)
        try:
            self.accounts.set_password(account, new_hash)
            self.tokens.consume(raw_token, account.username)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("Password reset completed for %s", account.username)
        return account

    def delete_account(self, username: str) -> bool:
        """
        Delete an account and every reset token that references it.

        Both steps run even if the first fails; any store failure is
        reported afterwards as StoreUnavailableError. Deleting an absent
        account is not an error and returns False.
        """
        failed = False
        deleted = False

        try:
            deleted = self.accounts.delete_account(username)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to delete account %s", username)
            failed = True

        try:
            removed = self.tokens.delete_all_for_account(username)
            if removed:
                logger.info("Removed %s reset tokens for %s", removed, username)
        except SQLAlchemyError:
            logger.exception("Failed to remove reset tokens for %s", username)
            failed = True

        if failed:
            raise StoreUnavailableError()

        return deleted

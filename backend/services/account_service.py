"""Account registry: creation, lookup and deletion of accounts."""

import logging
from datetime import datetime

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import MIN_PASSWORD_LENGTH
from models.account import Account
from services.auth import hash_password, password_too_long
from services.errors import (
    AccountNotFoundError,
    DuplicateEmailError,
    DuplicateUsernameError,
    ValidationError,
    WeakPasswordError,
)


logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """
    Normalize an address the way pydantic's EmailStr does.

    Values that are not email addresses are returned unchanged.
    """
    try:
        return validate_email(email, check_deliverability=False).normalized
    except EmailNotValidError:
        return email


class AccountService:
    """Service for account persistence and uniqueness rules."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, username: str) -> Account | None:
        return self.db.get(Account, username)

    def get_by_email(self, email: str) -> Account | None:
        return self.db.query(Account).filter(Account.email == normalize_email(email)).first()

    def register(self, username: str, email: str, password: str) -> Account:
        """
        Create a new account.

        Raises ValidationError for empty fields or a short password,
        DuplicateUsernameError / DuplicateEmailError when either is taken.
        """
        if not username or not email or not password:
            raise ValidationError("Username, email and password are required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise WeakPasswordError()
        if password_too_long(password):
            raise ValidationError("Password must be at most 72 bytes")

        email = normalize_email(email)
        if self.get(username) is not None:
            raise DuplicateUsernameError()
        if self.get_by_email(email) is not None:
            raise DuplicateEmailError()

        now = datetime.utcnow()
        account = Account(
            username=username,
            email=email,
            password_hash=hash_password(password),
            created_at=now,
            updated_at=now,
        )
        self.db.add(account)

        try:
            self.db.commit()
        except IntegrityError:
            # A concurrent registration won between our checks and the insert.
            self.db.rollback()
            if self.get(username) is not None:
                raise DuplicateUsernameError()
            raise DuplicateEmailError()

        self.db.refresh(account)
        return account

    def find_by_identifier(self, identifier: str) -> Account:
        """Resolve `identifier` as a username first, then as an email."""
        account = self.get(identifier)
        if account is None:
            account = self.get_by_email(identifier)
        if account is None:
            raise AccountNotFoundError()
        return account

    def set_password(self, account: Account, password_hash: str) -> None:
        """Stage a new password hash. The caller commits."""
        account.password_hash = password_hash
        account.updated_at = datetime.utcnow()
        self.db.flush()

    def delete_account(self, username: str) -> bool:
        """Delete the account. Returns False if it did not exist."""
        account = self.get(username)
        if account is None:
            return False

        self.db.delete(account)
        self.db.commit()
        logger.info("Deleted account %s", username)
        return True

"""Domain errors raised by the account services.

Each error carries the HTTP status it maps to and a message that is safe to
show to end users. Internal details (store errors, provider responses) are
logged where they occur and never placed in these messages.
"""

from fastapi import status


class AccountServiceError(Exception):
    """Base class for failures the HTTP layer reports to the caller."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Request could not be processed"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AccountServiceError):
    """Raised when input is missing or malformed."""

    message = "Missing or invalid input"


class WeakPasswordError(ValidationError):
    message = "Password must be at least 6 characters"


class ConflictError(AccountServiceError):
    status_code = status.HTTP_409_CONFLICT
    message = "Account already exists"


class DuplicateUsernameError(ConflictError):
    message = "Username is already taken"


class DuplicateEmailError(ConflictError):
    message = "Email is already registered"


class InvalidCredentialsError(AccountServiceError):
    """Unknown identifier and wrong password are reported identically."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid username or password"


class ResetTokenError(AccountServiceError):
    message = "Invalid reset token"


class InvalidTokenError(ResetTokenError):
    message = "Invalid reset token"


class ExpiredTokenError(ResetTokenError):
    message = "Reset token has expired"


class TokenAlreadyUsedError(ResetTokenError):
    message = "Reset token has already been used"


class AccountNotFoundError(AccountServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Account not found"


class DependencyFailure(AccountServiceError):
    """Raised when the store or the mailer cannot complete a call."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Service temporarily unavailable. Please try again later."


class StoreUnavailableError(DependencyFailure):
    pass


class MailDeliveryError(DependencyFailure):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Failed to send password reset email"

# Schemas package

from .auth import (
    RegisterRequest,
    LoginRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
    DeleteAccountRequest,
    MessageResponse,
    AccountResponse,
)

"""Pydantic schemas for account and password reset endpoints."""

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

from config import MAX_PASSWORD_BYTES


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return _check_password_bytes(v)


class LoginRequest(BaseModel):
    """Login payload; `username` may hold either a username or an email."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class ResetPasswordRequest(BaseModel):
    token: str = Field(min_length=1)
    new_password: str = Field(
        min_length=1,
        validation_alias=AliasChoices("newPassword", "new_password"),
    )

    @field_validator("new_password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return _check_password_bytes(v)


class DeleteAccountRequest(BaseModel):
    username: str = Field(min_length=1)


class MessageResponse(BaseModel):
    message: str


class AccountResponse(BaseModel):
    message: str
    username: str

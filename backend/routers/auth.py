"""Registration, login and password reset endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_db
from schemas.auth import (
    AccountResponse,
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
)
from services.email_service import EmailService, get_email_service
from services.password_service import PasswordService


router = APIRouter()

FORGOT_PASSWORD_MESSAGE = (
    "If an account exists with that email, a password reset link has been sent."
)


@router.post("/register", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    """Create an account. 409 if the username or email is already taken."""
    service = PasswordService(db)
    account = service.register(payload.username, payload.email, payload.password)
    return {"message": "Account created successfully", "username": account.username}


@router.post("/login", response_model=AccountResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    service = PasswordService(db)
    account = service.login(payload.username, payload.password)
    return {"message": "Login successful", "username": account.username}


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(
    payload: ForgotPasswordRequest,
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
):
    """
    Request a password reset link.

    The response is identical whether or not the email belongs to an
    account. Only a failed send to a known address surfaces (500).
    """
    service = PasswordService(db, email_service)
    service.request_password_reset(payload.email)

    # Known and unknown addresses share one response.
    return {"message": FORGOT_PASSWORD_MESSAGE}


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(payload: ResetPasswordRequest, db: Session = Depends(get_db)):
    service = PasswordService(db)
    service.complete_password_reset(payload.token, payload.new_password)
    return {"message": "Password has been reset successfully"}

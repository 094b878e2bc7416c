"""Email service for sending transactional emails via SendGrid."""

import logging
from functools import lru_cache

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from config import (
    APP_NAME,
    ENV,
    FRONTEND_URL,
    MAIL_TIMEOUT_SECONDS,
    RESET_TOKEN_EXPIRE_MINUTES,
    SENDGRID_API_KEY,
    SENDGRID_FROM_EMAIL,
)


logger = logging.getLogger(__name__)


class EmailService:
    """Handles sending emails via SendGrid."""

    def __init__(self):
        self.api_key = SENDGRID_API_KEY
        self.from_email = SENDGRID_FROM_EMAIL
        self.app_name = APP_NAME
        self.frontend_url = FRONTEND_URL
        self.timeout = MAIL_TIMEOUT_SECONDS

    def build_reset_url(self, token: str) -> str:
        return f"{self.frontend_url}/reset-password?token={token}"

    def send_password_reset(self, to_email: str, username: str, token: str) -> bool:
        """
        Send password reset email.

        Returns True on success, False on failure.
        """
        reset_url = self.build_reset_url(token)

        if not self.api_key and ENV != "production":
            # Local development without SendGrid credentials.
            logger.warning("SENDGRID_API_KEY not set; skipping reset email for %s", username)
            logger.debug("Reset link for %s: %s", username, reset_url)
            return True

        message = Mail(
            from_email=self.from_email,
            to_emails=to_email,
            subject=f"{self.app_name} - Reset Your Password",
            html_content=self._build_reset_email_html(username=username, reset_url=reset_url),
        )

        try:
            sg = SendGridAPIClient(self.api_key)
            sg.client.timeout = self.timeout
            sg.send(message)
            return True
        except Exception as e:
            # Avoid leaking provider errors to end users; log for operators.
            logger.exception("Email send failed: %s", e)
            return False

    def _build_reset_email_html(self, *, username: str, reset_url: str) -> str:
        """Build HTML content for password reset email."""
        return f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
            <h2>Reset Your Password</h2>
            <p>Hi {username},</p>
            <p>Someone asked to reset the password on your {self.app_name} account.</p>
            <p>Use the link below to choose a new one. It stops working after
               {RESET_TOKEN_EXPIRE_MINUTES} minutes and can be used once.</p>
            <p style="margin: 30px 0;">
                <a href="{reset_url}"
                   style="background-color: #2563eb; color: white; padding: 12px 24px;
                          text-decoration: none; border-radius: 4px;">
                    Reset Password
                </a>
            </p>
            <p>If this wasn't you, no action is needed and your password stays the same.</p>
        </div>
        """


@lru_cache
def get_email_service() -> EmailService:
    """Process-wide mailer, built on first use and injected into routes."""
    return EmailService()

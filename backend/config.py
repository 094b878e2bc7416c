import os

ENV = os.getenv("ENV", "development").lower()

# Database
# In production, set DATABASE_URL to a PostgreSQL URL
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./accounts.db")
STORE_TIMEOUT_SECONDS = float(os.getenv("STORE_TIMEOUT_SECONDS", "5"))

# Credentials
MIN_PASSWORD_LENGTH = 6
# bcrypt only considers the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))
RESET_TOKEN_EXPIRE_MINUTES = int(os.getenv("RESET_TOKEN_EXPIRE_MINUTES", "60"))

# Email Configuration (SendGrid)
SENDGRID_API_KEY = os.getenv("SENDGRID_API_KEY")
SENDGRID_FROM_EMAIL = os.getenv("SENDGRID_FROM_EMAIL", "noreply@accounts.local")
MAIL_TIMEOUT_SECONDS = float(os.getenv("MAIL_TIMEOUT_SECONDS", "10"))
APP_NAME = os.getenv("APP_NAME", "Accounts")
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", FRONTEND_URL).split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def validate_config() -> None:
    """
    Validate required configuration.

    This is intentionally strict only in production so that local development
    and tests can run with minimal environment setup.
    """
    if ENV != "production":
        return

    errors: list[str] = []

    if not SENDGRID_API_KEY:
        errors.append("SENDGRID_API_KEY must be set in production")

    if not SENDGRID_FROM_EMAIL:
        errors.append("SENDGRID_FROM_EMAIL must be set in production")

    if not FRONTEND_URL or not FRONTEND_URL.startswith(("http://", "https://")):
        errors.append("FRONTEND_URL must be an http(s) URL in production")

    if DATABASE_URL.startswith("sqlite"):
        errors.append("DATABASE_URL must point at a server database in production")

    if BCRYPT_ROUNDS < 10:
        errors.append("BCRYPT_ROUNDS must be at least 10 in production")

    if errors:
        raise RuntimeError("Invalid configuration:\n- " + "\n- ".join(errors))

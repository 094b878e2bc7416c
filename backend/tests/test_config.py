"""Unit tests for configuration validation."""

import pytest

import config


def _production(monkeypatch, **overrides):
    values = {
        "ENV": "production",
        "SENDGRID_API_KEY": "SG.real-key",
        "SENDGRID_FROM_EMAIL": "noreply@example.com",
        "FRONTEND_URL": "https://accounts.example.com",
        "DATABASE_URL": "postgresql://accounts:secret@db/accounts",
        "BCRYPT_ROUNDS": 12,
    }
    values.update(overrides)
    for name, value in values.items():
        monkeypatch.setattr(config, name, value)


def test_development_skips_validation(monkeypatch):
    """Missing credentials are tolerated outside production."""
    monkeypatch.setattr(config, "ENV", "development")
    monkeypatch.setattr(config, "SENDGRID_API_KEY", None)

    config.validate_config()


def test_valid_production_config(monkeypatch):
    """A complete production configuration passes."""
    _production(monkeypatch)

    config.validate_config()


def test_production_requires_sendgrid_key(monkeypatch):
    """Production refuses to start without a SendGrid key."""
    _production(monkeypatch, SENDGRID_API_KEY=None)

    with pytest.raises(RuntimeError) as exc_info:
        config.validate_config()
    assert "SENDGRID_API_KEY" in str(exc_info.value)


def test_production_rejects_sqlite(monkeypatch):
    """Production needs a server database."""
    _production(monkeypatch, DATABASE_URL="sqlite:///./accounts.db")

    with pytest.raises(RuntimeError) as exc_info:
        config.validate_config()
    assert "DATABASE_URL" in str(exc_info.value)


def test_production_reports_every_problem(monkeypatch):
    """All problems are listed in one error."""
    _production(monkeypatch, FRONTEND_URL="accounts.example.com", BCRYPT_ROUNDS=4)

    with pytest.raises(RuntimeError) as exc_info:
        config.validate_config()
    message = str(exc_info.value)
    assert "FRONTEND_URL" in message
    assert "BCRYPT_ROUNDS" in message


def test_default_reset_expiry_is_one_hour():
    """Defaults match the documented limits."""
    assert config.RESET_TOKEN_EXPIRE_MINUTES == 60
    assert config.MIN_PASSWORD_LENGTH == 6
    assert config.MAX_PASSWORD_BYTES == 72

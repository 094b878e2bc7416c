"""Shared pytest fixtures: in-memory database, API client and mailer double."""

import os

# Must be set before config is imported anywhere.
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app
from models.account import Account
from services.account_service import AccountService
from services.email_service import EmailService, get_email_service
from tests.fixtures.test_data import TEST_PASSWORD


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Session:
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def mock_email_service() -> MagicMock:
    service = MagicMock(spec=EmailService)
    service.send_password_reset.return_value = True
    return service


@pytest.fixture
def client(db_session: Session, mock_email_service: MagicMock) -> TestClient:
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_email_service] = lambda: mock_email_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def test_account(db_session: Session) -> Account:
    return AccountService(db_session).register("alice", "alice@example.com", TEST_PASSWORD)

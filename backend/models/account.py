from datetime import datetime

from sqlalchemy import Column, DateTime, String

from database import Base


class Account(Base):
    __tablename__ = "accounts"

    # The username is the account id: case-sensitive and never renamed.
    username = Column(String(64), primary_key=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(128), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

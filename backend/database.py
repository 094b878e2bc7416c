from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from config import DATABASE_URL, STORE_TIMEOUT_SECONDS


def build_engine(url: str = DATABASE_URL):
    """Create an engine whose store calls are bounded by STORE_TIMEOUT_SECONDS."""
    connect_args = {}
    engine_kwargs = {"pool_pre_ping": True}

    if url.startswith("sqlite"):
        # SQLite requires check_same_thread=False; busy waits are capped by `timeout`
        connect_args["check_same_thread"] = False
        connect_args["timeout"] = STORE_TIMEOUT_SECONDS
    else:
        engine_kwargs["pool_timeout"] = STORE_TIMEOUT_SECONDS
        if url.startswith("postgresql"):
            statement_ms = int(STORE_TIMEOUT_SECONDS * 1000)
            connect_args["options"] = f"-c statement_timeout={statement_ms}"

    return create_engine(url, connect_args=connect_args, **engine_kwargs)


engine = build_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    pass


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

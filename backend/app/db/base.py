"""SQLAlchemy base and engine configuration."""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from app.core.settings import get_settings

settings = get_settings()

# Suppress SQLAlchemy engine logging (only show errors)
logging.getLogger("sqlalchemy.engine").setLevel(logging.ERROR)

connect_args = {}
if settings.database_url.startswith("sqlite"):
    connect_args["check_same_thread"] = False  # needed for SQLite

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    echo=False,  # Disable SQL query logging
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def get_db():
    """Dependency that yields a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

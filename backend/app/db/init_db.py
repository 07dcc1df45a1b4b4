"""Database initialization utilities."""

import logging

from app.db.base import Base, engine
from app.models import Task  # noqa: F401 - ensures models are registered

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()

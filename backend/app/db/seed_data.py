"""Seed the database with demo tasks."""

import logging
from datetime import timedelta

from app.db.base import SessionLocal
from app.db.init_db import init_db
from app.models.task import Task, TaskStatus, utcnow

logger = logging.getLogger(__name__)

DEMO_TASKS = [
    ("Buy milk", TaskStatus.PENDING),
    ("Water the plants", TaskStatus.PENDING),
    ("Book dentist", TaskStatus.COMPLETED),
    ("Renew passport", TaskStatus.PENDING),
    ("Call the bank", TaskStatus.COMPLETED),
]


def seed_tasks() -> int:
    """Replace all tasks with the demo set and return how many were added."""
    init_db()
    db = SessionLocal()
    try:
        # Clear existing tasks
        db.query(Task).delete()

        now = utcnow()
        # Oldest first so the list endpoint shows them in reverse order.
        for offset, (title, task_status) in enumerate(reversed(DEMO_TASKS)):
            stamp = now - timedelta(minutes=len(DEMO_TASKS) - offset)
            db.add(
                Task(
                    title=title,
                    status=task_status.value,
                    created_at=stamp,
                    updated_at=stamp,
                )
            )
        db.commit()
    finally:
        db.close()

    count = len(DEMO_TASKS)
    logger.info("Seeded %s demo tasks", count)
    return count


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_tasks()

"""Task store operations on top of a SQLAlchemy session.

Each function is independent and stateless; the session passed in is the only
shared resource. Storage outcomes are translated into the ``app.core.errors``
taxonomy so the routes never look at SQLAlchemy exceptions.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import BadRequestError, ConflictError, InternalError, NotFoundError
from app.models.task import Task
from app.schemas.task import TaskPayload

logger = logging.getLogger(__name__)

MAX_TASK_ID = 2**63 - 1


def parse_task_id(raw_id: str | int) -> int | None:
    """Return the integer id, or None when the value cannot be an id."""
    if isinstance(raw_id, int):
        task_id = raw_id
    else:
        raw_id = raw_id.strip()
        if not raw_id.isascii() or not raw_id.isdigit():
            return None
        task_id = int(raw_id)
    if task_id < 1 or task_id > MAX_TASK_ID:
        return None
    return task_id


def list_tasks(db: Session) -> list[Task]:
    """Return all tasks, most recently created first."""
    try:
        return db.query(Task).order_by(Task.created_at.desc(), Task.id.desc()).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to list tasks")
        raise InternalError() from exc


def get_task(db: Session, raw_id: str | int) -> Task:
    """Return one task; unknown and malformed ids are both NotFound."""
    task_id = parse_task_id(raw_id)
    if task_id is None:
        raise NotFoundError()
    try:
        task = db.get(Task, task_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to load task %s", task_id)
        raise NotFoundError() from exc
    if task is None:
        raise NotFoundError()
    return task


def create_task(db: Session, payload: TaskPayload) -> Task:
    """Insert a new pending or completed task with a unique title."""
    task = Task(title=payload.title, status=payload.status.value)
    db.add(task)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Rejected duplicate task title %r", payload.title)
        raise ConflictError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to create task %r", payload.title)
        raise BadRequestError() from exc
    db.refresh(task)
    logger.info("Created task %s", task.id)
    return task


def update_task(db: Session, raw_id: str | int, payload: TaskPayload) -> Task:
    """Replace a task's title and status and refresh its updated_at."""
    task_id = parse_task_id(raw_id)
    if task_id is None:
        raise BadRequestError()
    try:
        task = db.get(Task, task_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to load task %s for update", task_id)
        raise BadRequestError() from exc
    if task is None:
        raise NotFoundError()

    task.title = payload.title
    task.status = payload.status.value
    task.touch()
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Rejected rename of task %s to duplicate title %r", task_id, payload.title)
        raise ConflictError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to update task %s", task_id)
        raise BadRequestError() from exc
    db.refresh(task)
    logger.info("Updated task %s (status=%s)", task.id, task.status)
    return task


def delete_task(db: Session, raw_id: str | int) -> None:
    """Delete a task; deleting a missing task is a no-op."""
    task_id = parse_task_id(raw_id)
    if task_id is None:
        raise BadRequestError()
    try:
        deleted = db.query(Task).filter(Task.id == task_id).delete()
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to delete task %s", task_id)
        raise BadRequestError() from exc
    if deleted:
        logger.info("Deleted task %s", task_id)


def delete_all_tasks(db: Session) -> int:
    """Delete every task and return how many were removed."""
    try:
        deleted = db.query(Task).delete()
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to delete all tasks")
        raise InternalError() from exc
    logger.info("Deleted all tasks (%s removed)", deleted)
    return deleted

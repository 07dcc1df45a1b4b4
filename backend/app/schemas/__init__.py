"""Pydantic schemas for request/response validation."""

from app.schemas.task import (
    TaskCreate,
    TaskPayload,
    TaskResponse,
    TaskUpdate,
    validate_task,
)

__all__ = ["TaskCreate", "TaskPayload", "TaskResponse", "TaskUpdate", "validate_task"]

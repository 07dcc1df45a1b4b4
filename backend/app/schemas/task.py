"""Pydantic schemas for Task validation and responses.

The same ``TaskPayload`` schema guards both sides of the wire: the API routes
receive it as the request body and the client runs ``validate_task`` before
sending anything.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.core.errors import TaskValidationError
from app.models.task import TITLE_MAX_LENGTH, TaskStatus

TITLE_MIN_LENGTH = 1

TITLE_REQUIRED = "Title is required"
TITLE_NOT_STRING = "Title must be a string"
TITLE_TOO_SHORT = f"Title must be at least {TITLE_MIN_LENGTH} characters long"
TITLE_TOO_LONG = f"Title must not be more than {TITLE_MAX_LENGTH} characters long"
STATUS_INVALID = "Status must be either pending or completed"


class TaskPayload(BaseModel):
    """Candidate task as submitted by a client, normalized on success."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(default=None, validate_default=True)
    status: TaskStatus = Field(default=TaskStatus.PENDING, validate_default=True)
    # Echoed back by clients that send a whole task; never validated or stored.
    id: Any = None

    @field_validator("title", mode="before")
    @classmethod
    def check_title(cls, value: Any) -> str:
        if value is None:
            raise PydanticCustomError("title_required", TITLE_REQUIRED)
        if not isinstance(value, str):
            raise PydanticCustomError("title_type", TITLE_NOT_STRING)
        value = value.strip()
        if len(value) < TITLE_MIN_LENGTH:
            raise PydanticCustomError("title_too_short", TITLE_TOO_SHORT)
        if len(value) > TITLE_MAX_LENGTH:
            raise PydanticCustomError("title_too_long", TITLE_TOO_LONG)
        return value

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, value: Any) -> TaskStatus:
        if value is None:
            return TaskStatus.PENDING
        try:
            return TaskStatus(value)
        except (TypeError, ValueError):
            raise PydanticCustomError("status_invalid", STATUS_INVALID) from None


class TaskCreate(TaskPayload):
    """Schema for creating a new task."""

    pass


class TaskUpdate(TaskPayload):
    """Schema for replacing a task's title and status."""

    pass


class TaskResponse(BaseModel):
    """Schema for task responses, rendered with camelCase keys."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    title: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime


def first_error_message(exc: ValidationError) -> str:
    """Return the message of the first issue in a pydantic error."""
    errors = exc.errors()
    if not errors:
        return TaskValidationError.default_message
    return errors[0]["msg"]


def validate_task(candidate: Mapping[str, Any]) -> TaskPayload:
    """Validate a candidate task, raising TaskValidationError with the first issue."""
    if not isinstance(candidate, Mapping):
        raise TaskValidationError("Task must be an object")
    try:
        return TaskPayload.model_validate(dict(candidate))
    except ValidationError as exc:
        raise TaskValidationError(first_error_message(exc)) from exc

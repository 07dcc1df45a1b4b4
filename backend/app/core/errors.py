"""Error taxonomy shared by the task store and the API layer."""

from fastapi import status


class TaskAppError(Exception):
    """Base error carrying an HTTP status and a message safe to show clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class TaskValidationError(TaskAppError):
    """Input failed the task schema; message is the first issue found."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid task"


class ConflictError(TaskAppError):
    """A task with the same title already exists."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Task Title should be unique"


class BadRequestError(TaskAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class NotFoundError(TaskAppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Task not found"


class InternalError(TaskAppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"

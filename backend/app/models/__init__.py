"""Database models."""

from app.models.task import Task, TaskStatus

__all__ = ["Task", "TaskStatus"]

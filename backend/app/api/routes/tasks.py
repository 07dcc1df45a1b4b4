"""CRUD API endpoints for tasks."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.db.base import get_db
from app.models.task import Task
from app.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from app.services import task_store

router = APIRouter()


@router.get("", response_model=list[TaskResponse])
def list_tasks(db: Session = Depends(get_db)) -> list[Task]:
    """List all tasks, newest first."""
    return task_store.list_tasks(db)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: str, db: Session = Depends(get_db)) -> Task:
    """Get a specific task by ID."""
    return task_store.get_task(db, task_id)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(task_in: TaskCreate, db: Session = Depends(get_db)) -> Task:
    """Create a new task."""
    return task_store.create_task(db, task_in)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str, task_update: TaskUpdate, db: Session = Depends(get_db)
) -> Task:
    """Replace a task's title and status."""
    return task_store.update_task(db, task_id, task_update)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, db: Session = Depends(get_db)) -> Response:
    """Delete a task. Deleting an unknown task still succeeds."""
    task_store.delete_task(db, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_tasks(db: Session = Depends(get_db)) -> Response:
    """Delete every task."""
    task_store.delete_all_tasks(db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

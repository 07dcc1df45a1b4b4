"""Root API router for the application."""

from fastapi import APIRouter

from app.api.routes import health, tasks

api_router = APIRouter()
# Health is registered first so /healthz is not captured by /{task_id}.
api_router.include_router(health.router, prefix="/tasks", tags=["health"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])

"""Application settings and configuration utilities."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings derived from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Task Manager API")
    version: str = os.getenv("PROJECT_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api/v1")
    frontend_url: str = os.getenv("FRONTEND_URL", "http://localhost:5173")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Client configuration
    tasks_api_url: str = os.getenv("TASKS_API_URL", "http://localhost:8000/api/v1/tasks")
    health_poll_interval: float = float(os.getenv("HEALTH_POLL_INTERVAL", "10"))
    client_timeout: float = float(os.getenv("CLIENT_TIMEOUT", "10"))

    @property
    def database_url(self) -> str:
        """Return the store connection string."""
        url = os.getenv("DATABASE_URL")
        if url:
            return url
        db_path = os.getenv("DATABASE_PATH")
        if not db_path:
            # Default: tasks.db in backend directory
            backend_dir = Path(__file__).parent.parent.parent
            db_path = str(backend_dir / "tasks.db")
        return f"sqlite:///{db_path}"

    @property
    def allowed_origins(self) -> list[str]:
        """Return the CORS origins parsed from FRONTEND_URL."""
        return [origin.strip().rstrip("/") for origin in self.frontend_url.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()

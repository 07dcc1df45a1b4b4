"""FastAPI application entry point."""

import logging
import sys

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.router import api_router
from app.core.errors import TaskAppError, TaskValidationError
from app.core.settings import get_settings
from app.db.init_db import init_db
from app.schemas.task import TITLE_REQUIRED

settings = get_settings()

# Configure root logging to show all application logs
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(levelname)s:     %(name)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

# Configure logging levels for different modules
logging.getLogger("sqlalchemy.engine").setLevel(logging.ERROR)
logging.getLogger("sqlalchemy.pool").setLevel(logging.ERROR)
logging.getLogger("sqlalchemy.dialects").setLevel(logging.ERROR)

logger = logging.getLogger(__name__)


def register_error_handlers(application: FastAPI) -> None:
    """Render every failure as {"error": <message>}."""

    @application.exception_handler(TaskAppError)
    async def task_error_handler(request: Request, exc: TaskAppError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        if not errors:
            message = TaskValidationError.default_message
        elif errors[0]["type"] == "missing" and tuple(errors[0]["loc"]) == ("body",):
            # No body at all means no title.
            message = TITLE_REQUIRED
        else:
            message = errors[0]["msg"]
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    @application.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Server error"},
        )


def create_application() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=f"{settings.api_prefix}/openapi.json",
    )

    # CORS middleware for the frontend origin(s)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)
    application.include_router(api_router, prefix=settings.api_prefix)

    @application.on_event("startup")
    async def startup_event():
        """Initialize database on startup."""
        init_db()

    return application


app = create_application()

"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .db import TaskRepository, create_repository
from .errors import TaskServiceError, TaskValidationError
from .gateway import TaskGateway
from .logging_setup import setup_logging
from .routers import tasks

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PATCH", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type"]


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def create_app(
    settings: Settings | None = None,
    repository: TaskRepository | None = None,
) -> FastAPI:
    """Build the API around ``repository`` (or the one selected by settings)."""
    settings = settings or get_settings()
    if repository is None:
        repository = create_repository(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Prepare the task store on startup."""
        repository.init_db()
        logger.info("Task store initialized (%s)", type(repository).__name__)
        yield

    app = FastAPI(
        title="Task Manager API",
        description="Task CRUD with priorities and due dates",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.gateway = TaskGateway(repository)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    @app.exception_handler(TaskValidationError)
    async def validation_error_handler(request: Request, exc: TaskValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_error_handler(request: Request, exc: RequestValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, "Request body must be a JSON object")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail), exc.headers)

    @app.exception_handler(TaskServiceError)
    async def service_error_handler(request: Request, exc: TaskServiceError):
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)

    app.include_router(tasks.router)

    @app.get("/", response_class=PlainTextResponse)
    def index():
        return "api todo app is running"

    @app.get("/health", response_class=PlainTextResponse)
    def health():
        """Liveness only. Does not check the task store."""
        return "ok"

    return app


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(level=settings.log_level, log_dir=settings.log_dir)
    logger.info("Starting server on %s:%d (store=%s)", settings.host, settings.port, settings.store)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

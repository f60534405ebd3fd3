"""Main FastAPI application for the todo API."""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response, status

from todo_api import __version__
from todo_api.api.routes import router as todo_router
from todo_api.config import Settings, get_settings
from todo_api.database import TodoCollection
from todo_api.exceptions import TodoNotFoundError
from todo_api.logging_utils import configure_logging, reset_request_id, set_request_id

logger = logging.getLogger(__name__)


def build_collection(settings: Settings) -> TodoCollection:
    """Return the startup collection: seeded from ``settings.seed_path`` when set, otherwise empty."""
    if settings.seed_path:
        return TodoCollection.from_file(settings.seed_path)
    return TodoCollection()


def create_app(
    collection: Optional[TodoCollection] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Starting %s with %d todos at %s/todos",
            settings.title,
            len(app.state.collection),
            settings.api_prefix,
        )
        yield
        logger.info("Shutting down %s", settings.title)

    app = FastAPI(
        title=settings.title,
        description="The todos managing API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.collection = collection if collection is not None else build_collection(settings)

    @app.exception_handler(TodoNotFoundError)
    async def todo_not_found_handler(request: Request, exc: TodoNotFoundError) -> Response:
        logger.info("Todo id=%s not found (%s %s)", exc.todo_id, request.method, request.url.path)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(request_token)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/", include_in_schema=False)
    def root() -> dict[str, str]:
        """Root endpoint with basic API info."""
        return {
            "message": settings.title,
            "endpoints": f"{settings.api_prefix}/todos",
        }

    @app.get("/health", include_in_schema=False)
    def read_health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(todo_router, prefix=settings.api_prefix)
    return app


app = create_app()

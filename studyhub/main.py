"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studyhub.config import Settings, configure_logging, get_settings
from studyhub.database import Database
from studyhub.exceptions import StudyHubError, ValidationError
from studyhub.routers import flashcards, notes, progress, quizzes, study_sets, users
from studyhub.storage import DatabaseStorage, StorageProtocol

logger = structlog.get_logger(__name__)


def create_app(
    settings: Settings | None = None, storage: StorageProtocol | None = None
) -> FastAPI:
    """
    Build the application.

    When ``storage`` is given it is used as is; otherwise the database is
    opened from ``settings`` at startup and closed at shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.ENVIRONMENT)
        if storage is not None:
            app.state.storage = storage
            yield
            return

        database = Database.from_settings(settings)
        database.create_all()
        app.state.database = database
        app.state.storage = DatabaseStorage(database)
        logger.info("app_started", environment=settings.ENVIRONMENT)
        try:
            yield
        finally:
            database.dispose()
            logger.info("app_shutdown")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StudyHubError)
    async def studyhub_error_handler(_request: Request, exc: StudyHubError) -> JSONResponse:
        content: dict[str, object] = {"detail": exc.message}
        if isinstance(exc, ValidationError) and exc.errors:
            content["errors"] = exc.errors
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unexpected_error", path=request.url.path, error=str(exc), exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred. Please try again later."},
        )

    api_router = APIRouter(prefix=settings.API_V1_PREFIX)

    @api_router.get("/")
    def api_root() -> dict[str, str]:
        """API v1 root endpoint."""
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    for module in (users, study_sets, flashcards, quizzes, notes, progress):
        api_router.include_router(module.router)
    app.include_router(api_router)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint."""
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("studyhub.main:app", host="0.0.0.0", port=8000, reload=False)  # noqa: S104

"""Main FastAPI application."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette import status

from lifelessons.config import configure_logging, get_settings
from lifelessons.database import dispose_engine, initialize_database, ping_database
from lifelessons.domain.common import DomainError
from lifelessons.exceptions import LifeLessonsError, StorageUnavailableError
from lifelessons.infrastructure.common.rate_limit import limiter
from lifelessons.infrastructure.identity.routers import users
from lifelessons.infrastructure.lessons.routers import favorites, lessons

settings = get_settings()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Connect to the store before serving and release it on shutdown."""
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    ping_database()
    logger.info("application_started", environment=settings.ENVIRONMENT, port=settings.PORT)
    yield
    dispose_engine()
    logger.info("application_stopped")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def life_lessons_error_handler(request: Request, exc: LifeLessonsError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("request_failed", path=request.url.path, error=exc.message)
    return _error_response(exc.status_code, exc.message)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]
    app.add_exception_handler(LifeLessonsError, life_lessons_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(lessons.router)
    app.include_router(favorites.router)
    app.include_router(users.router)

    @app.get("/", tags=["meta"])
    def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health", tags=["meta"])
    def health() -> JSONResponse:
        """Report whether the store answers a trivial query."""
        try:
            ping_database()
        except StorageUnavailableError:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unavailable"},
            )
        return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "healthy"})

    return app


app = create_app()


if __name__ == "__main__":
    logging.getLogger(__name__).info("Starting %s on port %s", settings.PROJECT_NAME, settings.PORT)
    uvicorn.run("lifelessons.main:app", host=settings.HOST, port=settings.PORT)

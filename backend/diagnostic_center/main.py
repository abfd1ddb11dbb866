"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.database import Database

from diagnostic_center.api import auth, banners, diagnostic_tests, doctors, health, reservations, users
from diagnostic_center.config import Settings, get_settings
from diagnostic_center.context import AppContext
from diagnostic_center.database.ensure_indexes import ensure_indexes
from diagnostic_center.middleware.exception_handlers import register_exception_handlers
from diagnostic_center.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def configure_logging(env: str) -> None:
    """
    Configure logging based on the ENV setting.

    ENV=dev: INFO level with detailed format (default)
    ENV=prod/staging: WARNING level, minimal logs
    """
    is_dev = env.lower() == "dev"
    logging.basicConfig(
        level=logging.INFO if is_dev else logging.WARNING,
        format=(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
            if is_dev
            else "%(levelname)s | %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    # Enable request/exception loggers in dev mode only
    if is_dev:
        logging.getLogger("app.request").setLevel(logging.INFO)
        logging.getLogger("app.exception").setLevel(logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    context: AppContext = app.state.context
    try:
        ensure_indexes(context.db)
    except Exception as e:
        logger.warning(f"Failed to ensure database indexes: {e}")
    logger.info(f"Serving database {context.db.name}")
    try:
        yield
    finally:
        context.close()


def create_app(settings: Optional[Settings] = None, db: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    Settings are loaded here when not given, so a missing required
    environment value fails at startup. ``db`` replaces the MongoDB
    connection, e.g. with an in-memory database in tests.
    """
    settings = settings or get_settings()
    configure_logging(settings.ENV)

    app = FastAPI(
        title=settings.APP_NAME,
        description="API for diagnostic tests, doctors, reservations and banners",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.context = AppContext.build(settings, db=db)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Trace middleware for request logging and correlation
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(diagnostic_tests.router)
    app.include_router(doctors.router)
    app.include_router(reservations.router)
    app.include_router(banners.router)

    return app


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "diagnostic_center.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
    )


if __name__ == "__main__":
    run()

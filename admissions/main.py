"""
Cohort Admissions API - Main Application
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional

from .api import applications, application_detail, stats
from .core.config import Settings, settings
from .core.correlation import CorrelationIdMiddleware
from .core.database import Database
from .core.errors import request_validation_exception_handler
from .core.logging_config import setup_logging
from .services.sql_store import SqlAlchemyApplicationStore
from .services.store import ApplicationStore, InMemoryApplicationStore, sample_applications

# Setup logging
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def build_store(config: Settings) -> tuple[ApplicationStore, Optional[Database]]:
    """Construct the configured store and, for the database backend, its handle"""
    if config.STORE_BACKEND == "database":
        database = Database(config.DATABASE_URL, echo=config.DATABASE_ECHO)
        database.create_all()
        return SqlAlchemyApplicationStore(database), database

    seed = sample_applications() if config.SEED_SAMPLE_DATA else []
    return InMemoryApplicationStore(seed), None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup/shutdown"""
    config: Settings = app.state.settings

    logger.info(f"{config.API_TITLE} starting...", extra={"correlation_id": "startup"})
    logger.info(f"Environment: {config.ENVIRONMENT}", extra={"correlation_id": "startup"})
    logger.info(f"Store backend: {config.STORE_BACKEND}", extra={"correlation_id": "startup"})

    store, database = build_store(config)
    app.state.store = store
    app.state.database = database

    if database is not None:
        logger.info(f"Database: {database.url.split('@')[-1]}", extra={"correlation_id": "startup"})

    yield

    if database is not None:
        database.close()
    logger.info(f"{config.API_TITLE} shutting down...", extra={"correlation_id": "shutdown"})


def create_app(config: Settings = settings) -> FastAPI:
    app = FastAPI(
        title=config.API_TITLE,
        description=config.API_DESCRIPTION,
        version=config.VERSION,
        lifespan=lifespan,
        docs_url="/docs" if config.ENABLE_DOCS else None,
        redoc_url="/redoc" if config.ENABLE_REDOC else None,
    )
    app.state.settings = config
    app.state.store = None
    app.state.database = None

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    # Middleware
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-Id"],
    )

    # Stats first: /applications/stats must not match /applications/{application_id}
    app.include_router(stats.router)
    app.include_router(applications.router)
    app.include_router(application_detail.router)

    @app.get("/health", tags=["System"])
    async def health_check():
        """
        Health check with database verification

        Returns 200 if healthy, 503 if unhealthy
        """
        health = {
            "status": "healthy",
            "environment": config.ENVIRONMENT,
            "version": config.VERSION,
            "store": config.STORE_BACKEND,
            "database": "not configured",
        }

        database: Optional[Database] = app.state.database
        if database is not None:
            try:
                database.check_health()
                health["database"] = "connected"
            except Exception as e:
                health["database"] = "disconnected"
                health["status"] = "unhealthy"
                logger.error(f"Health check: database unhealthy: {e}")

        status_code = 200 if health["status"] == "healthy" else 503
        return JSONResponse(content=health, status_code=status_code)

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint"""
        return {
            "service": config.API_TITLE,
            "version": config.VERSION,
            "environment": config.ENVIRONMENT,
            "docs": "/docs" if config.ENABLE_DOCS else None,
            "health": "/health",
        }

    return app


app = create_app()

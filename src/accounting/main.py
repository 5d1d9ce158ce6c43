from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text

from src.accounting.api.middlewares import audit_context_middleware, logging_context_middleware
from src.accounting.api.v1.router import api_router
from src.accounting.core.config import get_settings
from src.accounting.core.db import dispose_engine, get_session
from src.accounting.core.exceptions import setup_exception_handlers
from src.accounting.core.logging import get_logger, setup_logging
from src.accounting.web.pages import router as pages_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}")

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "Session login and logout"},
    {"name": "investments", "description": "Money invested into projects"},
    {"name": "products", "description": "Product catalogue"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Multi-company accounting API and dashboard",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)

    # Registered innermost first; CorrelationIdMiddleware must wrap the rest
    app.middleware("http")(audit_context_middleware)
    app.middleware("http")(logging_context_middleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )

    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(api_router)
    app.include_router(pages_router)

    if settings.metrics_enabled:
        Instrumentator().instrument(app).expose(app, endpoint="/metrics")

    @app.get("/health")
    async def health() -> JSONResponse:
        """Health check with database validation."""
        health_status = {"status": "healthy", "database": "unknown"}
        try:
            async with get_session() as session:
                await session.execute(text("SELECT 1"))
            health_status["database"] = "healthy"
        except Exception as e:
            health_status["database"] = f"unhealthy: {str(e)}"
            health_status["status"] = "unhealthy"

        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)

    return app


app = create_app()

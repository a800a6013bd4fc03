import secrets
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.moneybook.api.dependencies import DBSession, require_tenant_pipeline
from src.moneybook.api.dependencies.tenancy import unguarded_tenant_routes
from src.moneybook.api.middlewares import setup_middlewares
from src.moneybook.api.v1.router import api_router, build_tenant_route_policy
from src.moneybook.core.config import get_settings
from src.moneybook.core.db import dispose_engine, run_migrations_async
from src.moneybook.core.exceptions import setup_exception_handlers
from src.moneybook.core.logging import get_logger, setup_logging
from src.moneybook.core.rate_limit import limiter

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}")

    if settings.run_migrations_on_startup:
        logger.info("Running database migrations...")
        await run_migrations_async()

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "Authentication and token management"},
    {"name": "users", "description": "User account operations"},
    {"name": "tenants", "description": "Tenant management"},
    {"name": "roles", "description": "Role assignments within a tenant"},
    {"name": "transactions", "description": "Financial transactions of a tenant"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant personal finance API",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        dependencies=[Depends(require_tenant_pipeline)],
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    setup_middlewares(app, settings)

    app.include_router(api_router)

    # Refuse to start with a tenant-scoped route that skips a tenancy stage
    unguarded = unguarded_tenant_routes(app.routes)
    if unguarded:
        raise RuntimeError(f"Tenant-scoped routes without tenant authorization: {', '.join(unguarded)}")

    # Every tenant-scoped route needs a declared minimum role
    policy = build_tenant_route_policy()
    undeclared = policy.undeclared_routes(app.routes)
    if undeclared:
        raise RuntimeError(f"Tenant-scoped routes without a minimum role: {', '.join(undeclared)}")
    app.state.tenant_route_policy = policy

    instrumentator = Instrumentator().instrument(app)

    if settings.metrics_api_key:
        api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

        async def verify_metrics_key(api_key: str | None = Depends(api_key_header)) -> None:
            if (
                api_key is None
                or settings.metrics_api_key is None
                or not secrets.compare_digest(api_key, settings.metrics_api_key)
            ):
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Invalid or missing metrics API key",
                )

        instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(verify_metrics_key)])
    else:
        instrumentator.expose(app, endpoint="/metrics")

    @app.get("/health")
    async def health(session: DBSession) -> JSONResponse:
        """Health check with database validation."""
        try:
            await session.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning("Health check failed", error=str(e))
            return JSONResponse(
                content={"status": "unhealthy", "database": "unhealthy"},
                status_code=503,
            )
        return JSONResponse(content={"status": "healthy", "database": "healthy"})

    return app


app = create_app()

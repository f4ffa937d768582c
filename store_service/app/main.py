"""
Store Service FastAPI Application
=================================

Main application entry point for the Store Service.
Exposes CRUD endpoints for products, orders and order items backed by a
relational database, behind JWT authentication and structured logging.
"""

import time
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.health import router as health_router
from .api.v1.order_items import router as order_items_router
from .api.v1.orders import router as orders_router
from .api.v1.products import router as products_router
from .core.database import StoreServiceDatabaseManager
from .core.setting import StoreSettings, get_settings
from .middleware.auth import setup_store_auth_middleware
from .middleware.error import setup_store_error_handling
from .middleware.logging import RequestLoggingMiddleware
from .utils.logging import setup_store_logging


def _is_file_logging_environment(settings: StoreSettings) -> bool:
    return settings.ENVIRONMENT.lower() in ["production", "staging"]


def create_app(settings: Optional[StoreSettings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    enable_file_logging = _is_file_logging_environment(settings)

    logger = setup_store_logging(
        "store_service",
        log_level=settings.LOG_LEVEL,
        enable_file_logging=enable_file_logging,
        log_dir=settings.LOG_DIR,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        startup_start = time.time()

        try:
            logger.info(
                "Starting store service initialization",
                extra={
                    "environment": settings.ENVIRONMENT,
                    "debug_mode": settings.DEBUG,
                    "file_logging_enabled": enable_file_logging,
                    "service_version": settings.APP_VERSION,
                },
            )

            db_start = time.time()
            database_manager = StoreServiceDatabaseManager(
                database_url=settings.STORE_DATABASE_URL,
                echo=settings.DEBUG,
                pool_size=settings.DATABASE_POOL_SIZE,
                max_overflow=settings.DATABASE_MAX_OVERFLOW,
            )
            app.state.database_manager = database_manager
            await database_manager.create_tables()
            db_duration = int((time.time() - db_start) * 1000)

            logger.info(
                "Store service started successfully",
                extra={
                    "total_startup_duration_ms": int(
                        (time.time() - startup_start) * 1000
                    ),
                    "database_init_ms": db_duration,
                },
            )

        except Exception as e:
            logger.error(
                "Failed to start store service",
                exc_info=True,
                extra={
                    "startup_duration_ms": int((time.time() - startup_start) * 1000),
                    "error_type": type(e).__name__,
                },
            )
            raise

        yield

        shutdown_start = time.time()
        logger.info("Starting store service shutdown")
        await app.state.database_manager.close()
        logger.info(
            "Store service shutdown completed",
            extra={"shutdown_duration_ms": int((time.time() - shutdown_start) * 1000)},
        )

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )
    app.state.settings = settings

    # === MIDDLEWARE STACK (last added runs first) ===

    # 1. Authentication (innermost, sees correlation ID)
    setup_store_auth_middleware(
        app, secret_key=settings.SECRET_KEY, algorithm=settings.ALGORITHM
    )

    # 2. Request logging and correlation IDs
    app.add_middleware(RequestLoggingMiddleware)

    # 3. CORS (outermost, answers preflight before auth)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_CREDENTIALS,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
    )

    setup_store_error_handling(app)

    routers_info: list[dict[str, Any]] = []

    app.include_router(health_router, tags=["Health"])
    routers_info.append({"router": "health", "prefix": "", "tags": ["Health"]})

    for name, router, tag in [
        ("products", products_router, "Products"),
        ("orders", orders_router, "Orders"),
        ("order_items", order_items_router, "Order Items"),
    ]:
        app.include_router(router, prefix="/api", tags=[tag])
        routers_info.append({"router": name, "prefix": "/api", "tags": [tag]})

    logger.info(
        "API routes configured",
        extra={"total_routers": len(routers_info), "routers": routers_info},
    )

    return app


app = create_app()

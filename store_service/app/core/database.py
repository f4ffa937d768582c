"""Database configuration for Store Service"""

from typing import Any, AsyncGenerator, Dict

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from ..models import StoreServiceBase
from ..utils.logging import get_store_logger, mask_database_url

logger = get_store_logger("store_service.database")


class StoreServiceDatabaseManager:
    """Custom database manager for Store Service with optimized settings."""

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 40,
    ) -> None:
        logger.info(
            "Initializing Store Service database manager",
            extra={
                "operation": "database_manager_init",
                "database_url": mask_database_url(database_url),
                "echo": echo,
                "event_type": "database_manager_initialization",
            },
        )

        engine_kwargs: Dict[str, Any] = {
            "echo": echo,
            "future": True,
        }

        if "sqlite" in database_url:
            # SQLite configuration for development and tests
            engine_kwargs["connect_args"] = {
                "timeout": 60,
                "check_same_thread": False,
            }
        else:
            # PostgreSQL configuration
            engine_kwargs.update(
                {
                    "pool_size": pool_size,
                    "max_overflow": max_overflow,
                    "pool_timeout": 45,
                    "pool_recycle": 3600,
                    "pool_pre_ping": True,
                    "pool_reset_on_return": "commit",
                    "connect_args": {"command_timeout": 30},
                }
            )

        self.async_engine = create_async_engine(database_url, **engine_kwargs)
        self.async_session_maker = async_sessionmaker(
            bind=self.async_engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
            autocommit=False,
        )

    async def create_tables(self) -> None:
        """Create all Store Service database tables."""
        async with self.async_engine.begin() as conn:
            await conn.run_sync(StoreServiceBase.metadata.create_all, checkfirst=True)
        logger.info(
            "Database tables created successfully",
            extra={
                "operation": "create_tables",
                "tables": sorted(StoreServiceBase.metadata.tables),
                "event_type": "database_tables_created",
            },
        )

    async def ping(self) -> bool:
        """Run a trivial query to confirm the store is reachable."""
        async with self.async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def get_async_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get async database session for Store Service."""
        async with self.async_session_maker() as session:
            yield session

    async def close(self) -> None:
        """Properly close the Store Service database engine and connections."""
        await self.async_engine.dispose()
        logger.info(
            "Store Service database connections closed",
            extra={
                "operation": "database_close",
                "event_type": "database_shutdown_complete",
            },
        )


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Database session dependency bound to the application's database manager"""
    database_manager: StoreServiceDatabaseManager = (
        request.app.state.database_manager
    )
    async for session in database_manager.get_async_session():
        yield session

"""Database connection and session management using SQLAlchemy with async support."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .models import Base

logger = structlog.get_logger(__name__)


class DatabaseManager:
    """Database connection and session manager."""

    def __init__(self, database_url: str, echo: bool = False):
        """Initialize database manager with async engine."""
        self.database_url = database_url

        self.engine = create_async_engine(
            self.database_url,
            echo=echo,  # Enable SQL logging in debug mode
            future=True,
        )

        self.async_session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a database session with proper cleanup."""
        async with self.async_session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def init_db(self) -> None:
        """Create all tables defined on the declarative Base.

        Raises:
            SQLAlchemyError: If database connection or table creation fails
        """
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error(
                "Database initialization failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        logger.info(
            "Database initialization completed successfully",
            table_names=list(Base.metadata.tables.keys()),
        )

    async def close(self) -> None:
        """Close database connections."""
        await self.engine.dispose()


# Dependency for FastAPI routes
async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for getting a database session."""
    db_manager: DatabaseManager = request.app.state.db_manager
    async with db_manager.get_session() as session:
        yield session

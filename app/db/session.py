"""
Database engine and session management.
The schema is created from app.models.metadata; there is no migration tool.
"""

import logging
from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.config import settings
from app.models import metadata

logger = logging.getLogger(__name__)

engine: AsyncEngine = create_async_engine(settings.database_url, echo=settings.sql_echo)

# expire_on_commit=False: committed objects stay readable without an implicit (async) reload
SessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Creates any missing tables (CREATE TABLE IF NOT EXISTS semantics)."""
    bind = bind or engine
    async with bind.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database schema ready (%s)", ", ".join(metadata.tables))


async def close_db(bind: AsyncEngine | None = None) -> None:
    await (bind or engine).dispose()


async def get_session() -> AsyncIterator[AsyncSession]:
    """Yields a session for one unit of work; suitable as a framework dependency."""
    async with SessionLocal() as session:
        yield session

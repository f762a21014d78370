from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession

from ..core.config import settings

log = logging.getLogger(__name__)

engine: Optional[AsyncEngine] = None
SessionLocal: Optional[async_sessionmaker[AsyncSession]] = None


async def init_engine(dsn: Optional[str] = None) -> AsyncEngine:
    """Create the shared engine once; later calls return the existing one."""
    global engine
    if engine is None:
        engine = create_async_engine(dsn or settings.DATABASE_URL, future=True, echo=False)
        log.debug("Engine created for %s", engine.url.render_as_string(hide_password=True))
    return engine


def init_sessionmaker() -> async_sessionmaker[AsyncSession]:
    global SessionLocal
    if SessionLocal is None:
        assert engine is not None, "Engine not initialized"
        SessionLocal = async_sessionmaker(engine, expire_on_commit=False)
    return SessionLocal


async def set_sqlite_pragmas() -> None:
    assert engine is not None
    # File-backed SQLite only
    if engine.dialect.name != "sqlite" or engine.url.database in (None, "", ":memory:"):
        return
    async with engine.begin() as conn:  # type: ignore
        await conn.exec_driver_sql("PRAGMA journal_mode=WAL;")
        await conn.exec_driver_sql("PRAGMA foreign_keys=ON;")


async def dispose_engine() -> None:
    global engine, SessionLocal
    if engine is not None:
        await engine.dispose()
    engine = None
    SessionLocal = None

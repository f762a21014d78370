from __future__ import annotations

from typing import Optional

from sqlalchemy import MetaData

from ..core.logging_config import get_logger
from . import db
from .models import Base

log = get_logger(__name__)


async def migrate(metadata: Optional[MetaData] = None) -> None:
    assert db.engine is not None, "Engine not initialized"
    metadata = metadata if metadata is not None else Base.metadata
    async with db.engine.begin() as conn:  # type: ignore
        await conn.run_sync(metadata.create_all)
    await db.set_sqlite_pragmas()
    log.info("Schema ready (%d tables)", len(metadata.tables))

from __future__ import annotations

import pytest
import pytest_asyncio

from translatable import TranslationConfig
from translatable.infra import db
from translatable.infra.migrate import migrate

from .models import Article, Product


@pytest.fixture
def config() -> TranslationConfig:
    return TranslationConfig(locale="en")


@pytest.fixture
def article(config: TranslationConfig) -> Article:
    record = Article()
    record.translation_config = config
    return record


@pytest.fixture
def product(config: TranslationConfig) -> Product:
    record = Product()
    record.translation_config = config
    return record


@pytest_asyncio.fixture
async def database(tmp_path):
    await db.init_engine(f"sqlite+aiosqlite:///{tmp_path / 'translatable.db'}")
    db.init_sessionmaker()
    await migrate()
    yield db.SessionLocal
    await db.dispose_engine()

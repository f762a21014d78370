from __future__ import annotations

from typing import Any, Iterable, Type, TypeVar

from sqlalchemy import JSON, case, func, or_, select, type_coerce
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.translations import HasTranslations

M = TypeVar("M", bound=HasTranslations)


def _locale_value(model: Type[HasTranslations], field: str, locale: str):
    # Blank or malformed cells read as NULL, like an empty translation set
    column = getattr(model, field)
    return case(
        (func.json_valid(column) == 1, type_coerce(column, JSON)[locale].as_string()),
        else_=None,
    )


class TranslationsRepo:
    def __init__(self, session: AsyncSession) -> None:
        self.s = session

    async def get(self, model: Type[M], ident: Any) -> M | None:
        return await self.s.get(model, ident)

    def add(self, record: HasTranslations) -> None:
        self.s.add(record)

    async def where_locale(self, model: Type[M], field: str, locale: str) -> list[M]:
        q = select(model).where(_locale_value(model, field, locale) != "")
        rows = (await self.s.execute(q)).scalars().all()
        return list(rows)

    async def where_locales(self, model: Type[M], field: str, locales: Iterable[str]) -> list[M]:
        conditions = [_locale_value(model, field, locale) != "" for locale in locales]
        if not conditions:
            return []
        q = select(model).where(or_(*conditions))
        rows = (await self.s.execute(q)).scalars().all()
        return list(rows)

    async def where_translation(self, model: Type[M], field: str, locale: str, value: str) -> list[M]:
        q = select(model).where(_locale_value(model, field, locale) == value)
        rows = (await self.s.execute(q)).scalars().all()
        return list(rows)

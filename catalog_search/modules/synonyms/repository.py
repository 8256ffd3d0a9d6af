"""Persistence for synonym dictionary entries."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from typing import Any

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_search.database.base import utcnow
from catalog_search.exceptions import DuplicateSynonymException
from catalog_search.models.enums import SynonymLanguage
from catalog_search.models.synonym import Synonym

logger = logging.getLogger(__name__)


def _is_unique_violation(exc: IntegrityError) -> bool:
    return "unique" in str(exc.orig).lower()


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SynonymRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_active(self) -> list[Synonym]:
        stmt = (
            select(Synonym)
            .where(Synonym.is_active.is_(True))
            .order_by(Synonym.canonical, Synonym.weight.desc(), Synonym.synonym)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def list_all(self, language: SynonymLanguage | None = None) -> list[Synonym]:
        """Every entry, active or not."""
        stmt = select(Synonym).order_by(Synonym.canonical, Synonym.synonym)
        if language is not None:
            stmt = stmt.where(Synonym.language == language)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def list_page(
        self,
        offset: int,
        limit: int,
        search: str | None = None,
        language: SynonymLanguage | None = None,
    ) -> tuple[list[Synonym], int]:
        filters = []
        if search:
            pattern = f"%{_escape_like(search.strip().lower())}%"
            filters.append(
                or_(
                    Synonym.canonical.ilike(pattern, escape="\\"),
                    Synonym.synonym.ilike(pattern, escape="\\"),
                )
            )
        if language is not None:
            filters.append(Synonym.language == language)

        count_stmt = select(func.count()).select_from(Synonym).where(*filters)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(Synonym)
            .where(*filters)
            .order_by(Synonym.canonical.asc(), Synonym.weight.desc(), Synonym.synonym.asc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all()), total

    async def get(self, synonym_id: uuid.UUID) -> Synonym | None:
        return await self._session.get(Synonym, synonym_id)

    async def insert(self, entry: Synonym) -> Synonym:
        self._session.add(entry)
        await self._flush(entry.canonical, entry.synonym, entry.language)
        return entry

    async def update(self, entry: Synonym, changes: dict[str, Any]) -> Synonym:
        for key, value in changes.items():
            setattr(entry, key, value)
        await self._flush(entry.canonical, entry.synonym, entry.language)
        return entry

    async def delete(self, entry: Synonym) -> None:
        await self._session.delete(entry)
        await self._session.flush()

    async def increment_usage(self, terms: Iterable[str]) -> int:
        """Bump ``usage_count`` on active entries whose synonym is in ``terms``."""
        terms = sorted({t.strip().lower() for t in terms if t and t.strip()})
        if not terms:
            return 0
        stmt = (
            update(Synonym)
            .where(Synonym.synonym.in_(terms), Synonym.is_active.is_(True))
            .values(usage_count=Synonym.usage_count + 1, last_used_at=utcnow())
        )
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def _flush(self, canonical: str, synonym: str, language: SynonymLanguage | str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            if _is_unique_violation(exc):
                lang = SynonymLanguage(language).value
                logger.warning("Duplicate synonym rejected: %s -> %s (%s)", synonym, canonical, lang)
                raise DuplicateSynonymException(
                    message=f"An entry for synonym '{synonym}' ({lang}) already exists",
                    details=[{"field": "synonym", "message": "duplicate synonym for this language"}],
                ) from exc
            raise

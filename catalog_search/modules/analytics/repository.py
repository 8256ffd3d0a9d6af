"""Persistence for daily search aggregates and the raw search log."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable

from sqlalchemy import Float, cast, distinct, extract, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from catalog_search.models.search_analytics import SearchAnalytics, SearchLog


class SearchAnalyticsRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _insert(self):
        dialect = self._session.get_bind().dialect.name
        if dialect == "postgresql":
            return postgresql.insert(SearchAnalytics)
        if dialect == "sqlite":
            return sqlite.insert(SearchAnalytics)
        raise NotImplementedError(f"Upsert is not supported on dialect {dialect!r}")

    async def upsert_accumulate(self, day: dt.date, query_normalized: str, result_count: int) -> None:
        """Add one search to the ``(day, query)`` bucket in a single statement."""
        zero = 1 if result_count == 0 else 0
        stmt = self._insert().values(
            date=day,
            query_normalized=query_normalized,
            search_count=1,
            zero_result_count=zero,
            total_results=result_count,
            avg_results=float(result_count),
        )
        # SET expressions see the pre-update row
        stmt = stmt.on_conflict_do_update(
            index_elements=[SearchAnalytics.date, SearchAnalytics.query_normalized],
            set_={
                "search_count": SearchAnalytics.search_count + 1,
                "zero_result_count": SearchAnalytics.zero_result_count + stmt.excluded.zero_result_count,
                "total_results": SearchAnalytics.total_results + stmt.excluded.total_results,
                "avg_results": cast(SearchAnalytics.total_results + stmt.excluded.total_results, Float)
                / (SearchAnalytics.search_count + 1),
            },
        )
        await self._session.execute(stmt)

    async def popular(self, since: dt.date, limit: int, min_searches: int = 1) -> list[tuple[str, int, float]]:
        """(query, total_searches, mean of daily avg_results) ordered by volume."""
        total = func.sum(SearchAnalytics.search_count)
        stmt = (
            select(
                SearchAnalytics.query_normalized,
                total.label("total_searches"),
                func.avg(SearchAnalytics.avg_results).label("avg_results"),
            )
            .where(SearchAnalytics.date >= since)
            .group_by(SearchAnalytics.query_normalized)
            .having(total >= min_searches)
            .order_by(total.desc(), SearchAnalytics.query_normalized)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [(row[0], int(row[1]), float(row[2] or 0.0)) for row in result.all()]

    async def zero_result(
        self,
        since: dt.date,
        limit: int,
        min_zero_searches: int = 1,
    ) -> list[tuple[str, int, int]]:
        """(query, zero_searches, total_searches) ordered by zero-result volume."""
        zero = func.sum(SearchAnalytics.zero_result_count)
        total = func.sum(SearchAnalytics.search_count)
        stmt = (
            select(SearchAnalytics.query_normalized, zero.label("zero_searches"), total.label("total_searches"))
            .where(SearchAnalytics.date >= since, SearchAnalytics.zero_result_count > 0)
            .group_by(SearchAnalytics.query_normalized)
            .having(zero >= min_zero_searches)
            .order_by(zero.desc(), SearchAnalytics.query_normalized)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [(row[0], int(row[1]), int(row[2])) for row in result.all()]

    async def zero_result_patterns(
        self,
        since: dt.date,
        min_searches: int,
        ratio: float,
        limit: int,
    ) -> list[tuple[str, int, int]]:
        """Queries that nearly always return nothing: (query, search_count, zero_count)."""
        total = func.sum(SearchAnalytics.search_count)
        zero = func.sum(SearchAnalytics.zero_result_count)
        stmt = (
            select(SearchAnalytics.query_normalized, total.label("search_count"), zero.label("zero_count"))
            .where(SearchAnalytics.date >= since)
            .group_by(SearchAnalytics.query_normalized)
            .having(total >= min_searches, zero >= total * ratio)
            .order_by(total.desc(), SearchAnalytics.query_normalized)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [(row[0], int(row[1]), int(row[2])) for row in result.all()]

    async def successful_vocabulary(self, limit: int, min_searches: int = 2) -> list[str]:
        stmt = (
            select(SearchAnalytics.query_normalized)
            .where(SearchAnalytics.avg_results > 0, SearchAnalytics.search_count >= min_searches)
            .distinct()
            .order_by(SearchAnalytics.query_normalized)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())


class SearchLogRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, entry: SearchLog) -> SearchLog:
        self._session.add(entry)
        await self._session.flush()
        return entry

    def _elapsed_seconds(self, earlier, later):
        dialect = self._session.get_bind().dialect.name
        if dialect == "postgresql":
            return extract("epoch", later.created_at - earlier.created_at)
        if dialect == "sqlite":
            return (func.julianday(later.created_at) - func.julianday(earlier.created_at)) * 86400
        raise NotImplementedError(f"Elapsed time is not supported on dialect {dialect!r}")

    async def follow_up_pairs(
        self,
        since: dt.datetime,
        window_seconds: int,
        min_sessions: int,
        min_length: int,
        limit: int,
    ) -> list[tuple[str, str, int]]:
        """(query, follow-up, sessions) for different queries searched within the window.

        A pair counts once per session; only pairs seen in ``min_sessions``
        sessions are returned, most frequent first.
        """
        first = aliased(SearchLog)
        second = aliased(SearchLog)
        elapsed = self._elapsed_seconds(first, second)
        sessions = func.count(distinct(first.session_id))
        stmt = (
            select(first.query_normalized, second.query_normalized, sessions.label("sessions"))
            .join(second, second.session_id == first.session_id)
            .where(
                first.session_id.is_not(None),
                first.created_at >= since,
                first.query_normalized != second.query_normalized,
                func.length(first.query_normalized) >= min_length,
                func.length(second.query_normalized) >= min_length,
                elapsed > 0,
                elapsed <= window_seconds,
            )
            .group_by(first.query_normalized, second.query_normalized)
            .having(sessions >= min_sessions)
            .order_by(sessions.desc(), first.query_normalized, second.query_normalized)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [(row[0], row[1], int(row[2])) for row in result.all()]

    async def session_counts(self, since: dt.datetime, queries: Iterable[str]) -> dict[str, int]:
        """Number of distinct sessions that searched each of ``queries``."""
        queries = sorted(set(queries))
        if not queries:
            return {}
        stmt = (
            select(SearchLog.query_normalized, func.count(distinct(SearchLog.session_id)))
            .where(
                SearchLog.session_id.is_not(None),
                SearchLog.created_at >= since,
                SearchLog.query_normalized.in_(queries),
            )
            .group_by(SearchLog.query_normalized)
        )
        result = await self._session.execute(stmt)
        return {row[0]: int(row[1]) for row in result.all()}

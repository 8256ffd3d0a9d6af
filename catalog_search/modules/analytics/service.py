"""Search analytics logger: records searches and reports on them."""

from __future__ import annotations

import datetime as dt
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_search.config import settings
from catalog_search.database.base import utcnow
from catalog_search.exceptions import ValidationException
from catalog_search.models.search_analytics import SearchLog
from catalog_search.modules.analytics.constants import (
    MAX_LOGGED_EXPANDED_TERMS,
    MAX_QUERY_LENGTH,
    MIN_SESSION_QUERY_LENGTH,
    SUCCESSFUL_MIN_SEARCHES,
)
from catalog_search.modules.analytics.repository import SearchAnalyticsRepository, SearchLogRepository
from catalog_search.modules.analytics.schemas import PopularSearch, ZeroResultSearch

logger = logging.getLogger(__name__)


def normalize_query(query: str) -> str:
    """Trim, lowercase and collapse whitespace; cap at the stored column width."""
    return " ".join(query.strip().lower().split())[:MAX_QUERY_LENGTH]


def window_start(days: int, today: dt.date | None = None) -> dt.date:
    """First day of a window covering today and the previous ``days - 1`` days."""
    today = today or utcnow().date()
    return today - dt.timedelta(days=max(days, 1) - 1)


class SearchAnalyticsLogger:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._analytics = SearchAnalyticsRepository(session)
        self._log = SearchLogRepository(session)

    async def record_search(
        self,
        query: str,
        result_count: int,
        session_id: str | None = None,
        expanded_terms: list[str] | None = None,
        execution_time_ms: int | None = None,
    ) -> str | None:
        """Log one search and fold it into today's aggregate.

        Returns the normalized query, or None when nothing was recorded
        (blank query or logging disabled).
        """
        if not settings.search_logging_enabled:
            return None
        normalized = normalize_query(query)
        if not normalized:
            return None
        if result_count < 0:
            raise ValidationException(
                message="result_count must not be negative",
                details=[{"field": "result_count", "message": "must be >= 0"}],
            )

        await self._log.insert(
            SearchLog(
                query=query.strip()[:MAX_QUERY_LENGTH],
                query_normalized=normalized,
                results_count=result_count,
                expanded_terms=(expanded_terms or [])[:MAX_LOGGED_EXPANDED_TERMS] or None,
                execution_time_ms=execution_time_ms,
                session_id=session_id,
            )
        )
        await self._analytics.upsert_accumulate(utcnow().date(), normalized, result_count)
        logger.debug("Search recorded: %r results=%d", normalized, result_count)
        return normalized

    async def get_popular_searches(self, days: int = 30, limit: int = 20) -> list[PopularSearch]:
        rows = await self._analytics.popular(window_start(days), limit)
        return [
            PopularSearch(query=query, total_searches=total, avg_results=round(avg, 1))
            for query, total, avg in rows
        ]

    async def get_zero_result_searches(
        self,
        days: int = 30,
        limit: int = 20,
        min_zero_searches: int = 1,
    ) -> list[ZeroResultSearch]:
        rows = await self._analytics.zero_result(window_start(days), limit, min_zero_searches)
        return [
            ZeroResultSearch(query=query, zero_searches=zero, total_searches=total)
            for query, zero, total in rows
        ]

    async def get_zero_result_patterns(
        self,
        days: int,
        limit: int,
        min_searches: int | None = None,
        ratio: float | None = None,
    ) -> list[tuple[str, int, int]]:
        """Recurring zero-result queries as (query, search_count, zero_count)."""
        return await self._analytics.zero_result_patterns(
            window_start(days),
            min_searches=settings.discovery_min_searches if min_searches is None else min_searches,
            ratio=settings.zero_result_ratio if ratio is None else ratio,
            limit=limit,
        )

    async def get_popular_low_result_searches(self, days: int, limit: int) -> list[PopularSearch]:
        """Frequent queries whose results average below one."""
        rows = await self._analytics.popular(window_start(days), limit, min_searches=settings.discovery_min_searches)
        return [
            PopularSearch(query=query, total_searches=total, avg_results=round(avg, 1))
            for query, total, avg in rows
            if avg < 1
        ]

    async def get_successful_vocabulary(self, limit: int = 1000) -> list[str]:
        return await self._analytics.successful_vocabulary(limit, min_searches=SUCCESSFUL_MIN_SEARCHES)

    async def get_session_follow_ups(
        self,
        days: int,
        limit: int,
        min_sessions: int | None = None,
    ) -> list[tuple[str, str, int, int]]:
        """Quick query reformulations inside sessions.

        Returns (query, follow_up, sessions_with_pair, sessions_with_query)
        for pairs seen in at least ``min_sessions`` sessions.
        """
        since = dt.datetime.combine(window_start(days), dt.time.min, tzinfo=dt.UTC)
        pairs = await self._log.follow_up_pairs(
            since,
            window_seconds=settings.session_pattern_window_seconds,
            min_sessions=settings.session_pattern_min_occurrences if min_sessions is None else min_sessions,
            min_length=MIN_SESSION_QUERY_LENGTH,
            limit=limit,
        )
        totals = await self._log.session_counts(since, (query for query, _, _ in pairs))
        return [(query, follow_up, sessions, totals[query]) for query, follow_up, sessions in pairs]

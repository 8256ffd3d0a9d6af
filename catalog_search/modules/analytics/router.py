"""Search analytics report endpoints."""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_search.app import limiter
from catalog_search.database.session import get_db
from catalog_search.modules.analytics.constants import (
    DEFAULT_REPORT_DAYS,
    DEFAULT_REPORT_LIMIT,
    MAX_REPORT_DAYS,
    MAX_REPORT_LIMIT,
)
from catalog_search.modules.analytics.schemas import PopularSearchesResponse, ZeroResultSearchesResponse
from catalog_search.modules.analytics.service import SearchAnalyticsLogger

router = APIRouter(prefix="/search-analytics", tags=["search-analytics"])


def _get_analytics(session: AsyncSession = Depends(get_db)) -> SearchAnalyticsLogger:
    return SearchAnalyticsLogger(session)


@router.get("/popular", response_model=PopularSearchesResponse)
@limiter.limit("60/minute")
async def popular_searches(
    request: Request,
    days: int = Query(DEFAULT_REPORT_DAYS, ge=1, le=MAX_REPORT_DAYS),
    limit: int = Query(DEFAULT_REPORT_LIMIT, ge=1, le=MAX_REPORT_LIMIT),
    analytics: SearchAnalyticsLogger = Depends(_get_analytics),
) -> PopularSearchesResponse:
    items = await analytics.get_popular_searches(days=days, limit=limit)
    return PopularSearchesResponse(days=days, items=items)


@router.get("/zero-results", response_model=ZeroResultSearchesResponse)
@limiter.limit("60/minute")
async def zero_result_searches(
    request: Request,
    days: int = Query(DEFAULT_REPORT_DAYS, ge=1, le=MAX_REPORT_DAYS),
    limit: int = Query(DEFAULT_REPORT_LIMIT, ge=1, le=MAX_REPORT_LIMIT),
    min_zero_searches: int = Query(1, ge=1),
    analytics: SearchAnalyticsLogger = Depends(_get_analytics),
) -> ZeroResultSearchesResponse:
    items = await analytics.get_zero_result_searches(days=days, limit=limit, min_zero_searches=min_zero_searches)
    return ZeroResultSearchesResponse(days=days, items=items)

"""Synonym discovery endpoints (mounted under /synonyms)."""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_search.app import limiter
from catalog_search.database.session import get_db
from catalog_search.modules.discovery.constants import DEFAULT_DISCOVERY_DAYS, MAX_DISCOVERY_DAYS
from catalog_search.modules.discovery.schemas import AutoCreateRequest, AutoCreateResult, DiscoveryResponse
from catalog_search.modules.discovery.service import SynonymAutoDiscovery

router = APIRouter(prefix="/synonyms", tags=["synonym-discovery"])


def _get_discovery(session: AsyncSession = Depends(get_db)) -> SynonymAutoDiscovery:
    return SynonymAutoDiscovery(session)


@router.get("/discover", response_model=DiscoveryResponse)
@limiter.limit("10/minute")
async def discover(
    request: Request,
    days: int = Query(DEFAULT_DISCOVERY_DAYS, ge=1, le=MAX_DISCOVERY_DAYS),
    discovery: SynonymAutoDiscovery = Depends(_get_discovery),
) -> DiscoveryResponse:
    suggestions = await discovery.analyze_search_patterns(days)
    return DiscoveryResponse(days=days, suggestions=suggestions)


@router.post("/auto-create", response_model=AutoCreateResult)
@limiter.limit("5/minute")
async def auto_create(
    request: Request,
    data: AutoCreateRequest,
    discovery: SynonymAutoDiscovery = Depends(_get_discovery),
) -> AutoCreateResult:
    suggestions = await discovery.analyze_search_patterns(data.days)
    return await discovery.auto_create_synonyms(suggestions, data.min_confidence)

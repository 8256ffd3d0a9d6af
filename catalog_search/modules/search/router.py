"""Query expansion endpoint for the retrieval engine."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_search.app import limiter
from catalog_search.database.session import get_db
from catalog_search.modules.search.schemas import ExpandRequest, ExpandResponse
from catalog_search.modules.search.service import QueryExpansionService

router = APIRouter(prefix="/search", tags=["search"])


def _get_expansion_service(session: AsyncSession = Depends(get_db)) -> QueryExpansionService:
    return QueryExpansionService(session)


@router.post("/expand", response_model=ExpandResponse)
@limiter.limit("120/minute")
async def expand_query(
    request: Request,
    data: ExpandRequest,
    service: QueryExpansionService = Depends(_get_expansion_service),
) -> ExpandResponse:
    expansion = await service.expand_query(data.query, max_terms=data.max_terms, category_hint=data.category_hint)
    recorded = False
    if data.result_count is not None:
        normalized = await service.record_outcome(
            data.query,
            data.result_count,
            session_id=data.session_id,
            expanded=expansion,
            execution_time_ms=data.execution_time_ms,
        )
        recorded = normalized is not None
    return ExpandResponse(expansion=expansion, recorded=recorded)

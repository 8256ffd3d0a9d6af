"""Synonym dictionary admin endpoints."""

import uuid

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_search.app import limiter
from catalog_search.database.session import get_db
from catalog_search.models.enums import SynonymLanguage
from catalog_search.modules.fuzzy.matcher import find_matches, find_phonetic_matches, get_suggestion
from catalog_search.modules.fuzzy.schemas import FuzzyTestResponse
from catalog_search.modules.language.schemas import TranslationResult
from catalog_search.modules.language.service import build_glossary, translate_query
from catalog_search.modules.synonyms.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from catalog_search.modules.synonyms.schemas import (
    SynonymCreate,
    SynonymGroup,
    SynonymListResponse,
    SynonymResponse,
    SynonymUpdate,
    ToggleResponse,
)
from catalog_search.modules.synonyms.service import SynonymService
from catalog_search.schemas.responses import PaginationMeta

router = APIRouter(prefix="/synonyms", tags=["synonyms"])


def _get_synonym_service(session: AsyncSession = Depends(get_db)) -> SynonymService:
    return SynonymService(session)


@router.get("", response_model=SynonymListResponse)
@limiter.limit("60/minute")
async def list_synonyms(
    request: Request,
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    search: str | None = None,
    service: SynonymService = Depends(_get_synonym_service),
) -> SynonymListResponse:
    entries, total = await service.list_synonyms(page=page, page_size=page_size, search=search)
    return SynonymListResponse(
        items=[SynonymResponse.model_validate(e) for e in entries],
        pagination=PaginationMeta.build(page=page, page_size=page_size, total_items=total),
    )


@router.post("", response_model=SynonymResponse, status_code=201)
@limiter.limit("30/minute")
async def create_synonym(
    request: Request,
    data: SynonymCreate,
    service: SynonymService = Depends(_get_synonym_service),
) -> SynonymResponse:
    entry = await service.create_synonym(data)
    return SynonymResponse.model_validate(entry)


# Static routes before /{synonym_id}

@router.get("/fuzzy-test", response_model=FuzzyTestResponse)
@limiter.limit("60/minute")
async def fuzzy_test(
    request: Request,
    term: str = Query(..., min_length=1, max_length=100),
    service: SynonymService = Depends(_get_synonym_service),
) -> FuzzyTestResponse:
    vocabulary = await service.vocabulary()
    others = vocabulary - {term.strip().lower()}
    return FuzzyTestResponse(
        term=term,
        fuzzy_matches=find_matches(term, others, limit=5),
        phonetic_matches=sorted(find_phonetic_matches(term, vocabulary)),
        suggestion=get_suggestion(term, vocabulary),
    )


@router.get("/translate", response_model=TranslationResult)
@limiter.limit("60/minute")
async def translate(
    request: Request,
    q: str = Query(..., min_length=1, max_length=255),
    service: SynonymService = Depends(_get_synonym_service),
) -> TranslationResult:
    index = await service.load_data()
    return translate_query(q, build_glossary(index.translations(SynonymLanguage.FR)))


@router.get("/by-language/{language}", response_model=list[SynonymGroup])
@limiter.limit("60/minute")
async def synonyms_by_language(
    request: Request,
    language: str,
    service: SynonymService = Depends(_get_synonym_service),
) -> list[SynonymGroup]:
    return await service.get_synonyms_by_language(language)


@router.get("/by-category/{category_hint}", response_model=list[SynonymGroup])
@limiter.limit("60/minute")
async def synonyms_by_category(
    request: Request,
    category_hint: str,
    service: SynonymService = Depends(_get_synonym_service),
) -> list[SynonymGroup]:
    return await service.get_synonyms_by_category(category_hint)


@router.get("/{synonym_id}", response_model=SynonymResponse)
@limiter.limit("60/minute")
async def get_synonym(
    request: Request,
    synonym_id: uuid.UUID,
    service: SynonymService = Depends(_get_synonym_service),
) -> SynonymResponse:
    entry = await service.get_synonym(synonym_id)
    return SynonymResponse.model_validate(entry)


@router.patch("/{synonym_id}", response_model=SynonymResponse)
@limiter.limit("30/minute")
async def update_synonym(
    request: Request,
    synonym_id: uuid.UUID,
    data: SynonymUpdate,
    service: SynonymService = Depends(_get_synonym_service),
) -> SynonymResponse:
    entry = await service.update_synonym(synonym_id, data)
    return SynonymResponse.model_validate(entry)


@router.delete("/{synonym_id}", status_code=204)
@limiter.limit("30/minute")
async def delete_synonym(
    request: Request,
    synonym_id: uuid.UUID,
    service: SynonymService = Depends(_get_synonym_service),
) -> Response:
    await service.delete_synonym(synonym_id)
    return Response(status_code=204)


@router.post("/{synonym_id}/toggle", response_model=ToggleResponse)
@limiter.limit("30/minute")
async def toggle_synonym(
    request: Request,
    synonym_id: uuid.UUID,
    service: SynonymService = Depends(_get_synonym_service),
) -> ToggleResponse:
    entry = await service.toggle_active(synonym_id)
    return ToggleResponse(id=entry.id, is_active=entry.is_active)

"""Pydantic request/response schemas for the synonym dictionary."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from catalog_search.models.enums import SynonymLanguage, SynonymSource
from catalog_search.modules.synonyms.constants import DEFAULT_WEIGHT
from catalog_search.schemas.responses import PaginationMeta


# ---------------------------------------------------------------------------
# Synonym entries
# ---------------------------------------------------------------------------

# Field rules (length, weight range, enum membership) are enforced by
# catalog_search.modules.synonyms.validators so that in-process callers get
# the same errors as HTTP callers.

class SynonymCreate(BaseModel):
    canonical: str
    synonym: str
    weight: float = DEFAULT_WEIGHT
    is_active: bool = True
    source: str = SynonymSource.ADMIN.value
    language: str = SynonymLanguage.EN.value
    category_hint: str | None = None


class SynonymUpdate(BaseModel):
    canonical: str | None = None
    synonym: str | None = None
    weight: float | None = None
    is_active: bool | None = None
    source: str | None = None
    language: str | None = None
    category_hint: str | None = None


class SynonymResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    canonical: str
    synonym: str
    weight: float
    is_active: bool
    source: SynonymSource
    language: SynonymLanguage
    category_hint: str | None
    usage_count: int
    last_used_at: datetime | None
    created_at: datetime
    updated_at: datetime


class SynonymListResponse(BaseModel):
    items: list[SynonymResponse]
    pagination: PaginationMeta


class ToggleResponse(BaseModel):
    id: uuid.UUID
    is_active: bool


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------

class WeightedTerm(BaseModel):
    term: str
    weight: float


class SynonymGroup(BaseModel):
    """All active synonyms of one canonical term."""

    canonical: str
    synonyms: list[WeightedTerm]

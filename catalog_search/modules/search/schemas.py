"""Pydantic schemas for the query expansion pipeline."""

from __future__ import annotations

from pydantic import BaseModel, Field

from catalog_search.models.enums import SynonymLanguage
from catalog_search.modules.fuzzy.schemas import FuzzyMatch
from catalog_search.modules.search.constants import MAX_EXPANSION_TERMS
from catalog_search.modules.synonyms.schemas import WeightedTerm


class ExpandedQuery(BaseModel):
    original: str
    normalized: str
    language: SynonymLanguage = SynonymLanguage.EN
    translated_query: str
    terms: list[WeightedTerm]
    fuzzy_suggestions: dict[str, list[FuzzyMatch]] = Field(default_factory=dict)
    did_you_mean: str | None = None


class ExpandRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=255)
    max_terms: int | None = Field(None, ge=1, le=MAX_EXPANSION_TERMS)
    category_hint: str | None = Field(None, max_length=100)
    # Outcome logging; set result_count once the retrieval engine has run
    result_count: int | None = Field(None, ge=0)
    session_id: str | None = Field(None, max_length=128)
    execution_time_ms: int | None = Field(None, ge=0)


class ExpandResponse(BaseModel):
    expansion: ExpandedQuery
    recorded: bool = False

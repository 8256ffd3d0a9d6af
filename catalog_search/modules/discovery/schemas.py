"""Pydantic schemas for synonym auto-discovery."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from catalog_search.config import settings
from catalog_search.models.enums import ConfidenceLevel, SuggestionType
from catalog_search.modules.discovery.constants import (
    DEFAULT_DISCOVERY_DAYS,
    MAX_AUTO_CREATE_CONFIDENCE,
    MAX_DISCOVERY_DAYS,
    MIN_AUTO_CREATE_CONFIDENCE,
)
from catalog_search.modules.fuzzy.schemas import FuzzyMatch


def confidence_level(confidence: float) -> ConfidenceLevel:
    if confidence >= settings.confidence_high:
        return ConfidenceLevel.HIGH
    if confidence >= settings.confidence_medium:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


class DiscoverySuggestion(BaseModel):
    type: SuggestionType
    term: str
    matches: list[FuzzyMatch] = Field(default_factory=list)
    related_term: str | None = None
    suggestion: str | None = None
    confidence: float = 0.0
    confidence_level: ConfidenceLevel = ConfidenceLevel.LOW
    needs_review: bool = False
    searches: int | None = None
    occurrences: int | None = None

    @classmethod
    def scored(cls, **fields) -> DiscoverySuggestion:
        confidence = round(fields.pop("confidence", 0.0), 4)
        return cls(confidence=confidence, confidence_level=confidence_level(confidence), **fields)

    def proposed_pair(self) -> tuple[str, str] | None:
        """(canonical, synonym) this suggestion would create, if it is auto-creatable."""
        if self.type is SuggestionType.FUZZY_MATCH and self.matches:
            return self.matches[0].term, self.term
        if self.type is SuggestionType.SESSION_PATTERN and self.related_term:
            return self.related_term, self.term
        return None


class DiscoveryResponse(BaseModel):
    days: int
    suggestions: list[DiscoverySuggestion]


# ---------------------------------------------------------------------------
# Auto-create
# ---------------------------------------------------------------------------

class AutoCreateRequest(BaseModel):
    days: int = Field(DEFAULT_DISCOVERY_DAYS, ge=1, le=MAX_DISCOVERY_DAYS)
    min_confidence: float = settings.auto_create_min_confidence

    @field_validator("min_confidence")
    @classmethod
    def clamp_confidence(cls, value: float) -> float:
        return min(max(value, MIN_AUTO_CREATE_CONFIDENCE), MAX_AUTO_CREATE_CONFIDENCE)


class AutoCreateError(BaseModel):
    term: str
    message: str


class AutoCreateResult(BaseModel):
    created: int = 0
    skipped: int = 0
    errors: list[AutoCreateError] = Field(default_factory=list)

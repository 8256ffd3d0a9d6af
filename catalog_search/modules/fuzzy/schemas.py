"""Pydantic models for fuzzy and phonetic matching results."""

from pydantic import BaseModel, Field


class FuzzyMatch(BaseModel):
    term: str
    distance: int = Field(ge=0)
    similarity: float = Field(ge=0.0, le=1.0)


class FuzzyTestResponse(BaseModel):
    term: str
    fuzzy_matches: list[FuzzyMatch]
    phonetic_matches: list[str]
    suggestion: str | None = None

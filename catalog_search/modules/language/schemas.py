"""Pydantic models for query language detection and translation."""

from pydantic import BaseModel

from catalog_search.models.enums import SynonymLanguage


class TermTranslation(BaseModel):
    source: str
    target: str


class TranslationResult(BaseModel):
    translated_query: str
    matches: list[TermTranslation]
    had_translation: bool
    detected_language: SynonymLanguage

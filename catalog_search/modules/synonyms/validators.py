"""Synonym field validators: run before any store write."""

from __future__ import annotations

from catalog_search.exceptions import CanonicalEqualsSynonymException, ValidationException
from catalog_search.models.enums import SynonymLanguage, SynonymSource
from catalog_search.modules.synonyms.constants import (
    MAX_CATEGORY_HINT_LENGTH,
    MAX_TERM_LENGTH,
    MAX_WEIGHT,
    MIN_TERM_LENGTH,
    MIN_WEIGHT,
)


def normalize_term(value: str) -> str:
    return value.strip().lower()


def _invalid(field: str, message: str) -> ValidationException:
    return ValidationException(message=message, details=[{"field": field, "message": message}])


def validate_term(value: str, field: str) -> str:
    """Trim and lowercase a canonical/synonym term and check its length."""
    if not isinstance(value, str):
        raise _invalid(field, f"{field} must be a string")
    term = normalize_term(value)
    if len(term) < MIN_TERM_LENGTH:
        raise _invalid(field, f"{field} must be at least {MIN_TERM_LENGTH} characters")
    if len(term) > MAX_TERM_LENGTH:
        raise _invalid(field, f"{field} must be at most {MAX_TERM_LENGTH} characters")
    return term


def validate_weight(value: float) -> float:
    try:
        weight = float(value)
    except (TypeError, ValueError) as exc:
        raise _invalid("weight", "weight must be a number") from exc
    if not MIN_WEIGHT <= weight <= MAX_WEIGHT:
        raise _invalid("weight", f"weight must be between {MIN_WEIGHT} and {MAX_WEIGHT}")
    return weight


def validate_source(value: str | SynonymSource) -> SynonymSource:
    try:
        return SynonymSource(value)
    except ValueError as exc:
        allowed = ", ".join(s.value for s in SynonymSource)
        raise _invalid("source", f"source must be one of: {allowed}") from exc


def validate_language(value: str | SynonymLanguage) -> SynonymLanguage:
    try:
        return SynonymLanguage(value)
    except ValueError as exc:
        allowed = ", ".join(lang.value for lang in SynonymLanguage)
        raise _invalid("language", f"language must be one of: {allowed}") from exc


def validate_category_hint(value: str | None) -> str | None:
    if value is None:
        return None
    hint = value.strip()
    if not hint:
        return None
    if len(hint) > MAX_CATEGORY_HINT_LENGTH:
        raise _invalid("category_hint", f"category_hint must be at most {MAX_CATEGORY_HINT_LENGTH} characters")
    return hint


def ensure_distinct(canonical: str, synonym: str) -> None:
    if canonical == synonym:
        raise CanonicalEqualsSynonymException(
            message="Canonical term and synonym cannot be the same",
            details=[{"field": "synonym", "message": "must differ from canonical"}],
        )

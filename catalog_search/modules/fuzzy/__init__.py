"""Fuzzy module: edit-distance and phonetic matching over the synonym vocabulary."""

from catalog_search.modules.fuzzy.matcher import (
    find_matches,
    find_phonetic_matches,
    get_suggestion,
    is_fuzzy_match,
    phonetic_key,
    similarity,
)
from catalog_search.modules.fuzzy.schemas import FuzzyMatch, FuzzyTestResponse

__all__ = [
    "FuzzyMatch",
    "FuzzyTestResponse",
    "find_matches",
    "find_phonetic_matches",
    "get_suggestion",
    "is_fuzzy_match",
    "phonetic_key",
    "similarity",
]

"""Language module: English/French detection and glossary-based query translation."""

from catalog_search.modules.language.schemas import TermTranslation, TranslationResult
from catalog_search.modules.language.service import (
    build_glossary,
    detect_language,
    get_french_equivalents,
    remove_accents,
    translate_query,
)

__all__ = [
    "TermTranslation",
    "TranslationResult",
    "build_glossary",
    "detect_language",
    "get_french_equivalents",
    "remove_accents",
    "translate_query",
]

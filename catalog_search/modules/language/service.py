"""Query language detection and French -> English term translation.

Detection is a deterministic lexical score; translation substitutes glossary
phrases (longest first, up to three tokens) and falls back to an
accent-folded lookup so ``canape`` translates like ``canapé``.
"""

from __future__ import annotations

from collections.abc import Mapping

from unidecode import unidecode

from catalog_search.models.enums import SynonymLanguage
from catalog_search.modules.language.glossary import FR_TO_EN, FRENCH_DIACRITICS, FRENCH_MARKERS
from catalog_search.modules.language.schemas import TermTranslation, TranslationResult

# Score contributions per token
MARKER_SCORE = 2
DIACRITIC_SCORE = 3
GLOSSARY_SCORE = 2

# Share of tokens that must carry French signal (never below MIN_FRENCH_SCORE)
FRENCH_SCORE_RATIO = 0.3
MIN_FRENCH_SCORE = 2

MAX_PHRASE_TOKENS = 3

_STRIP_CHARS = ".,;:!?\"'()"


def remove_accents(text: str) -> str:
    return unidecode(text)


def _tokenize(query: str) -> list[str]:
    tokens = (token.strip(_STRIP_CHARS) for token in query.lower().split())
    return [token for token in tokens if token]


def build_glossary(extra: Mapping[str, str] | None = None) -> dict[str, str]:
    """Merge the built-in glossary with dictionary entries (French term -> English)."""
    glossary = dict(FR_TO_EN)
    if extra:
        glossary.update({k.strip().lower(): v.strip().lower() for k, v in extra.items()})
    return glossary


def _folded(glossary: Mapping[str, str]) -> dict[str, str]:
    folded: dict[str, str] = {}
    for french, english in glossary.items():
        folded.setdefault(remove_accents(french), english)
    return folded


def detect_language(query: str, glossary: Mapping[str, str] | None = None) -> SynonymLanguage:
    """Classify a query as English or French from stop-words, diacritics and glossary hits."""
    glossary = FR_TO_EN if glossary is None else glossary
    words = _tokenize(query)
    if not words:
        return SynonymLanguage.EN

    folded = _folded(glossary)
    score = 0
    for word in words:
        if word in FRENCH_MARKERS:
            score += MARKER_SCORE
        if any(char in FRENCH_DIACRITICS for char in word):
            score += DIACRITIC_SCORE
        # Entries that translate to themselves (sofa, table) carry no signal
        target = glossary.get(word) or folded.get(remove_accents(word))
        if target is not None and target != word:
            score += GLOSSARY_SCORE

    threshold = max(MIN_FRENCH_SCORE, len(words) * FRENCH_SCORE_RATIO)
    return SynonymLanguage.FR if score >= threshold else SynonymLanguage.EN


def translate_query(query: str, glossary: Mapping[str, str] | None = None) -> TranslationResult:
    """Translate recognized French terms in ``query`` to English.

    A query that is not detected as French, or that contains no glossary term
    whose translation differs from the source, is returned unchanged with an
    empty match list.
    """
    glossary = FR_TO_EN if glossary is None else glossary
    language = detect_language(query, glossary)
    unchanged = TranslationResult(
        translated_query=query,
        matches=[],
        had_translation=False,
        detected_language=language,
    )
    if language is not SynonymLanguage.FR:
        return unchanged

    folded = _folded(glossary)
    words = _tokenize(query)
    translated: list[str] = []
    matches: list[TermTranslation] = []

    i = 0
    while i < len(words):
        for size in range(min(MAX_PHRASE_TOKENS, len(words) - i), 0, -1):
            phrase = " ".join(words[i:i + size])
            target = glossary.get(phrase) or folded.get(remove_accents(phrase))
            if target is not None:
                break
        else:
            size, phrase, target = 1, words[i], None

        if target is None:
            translated.append(phrase)
        else:
            translated.append(target)
            if target != phrase:
                matches.append(TermTranslation(source=phrase, target=target))
        i += size

    if not matches:
        return unchanged
    return TranslationResult(
        translated_query=" ".join(translated),
        matches=matches,
        had_translation=True,
        detected_language=language,
    )


def get_french_equivalents(english_term: str, glossary: Mapping[str, str] | None = None) -> list[str]:
    """French glossary terms that translate to ``english_term``."""
    glossary = FR_TO_EN if glossary is None else glossary
    english_term = english_term.strip().lower()
    return [french for french, english in glossary.items() if english == english_term]

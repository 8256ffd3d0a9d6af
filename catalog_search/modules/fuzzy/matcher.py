"""Edit-distance and phonetic matching over a vocabulary of search terms.

Similarity is Levenshtein based: ``1 - distance / max(len(a), len(b))``.
The phonetic key is American Soundex computed over the ASCII-folded letters
of a term, so ``canapé`` and ``canape`` share a key and multi-word entries
are keyed on their letters only.

Every function here is pure; callers pass the vocabulary they want searched
(usually ``SynonymIndex.vocabulary``).
"""

from __future__ import annotations

import re
from collections.abc import Iterable

import jellyfish
from unidecode import unidecode

from catalog_search.config import settings
from catalog_search.modules.fuzzy.constants import (
    DEFAULT_MATCH_LIMIT,
    MAX_DISTANCE_LONG,
    MAX_DISTANCE_TIERS,
    MIN_TERM_LENGTH,
)
from catalog_search.modules.fuzzy.schemas import FuzzyMatch

_NON_LETTERS_RE = re.compile(r"[^a-z]")


def _normalize(term: str) -> str:
    return " ".join(term.lower().split())


def _unique(vocabulary: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    words: list[str] = []
    for raw in vocabulary:
        word = _normalize(raw)
        if word and word not in seen:
            seen.add(word)
            words.append(word)
    return words


def similarity(a: str, b: str) -> float:
    """Normalized edit-distance similarity in [0, 1]."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1 - jellyfish.levenshtein_distance(a, b) / longest


def find_matches(
    term: str,
    vocabulary: Iterable[str],
    limit: int = DEFAULT_MATCH_LIMIT,
    floor: float | None = None,
) -> list[FuzzyMatch]:
    """Return up to ``limit`` vocabulary entries closest to ``term``.

    Ordered by similarity descending; ties prefer the shorter candidate and
    then alphabetical order. Entries below ``floor`` (default: the configured
    acceptance floor) are dropped. An exact vocabulary entry is returned with
    similarity 1.0.
    """
    term = _normalize(term)
    if not term or limit <= 0:
        return []
    words = _unique(vocabulary)
    if len(term) < MIN_TERM_LENGTH:
        # Too short to be fuzzy; only an exact entry matches
        return [FuzzyMatch(term=term, distance=0, similarity=1.0)] if term in words else []
    if floor is None:
        floor = settings.fuzzy_acceptance_floor

    hits: list[FuzzyMatch] = []
    for candidate in words:
        longest = max(len(term), len(candidate))
        # The length gap alone is a lower bound on the distance
        if 1 - abs(len(term) - len(candidate)) / longest < floor:
            continue
        distance = jellyfish.levenshtein_distance(term, candidate)
        score = 1 - distance / longest
        if score < floor:
            continue
        hits.append(FuzzyMatch(term=candidate, distance=distance, similarity=round(score, 4)))

    hits.sort(key=lambda m: (-m.similarity, len(m.term), m.term))
    return hits[:limit]


def phonetic_key(term: str) -> str | None:
    """Soundex code of the term's letters, or None when it has no letters."""
    letters = _NON_LETTERS_RE.sub("", unidecode(term).lower())
    if not letters:
        return None
    return jellyfish.soundex(letters)


def find_phonetic_matches(term: str, vocabulary: Iterable[str]) -> list[str]:
    """Vocabulary entries (other than ``term``) that share its phonetic key."""
    term = _normalize(term)
    key = phonetic_key(term)
    if key is None:
        return []
    return [word for word in _unique(vocabulary) if word != term and phonetic_key(word) == key]


def _max_distance(length: int) -> int:
    for max_length, max_distance in MAX_DISTANCE_TIERS:
        if length <= max_length:
            return max_distance
    return MAX_DISTANCE_LONG


def is_fuzzy_match(a: str, b: str) -> bool:
    """True when two different terms are within the length-tiered edit distance."""
    a, b = _normalize(a), _normalize(b)
    if a == b:
        return False
    return jellyfish.levenshtein_distance(a, b) <= _max_distance(max(len(a), len(b)))


def get_suggestion(
    term: str,
    vocabulary: Iterable[str],
    min_similarity: float | None = None,
) -> str | None:
    """Return a "did you mean" correction for a term that looks like a typo.

    Only terms missing from the vocabulary get a suggestion, and only when the
    best hit is very close: high similarity, at most one character of length
    difference, and a single edit for short or same-length words.
    """
    term = _normalize(term)
    words = _unique(vocabulary)
    if term in words:
        return None
    if min_similarity is None:
        min_similarity = settings.suggestion_min_similarity

    matches = find_matches(term, words, limit=1)
    if not matches:
        return None
    best = matches[0]

    length_diff = abs(len(term) - len(best.term))
    if best.similarity < min_similarity:
        return None
    if len(term) <= 5 and best.distance > 1:
        return None
    if length_diff > 1:
        return None
    if length_diff == 0 and best.distance > 1:
        return None
    return best.term

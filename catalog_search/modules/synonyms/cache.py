"""In-memory synonym lookup index and its process-local cache.

The index is rebuilt lazily from the active dictionary entries. Every write
through ``SynonymService`` commits and then calls ``invalidate()``; a load
that was already in flight when the invalidation happened returns its result
to its own caller but is not memoized.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field

from catalog_search.models.enums import SynonymLanguage
from catalog_search.models.synonym import Synonym
from catalog_search.modules.synonyms.constants import (
    CATEGORY_BOOST,
    MIN_TERM_LENGTH,
    SELF_WEIGHT,
    STEM_SYNONYM_FACTOR,
    STEM_WEIGHT,
)
from catalog_search.modules.synonyms.schemas import WeightedTerm
from catalog_search.modules.synonyms.stemmer import stem


@dataclass(frozen=True)
class SynonymLink:
    """One edge of the dictionary seen from a term: the term on the other side."""

    term: str
    weight: float
    language: SynonymLanguage
    category_hint: str | None = None

    def boosted_weight(self, category_hint: str | None) -> float:
        if category_hint and self.category_hint and category_hint.lower() in self.category_hint.lower():
            return min(self.weight * CATEGORY_BOOST, 1.0)
        return self.weight


@dataclass
class SynonymIndex:
    forward: dict[str, list[SynonymLink]] = field(default_factory=dict)
    reverse: dict[str, list[SynonymLink]] = field(default_factory=dict)
    vocabulary: frozenset[str] = frozenset()

    @classmethod
    def build(cls, entries: Iterable[Synonym]) -> SynonymIndex:
        """Index active entries; inactive ones are ignored."""
        forward: dict[str, list[SynonymLink]] = {}
        reverse: dict[str, list[SynonymLink]] = {}
        words: set[str] = set()
        for entry in entries:
            if not entry.is_active:
                continue
            language = SynonymLanguage(entry.language)
            forward.setdefault(entry.synonym, []).append(
                SynonymLink(entry.canonical, entry.weight, language, entry.category_hint)
            )
            reverse.setdefault(entry.canonical, []).append(
                SynonymLink(entry.synonym, entry.weight, language, entry.category_hint)
            )
            words.add(entry.canonical)
            words.add(entry.synonym)

        for links in (*forward.values(), *reverse.values()):
            links.sort(key=lambda link: (-link.weight, link.term))
        return cls(forward=forward, reverse=reverse, vocabulary=frozenset(words))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def canonicals_of(self, synonym: str, language: SynonymLanguage | None = None) -> list[SynonymLink]:
        return [link for link in self.forward.get(synonym, []) if language is None or link.language == language]

    def synonyms_of(self, canonical: str, language: SynonymLanguage | None = None) -> list[SynonymLink]:
        return [link for link in self.reverse.get(canonical, []) if language is None or link.language == language]

    def is_mapped(self, a: str, b: str) -> bool:
        """True when ``a`` and ``b`` are already linked in either direction."""
        return any(link.term == b for link in self.forward.get(a, [])) or any(
            link.term == a for link in self.forward.get(b, [])
        )

    def translations(self, language: SynonymLanguage) -> dict[str, str]:
        """Synonym -> canonical for one language, highest weight winning."""
        result: dict[str, str] = {}
        for synonym, links in self.forward.items():
            for link in links:
                if link.language == language:
                    result[synonym] = link.term
                    break
        return result

    # ------------------------------------------------------------------
    # Expansion
    # ------------------------------------------------------------------

    def expand(
        self,
        term: str,
        language: SynonymLanguage | None = None,
        category_hint: str | None = None,
    ) -> list[WeightedTerm]:
        """Weighted expansion of a single term.

        The term itself comes first at 1.0, followed by its dictionary
        neighbours and then those of its stem. A candidate reachable several
        ways keeps its highest weight and its first position.
        """
        term = " ".join(term.strip().lower().split())
        weights: dict[str, float] = {}

        def add(candidate: str, weight: float) -> None:
            weight = round(min(weight, 1.0), 4)
            if weight > weights.get(candidate, -1.0):
                weights[candidate] = weight

        add(term, SELF_WEIGHT)
        if len(term) >= MIN_TERM_LENGTH:
            self._collect(term, add, 1.0, language, category_hint)
            stemmed = stem(term)
            if stemmed != term and len(stemmed) >= MIN_TERM_LENGTH:
                add(stemmed, STEM_WEIGHT)
                self._collect(stemmed, add, STEM_SYNONYM_FACTOR, language, category_hint)

        return [WeightedTerm(term=t, weight=w) for t, w in weights.items()]

    def _collect(
        self,
        term: str,
        add: Callable[[str, float], None],
        factor: float,
        language: SynonymLanguage | None,
        category_hint: str | None,
    ) -> None:
        for link in self.synonyms_of(term, language):
            add(link.term, link.boosted_weight(category_hint) * factor)
        for link in self.canonicals_of(term, language):
            add(link.term, link.boosted_weight(category_hint) * factor)
            for sibling in self.synonyms_of(link.term, language):
                if sibling.term != term:
                    add(sibling.term, sibling.boosted_weight(category_hint) * factor)


class SynonymLookupCache:
    """Memoizes one ``SynonymIndex`` per process."""

    def __init__(self) -> None:
        self._index: SynonymIndex | None = None
        self._generation = 0

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    async def get(self, loader: Callable[[], Awaitable[SynonymIndex]]) -> SynonymIndex:
        if self._index is not None:
            return self._index
        generation = self._generation
        index = await loader()
        # An invalidation during the load means the index may be stale
        if generation == self._generation:
            self._index = index
        return index

    def invalidate(self) -> None:
        self._generation += 1
        self._index = None


synonym_cache = SynonymLookupCache()

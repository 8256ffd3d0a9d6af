"""Query expansion pipeline.

normalize -> detect/translate -> synonym expansion per token -> fuzzy
fallback for unknown tokens. The retrieval engine consumes ``terms``; the
outcome is then fed back through ``record_outcome``.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_search.config import settings
from catalog_search.models.enums import SynonymLanguage
from catalog_search.modules.analytics.service import SearchAnalyticsLogger, normalize_query
from catalog_search.modules.fuzzy.matcher import find_matches, get_suggestion
from catalog_search.modules.language.service import build_glossary, translate_query
from catalog_search.modules.search.constants import (
    FUZZY_SUGGESTIONS_PER_TOKEN,
    MIN_PHRASE_LENGTH,
    MIN_QUERY_LENGTH,
    MULTI_WORD_EXPANSION_FACTOR,
    PHRASE_WEIGHT,
    TOKEN_WEIGHT,
    TRANSLATED_PHRASE_WEIGHT,
    TRANSLATION_TERM_WEIGHT,
)
from catalog_search.modules.search.schemas import ExpandedQuery
from catalog_search.modules.synonyms.schemas import WeightedTerm
from catalog_search.modules.synonyms.service import SynonymService

logger = logging.getLogger(__name__)


class _TermCollector:
    """Ordered term -> weight map; first position and highest weight win."""

    def __init__(self) -> None:
        self._weights: dict[str, float] = {}

    def add(self, term: str, weight: float) -> None:
        if len(term) < MIN_QUERY_LENGTH:
            return
        weight = round(min(weight, 1.0), 4)
        if weight > self._weights.get(term, -1.0):
            self._weights[term] = weight

    def terms(self, limit: int) -> list[WeightedTerm]:
        return [WeightedTerm(term=t, weight=w) for t, w in list(self._weights.items())[:limit]]


class QueryExpansionService:
    def __init__(
        self,
        session: AsyncSession,
        synonyms: SynonymService | None = None,
        analytics: SearchAnalyticsLogger | None = None,
    ) -> None:
        self._session = session
        self._synonyms = synonyms or SynonymService(session)
        self._analytics = analytics or SearchAnalyticsLogger(session)

    async def expand_query(
        self,
        query: str,
        max_terms: int | None = None,
        category_hint: str | None = None,
    ) -> ExpandedQuery:
        max_terms = max_terms or settings.max_expansion_terms
        normalized = normalize_query(query)
        if len(normalized) < MIN_QUERY_LENGTH:
            return ExpandedQuery(
                original=query,
                normalized=normalized,
                translated_query=normalized,
                terms=[WeightedTerm(term=normalized, weight=TOKEN_WEIGHT)] if normalized else [],
            )

        index = await self._synonyms.load_data()
        translation = translate_query(normalized, build_glossary(index.translations(SynonymLanguage.FR)))
        translated = translation.translated_query
        words = translated.split()
        multi_word = len(normalized.split()) > 1

        collector = _TermCollector()
        if multi_word and len(normalized) >= MIN_PHRASE_LENGTH:
            collector.add(normalized, PHRASE_WEIGHT)
        for match in translation.matches:
            collector.add(match.source, TRANSLATION_TERM_WEIGHT)
            collector.add(match.target, TRANSLATION_TERM_WEIGHT)
        if translation.had_translation and multi_word:
            collector.add(translated, TRANSLATED_PHRASE_WEIGHT)

        factor = MULTI_WORD_EXPANSION_FACTOR if len(words) > 1 else 1.0
        for word in words:
            if len(word) < MIN_QUERY_LENGTH:
                continue
            collector.add(word, TOKEN_WEIGHT)
            for expanded in index.expand(word, category_hint=category_hint)[1:]:
                collector.add(expanded.term, expanded.weight * factor)

        fuzzy_suggestions = {}
        for word in words:
            if len(word) < MIN_QUERY_LENGTH or word in index.vocabulary:
                continue
            matches = find_matches(word, index.vocabulary - {word}, limit=FUZZY_SUGGESTIONS_PER_TOKEN)
            if matches:
                fuzzy_suggestions[word] = matches

        corrected = [get_suggestion(word, index.vocabulary) or word for word in words]
        did_you_mean = " ".join(corrected) if corrected != words else None

        return ExpandedQuery(
            original=query,
            normalized=normalized,
            language=translation.detected_language,
            translated_query=translated,
            terms=collector.terms(max_terms),
            fuzzy_suggestions=fuzzy_suggestions,
            did_you_mean=did_you_mean,
        )

    async def record_outcome(
        self,
        query: str,
        result_count: int,
        session_id: str | None = None,
        expanded: ExpandedQuery | None = None,
        execution_time_ms: int | None = None,
    ) -> str | None:
        """Log the search and count a use of every dictionary entry it expanded to.

        Logging never fails the search: a database error is logged, rolled
        back and reported as None.
        """
        terms = [t.term for t in expanded.terms] if expanded else None
        try:
            normalized = await self._analytics.record_search(
                query,
                result_count,
                session_id=session_id,
                expanded_terms=terms,
                execution_time_ms=execution_time_ms,
            )
            if terms:
                used = await self._synonyms.record_usage(terms)
                logger.debug("Recorded usage of %d synonym entries for %r", used, normalized)
        except SQLAlchemyError:
            logger.exception("Failed to record search outcome for %r", query)
            await self._session.rollback()
            return None
        return normalized

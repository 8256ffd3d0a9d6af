"""Synonym auto-discovery: mines search analytics for candidate synonyms.

Three independent analyses feed the suggestion list:

* ``fuzzy_match``: frequently failing queries that are a near-typo of a
  known term (dictionary vocabulary or a query that usually succeeds).
* ``session_pattern``: within one session, query A is quickly followed by
  a different query B often enough that B looks like what A meant.
* ``zero_result``: failing queries with no fuzzy candidate, with a best
  effort phonetic or low-similarity guess for an admin to review.

A database failure in one analysis is logged and rolled back; the others
still run.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_search.config import settings
from catalog_search.exceptions import AppException, CanonicalEqualsSynonymException, DuplicateSynonymException
from catalog_search.models.enums import SuggestionType, SynonymSource
from catalog_search.modules.analytics.service import SearchAnalyticsLogger
from catalog_search.modules.discovery.constants import (
    FUZZY_MATCH_LIMIT,
    LOW_RESULT_POPULAR_LIMIT,
    SESSION_PAIR_SCAN_LIMIT,
    SESSION_PATTERN_LIMIT,
    SUCCESSFUL_VOCABULARY_LIMIT,
    ZERO_RESULT_PATTERN_LIMIT,
)
from catalog_search.modules.discovery.schemas import AutoCreateError, AutoCreateResult, DiscoverySuggestion
from catalog_search.modules.fuzzy.matcher import find_matches, find_phonetic_matches, similarity
from catalog_search.modules.synonyms.cache import SynonymIndex
from catalog_search.modules.synonyms.schemas import SynonymCreate
from catalog_search.modules.synonyms.service import SynonymService

logger = logging.getLogger(__name__)


class SynonymAutoDiscovery:
    def __init__(
        self,
        session: AsyncSession,
        synonyms: SynonymService | None = None,
        analytics: SearchAnalyticsLogger | None = None,
    ) -> None:
        self._session = session
        self._synonyms = synonyms or SynonymService(session)
        self._analytics = analytics or SearchAnalyticsLogger(session)

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    async def analyze_search_patterns(self, days: int = 30) -> list[DiscoverySuggestion]:
        suggestions: list[DiscoverySuggestion] = []
        for name, analysis in (
            ("fuzzy_match", self._fuzzy_match_suggestions),
            ("session_pattern", self._session_pattern_suggestions),
            ("zero_result", self._zero_result_suggestions),
        ):
            suggestions.extend(await self._isolated(name, analysis, days))
        logger.info("Discovery over %d days produced %d suggestions", days, len(suggestions))
        return suggestions

    async def _isolated(
        self,
        name: str,
        analysis: Callable[[int], Awaitable[list[DiscoverySuggestion]]],
        days: int,
    ) -> list[DiscoverySuggestion]:
        try:
            return await analysis(days)
        except SQLAlchemyError:
            logger.exception("Discovery analysis %s failed", name)
            await self._session.rollback()
            return []

    async def _candidate_vocabulary(self, index: SynonymIndex) -> set[str]:
        successful = await self._analytics.get_successful_vocabulary(limit=SUCCESSFUL_VOCABULARY_LIMIT)
        return set(index.vocabulary) | set(successful)

    async def _fuzzy_match_suggestions(self, days: int) -> list[DiscoverySuggestion]:
        index = await self._synonyms.load_data()
        candidates: dict[str, int] = {}
        for query, searches, _zero in await self._analytics.get_zero_result_patterns(
            days, limit=ZERO_RESULT_PATTERN_LIMIT
        ):
            candidates[query] = searches
        for popular in await self._analytics.get_popular_low_result_searches(days, limit=LOW_RESULT_POPULAR_LIMIT):
            candidates.setdefault(popular.query, popular.total_searches)

        vocabulary = await self._candidate_vocabulary(index)
        suggestions = []
        for term, searches in candidates.items():
            if term in index.vocabulary:
                continue
            matches = find_matches(term, vocabulary - {term}, limit=FUZZY_MATCH_LIMIT)
            if not matches:
                continue
            suggestions.append(
                DiscoverySuggestion.scored(
                    type=SuggestionType.FUZZY_MATCH,
                    term=term,
                    matches=matches,
                    confidence=matches[0].similarity,
                    searches=searches,
                )
            )
        return suggestions

    async def _session_pattern_suggestions(self, days: int) -> list[DiscoverySuggestion]:
        index = await self._synonyms.load_data()
        follow_ups = await self._analytics.get_session_follow_ups(days, limit=SESSION_PAIR_SCAN_LIMIT)

        patterns = []
        for first, second, occurrences, first_sessions in follow_ups:
            confidence = occurrences / first_sessions
            if confidence < settings.session_pattern_min_confidence:
                continue
            if index.is_mapped(first, second):
                continue
            patterns.append((first, second, occurrences, confidence))

        patterns.sort(key=lambda p: (-p[2], -p[3], p[0], p[1]))
        return [
            DiscoverySuggestion.scored(
                type=SuggestionType.SESSION_PATTERN,
                term=first,
                related_term=second,
                confidence=confidence,
                occurrences=occurrences,
            )
            for first, second, occurrences, confidence in patterns[:SESSION_PATTERN_LIMIT]
        ]

    async def _zero_result_suggestions(self, days: int) -> list[DiscoverySuggestion]:
        index = await self._synonyms.load_data()
        patterns = await self._analytics.get_zero_result_patterns(days, limit=ZERO_RESULT_PATTERN_LIMIT)
        vocabulary = await self._candidate_vocabulary(index)

        suggestions = []
        for term, searches, _zero in patterns:
            others = vocabulary - {term}
            # Terms with a fuzzy candidate are reported as fuzzy_match instead
            if term not in index.vocabulary and find_matches(term, others, limit=1):
                continue
            suggestion, confidence = self._best_effort(term, others)
            suggestions.append(
                DiscoverySuggestion.scored(
                    type=SuggestionType.ZERO_RESULT,
                    term=term,
                    suggestion=suggestion,
                    confidence=confidence,
                    needs_review=True,
                    searches=searches,
                )
            )
        return suggestions

    @staticmethod
    def _best_effort(term: str, vocabulary: set[str]) -> tuple[str | None, float]:
        phonetic = find_phonetic_matches(term, vocabulary)
        if phonetic:
            best = max(phonetic, key=lambda word: (similarity(term, word), -len(word)))
            return best, similarity(term, best)
        loose = find_matches(term, vocabulary, limit=1, floor=settings.fuzzy_review_floor)
        if loose:
            return loose[0].term, loose[0].similarity
        return None, 0.0

    # ------------------------------------------------------------------
    # Auto-create
    # ------------------------------------------------------------------

    async def auto_create_synonyms(
        self,
        suggestions: list[DiscoverySuggestion],
        min_confidence: float | None = None,
    ) -> AutoCreateResult:
        """Create ``analytics`` entries for confident fuzzy and session suggestions.

        Each entry is committed on its own. Suggestions below the threshold
        and zero-result suggestions are ignored; existing mappings count as
        skipped; any other failure is reported in ``errors`` and the batch
        continues.
        """
        if min_confidence is None:
            min_confidence = settings.auto_create_min_confidence
        result = AutoCreateResult()

        for suggestion in suggestions:
            pair = suggestion.proposed_pair()
            if pair is None or suggestion.confidence < min_confidence:
                continue
            canonical, synonym = pair
            try:
                await self._synonyms.create_synonym(
                    SynonymCreate(
                        canonical=canonical,
                        synonym=synonym,
                        weight=round(suggestion.confidence, 2),
                        source=SynonymSource.ANALYTICS.value,
                    )
                )
                result.created += 1
            except (DuplicateSynonymException, CanonicalEqualsSynonymException):
                result.skipped += 1
            except (AppException, SQLAlchemyError) as exc:
                await self._session.rollback()
                logger.warning("Auto-create failed for %s -> %s: %s", synonym, canonical, exc)
                result.errors.append(AutoCreateError(term=suggestion.term, message=str(exc)))

        logger.info(
            "Auto-create finished: created=%d skipped=%d errors=%d",
            result.created,
            result.skipped,
            len(result.errors),
        )
        return result

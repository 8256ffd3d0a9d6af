"""Tests for SynonymAutoDiscovery: pattern mining and auto-create."""

import datetime as dt
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from catalog_search.database.base import utcnow
from catalog_search.exceptions import DuplicateSynonymException, ValidationException
from catalog_search.models.enums import ConfidenceLevel, SuggestionType, SynonymSource
from catalog_search.models.search_analytics import SearchLog
from catalog_search.models.synonym import Synonym
from catalog_search.modules.analytics.service import SearchAnalyticsLogger
from catalog_search.modules.discovery.schemas import AutoCreateRequest, DiscoverySuggestion
from catalog_search.modules.discovery.service import SynonymAutoDiscovery
from catalog_search.modules.fuzzy.schemas import FuzzyMatch
from catalog_search.modules.synonyms.schemas import SynonymCreate
from catalog_search.modules.synonyms.service import SynonymService


async def _seed_dictionary(session):
    svc = SynonymService(session)
    await svc.create_synonym(SynonymCreate(canonical="wardrobe", synonym="closet"))
    await svc.create_synonym(SynonymCreate(canonical="sofa", synonym="couch"))


async def _search(session, query, results, times):
    analytics = SearchAnalyticsLogger(session)
    for _ in range(times):
        await analytics.record_search(query, results)
    await session.commit()


def _log(query, session_id, at):
    return SearchLog(query=query, query_normalized=query, results_count=0, session_id=session_id, created_at=at)


def _of_type(suggestions, kind):
    return [s for s in suggestions if s.type == kind]


# ══════════════════════════════════════════════════════════════════════════════
# Fuzzy match analysis
# ══════════════════════════════════════════════════════════════════════════════


class TestFuzzyMatchAnalysis:
    @pytest.mark.asyncio
    async def test_recurring_typo_is_suggested(self, async_session):
        await _seed_dictionary(async_session)
        await _search(async_session, "wardrobr", 0, 3)

        suggestions = await SynonymAutoDiscovery(async_session).analyze_search_patterns(days=7)

        fuzzy = _of_type(suggestions, SuggestionType.FUZZY_MATCH)
        assert len(fuzzy) == 1
        assert fuzzy[0].term == "wardrobr"
        assert fuzzy[0].matches[0].term == "wardrobe"
        assert fuzzy[0].confidence == 0.875
        assert fuzzy[0].confidence_level == ConfidenceLevel.HIGH
        assert fuzzy[0].searches == 3

    @pytest.mark.asyncio
    async def test_rare_or_successful_queries_are_not_candidates(self, async_session):
        await _seed_dictionary(async_session)
        await _search(async_session, "wardrobr", 0, 2)
        await _search(async_session, "closets", 5, 4)

        suggestions = await SynonymAutoDiscovery(async_session).analyze_search_patterns(days=7)

        assert _of_type(suggestions, SuggestionType.FUZZY_MATCH) == []

    @pytest.mark.asyncio
    async def test_successful_searches_extend_the_vocabulary(self, async_session):
        await _search(async_session, "armchair", 6, 2)
        await _search(async_session, "armchiar", 0, 3)

        suggestions = await SynonymAutoDiscovery(async_session).analyze_search_patterns(days=7)

        fuzzy = _of_type(suggestions, SuggestionType.FUZZY_MATCH)
        assert [(s.term, s.matches[0].term) for s in fuzzy] == [("armchiar", "armchair")]


# ══════════════════════════════════════════════════════════════════════════════
# Session pattern analysis
# ══════════════════════════════════════════════════════════════════════════════


class TestSessionPatternAnalysis:
    @pytest.mark.asyncio
    async def test_follow_up_queries_form_a_pattern(self, async_session):
        await _seed_dictionary(async_session)
        start = utcnow() - dt.timedelta(hours=1)
        for n in range(3):
            at = start + dt.timedelta(minutes=10 * n)
            async_session.add(_log("chesterfeld", f"s{n}", at))
            async_session.add(_log("sofa", f"s{n}", at + dt.timedelta(seconds=30)))
        # A session that never followed up lowers the confidence
        async_session.add(_log("chesterfeld", "s3", start))
        # Too slow to count
        async_session.add(_log("chesterfeld", "s4", start))
        async_session.add(_log("sofa", "s4", start + dt.timedelta(minutes=5)))
        # Already mapped in the dictionary
        for n in range(3):
            at = start + dt.timedelta(minutes=10 * n)
            async_session.add(_log("couch", f"m{n}", at))
            async_session.add(_log("sofa", f"m{n}", at + dt.timedelta(seconds=10)))
        await async_session.commit()

        suggestions = await SynonymAutoDiscovery(async_session).analyze_search_patterns(days=7)

        patterns = _of_type(suggestions, SuggestionType.SESSION_PATTERN)
        assert len(patterns) == 1
        assert patterns[0].term == "chesterfeld"
        assert patterns[0].related_term == "sofa"
        assert patterns[0].occurrences == 3
        assert patterns[0].confidence == 0.6

    @pytest.mark.asyncio
    async def test_below_minimum_occurrences(self, async_session):
        start = utcnow() - dt.timedelta(hours=1)
        for n in range(2):
            async_session.add(_log("divan", f"s{n}", start))
            async_session.add(_log("daybed", f"s{n}", start + dt.timedelta(seconds=20)))
        await async_session.commit()

        suggestions = await SynonymAutoDiscovery(async_session).analyze_search_patterns(days=7)

        assert _of_type(suggestions, SuggestionType.SESSION_PATTERN) == []


# ══════════════════════════════════════════════════════════════════════════════
# Zero-result analysis
# ══════════════════════════════════════════════════════════════════════════════


class TestZeroResultAnalysis:
    @pytest.mark.asyncio
    async def test_unmatchable_query_needs_review(self, async_session):
        await _seed_dictionary(async_session)
        await _search(async_session, "zzqx", 0, 4)

        suggestions = await SynonymAutoDiscovery(async_session).analyze_search_patterns(days=7)

        zero = _of_type(suggestions, SuggestionType.ZERO_RESULT)
        assert len(zero) == 1
        assert zero[0].term == "zzqx"
        assert zero[0].suggestion is None
        assert zero[0].confidence == 0.0
        assert zero[0].needs_review is True
        assert zero[0].searches == 4

    def test_best_effort_prefers_phonetic_match(self):
        suggestion, confidence = SynonymAutoDiscovery._best_effort("smyth", {"smith", "bedroom"})
        assert suggestion == "smith"
        assert confidence == pytest.approx(0.8)

    def test_best_effort_falls_back_to_loose_fuzzy_hit(self):
        suggestion, confidence = SynonymAutoDiscovery._best_effort("bedz", {"bedroom"})
        assert suggestion == "bedroom"
        assert confidence == pytest.approx(0.4286, abs=1e-4)

    @pytest.mark.asyncio
    async def test_failing_analysis_does_not_stop_the_others(self, async_session):
        await _seed_dictionary(async_session)
        await _search(async_session, "wardrobr", 0, 3)

        boom = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("db down")))
        with patch.object(SearchAnalyticsLogger, "get_session_follow_ups", boom):
            suggestions = await SynonymAutoDiscovery(async_session).analyze_search_patterns(days=7)

        assert boom.await_count == 1
        assert len(_of_type(suggestions, SuggestionType.FUZZY_MATCH)) == 1
        assert _of_type(suggestions, SuggestionType.SESSION_PATTERN) == []


# ══════════════════════════════════════════════════════════════════════════════
# Auto-create
# ══════════════════════════════════════════════════════════════════════════════


def _fuzzy(term, match, score):
    return DiscoverySuggestion.scored(
        type=SuggestionType.FUZZY_MATCH,
        term=term,
        matches=[FuzzyMatch(term=match, distance=1, similarity=score)],
        confidence=score,
    )


def _session(term, related, confidence):
    return DiscoverySuggestion.scored(
        type=SuggestionType.SESSION_PATTERN,
        term=term,
        related_term=related,
        confidence=confidence,
        occurrences=5,
    )


class TestAutoCreate:
    @pytest.mark.asyncio
    async def test_threshold_filters_before_creating(self, async_session):
        discovery = SynonymAutoDiscovery(async_session)
        suggestions = [
            _fuzzy("wardrobr", "wardrobe", 0.875),
            _session("chesterfeld", "sofa", 0.6),
            DiscoverySuggestion.scored(type=SuggestionType.ZERO_RESULT, term="zzqx", suggestion="zz", confidence=0.9),
        ]

        result = await discovery.auto_create_synonyms(suggestions, min_confidence=0.7)

        assert (result.created, result.skipped, result.errors) == (1, 0, [])
        entry = (await async_session.execute(select(Synonym))).scalar_one()
        assert (entry.canonical, entry.synonym) == ("wardrobe", "wardrobr")
        assert entry.weight == 0.88
        assert entry.source == SynonymSource.ANALYTICS

    @pytest.mark.asyncio
    async def test_rerun_is_idempotent(self, async_session):
        discovery = SynonymAutoDiscovery(async_session)
        suggestions = [_fuzzy("wardrobr", "wardrobe", 0.875), _session("chesterfeld", "sofa", 0.9)]

        first = await discovery.auto_create_synonyms(suggestions, min_confidence=0.7)
        second = await discovery.auto_create_synonyms(suggestions, min_confidence=0.7)

        assert first.created == 2
        assert second.created == 0
        assert second.skipped == first.created
        assert second.errors == []

    @pytest.mark.asyncio
    async def test_created_entries_expand(self, async_session):
        await _seed_dictionary(async_session)
        await _search(async_session, "wardrobr", 0, 3)
        discovery = SynonymAutoDiscovery(async_session)

        suggestions = await discovery.analyze_search_patterns(days=7)
        result = await discovery.auto_create_synonyms(suggestions, min_confidence=0.7)

        assert result.created == 1
        expansion = await SynonymService(async_session).expand("wardrobr")
        assert "wardrobe" in [t.term for t in expansion]

    @pytest.mark.asyncio
    async def test_failures_are_reported_and_batch_continues(self, async_session):
        synonyms = AsyncMock(spec=SynonymService)
        synonyms.create_synonym.side_effect = [
            DuplicateSynonymException("exists"),
            ValidationException("synonym must be at most 100 characters"),
            None,
        ]
        discovery = SynonymAutoDiscovery(async_session, synonyms=synonyms)
        suggestions = [
            _fuzzy("sofaa", "sofa", 0.8),
            _fuzzy("x" * 120, "sofa", 0.75),
            _session("chesterfeld", "sofa", 0.9),
        ]

        result = await discovery.auto_create_synonyms(suggestions, min_confidence=0.7)

        assert result.created == 1
        assert result.skipped == 1
        assert len(result.errors) == 1
        assert result.errors[0].term == "x" * 120
        assert synonyms.create_synonym.await_count == 3


def test_auto_create_request_clamps_confidence():
    assert AutoCreateRequest(min_confidence=0.1).min_confidence == 0.5
    assert AutoCreateRequest(min_confidence=3).min_confidence == 1.0
    assert AutoCreateRequest().min_confidence == 0.7

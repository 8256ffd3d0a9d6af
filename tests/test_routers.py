"""HTTP-level tests for the catalog search API."""

import uuid
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from catalog_search.modules.analytics.service import SearchAnalyticsLogger

API = "/api/v1"


async def _create(client, **fields):
    payload = {"canonical": "sofa", "synonym": "couch", **fields}
    return await client.post(f"{API}/synonyms", json=payload)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_health_returns_ok(async_client):
    response = await async_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_request_id_is_echoed(async_client):
    response = await async_client.get("/health", headers={"X-Request-ID": "req-42"})
    assert response.headers["X-Request-ID"] == "req-42"


# ---------------------------------------------------------------------------
# Synonym CRUD
# ---------------------------------------------------------------------------


class TestSynonymCrud:
    @pytest.mark.asyncio
    async def test_create_normalizes_and_defaults(self, async_client):
        response = await _create(async_client, canonical=" Sofa ", synonym="COUCH")

        assert response.status_code == 201
        body = response.json()
        assert body["canonical"] == "sofa"
        assert body["synonym"] == "couch"
        assert body["weight"] == 1.0
        assert body["source"] == "admin"
        assert body["language"] == "en"
        assert body["is_active"] is True
        assert body["usage_count"] == 0

    @pytest.mark.asyncio
    async def test_duplicate_returns_conflict_envelope(self, async_client):
        await _create(async_client)
        response = await _create(async_client, canonical="settee")

        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "DUPLICATE_SYNONYM"
        assert error["requestId"]

    @pytest.mark.asyncio
    async def test_canonical_equal_to_synonym_is_rejected(self, async_client):
        response = await _create(async_client, synonym="Sofa")

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "CANONICAL_EQUALS_SYNONYM"

    @pytest.mark.asyncio
    async def test_invalid_weight_is_rejected(self, async_client):
        response = await _create(async_client, weight=1.5)

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"][0]["field"] == "weight"

    @pytest.mark.asyncio
    async def test_list_paginates_with_camel_case_meta(self, async_client):
        for synonym in ("couch", "settee", "divan"):
            await _create(async_client, synonym=synonym)

        response = await async_client.get(f"{API}/synonyms", params={"page": 1, "page_size": 2})

        assert response.status_code == 200
        body = response.json()
        assert len(body["items"]) == 2
        assert body["pagination"] == {"page": 1, "pageSize": 2, "totalItems": 3, "totalPages": 2}

    @pytest.mark.asyncio
    async def test_get_update_toggle_delete(self, async_client):
        created = (await _create(async_client)).json()
        url = f"{API}/synonyms/{created['id']}"

        fetched = await async_client.get(url)
        assert fetched.json()["synonym"] == "couch"

        updated = await async_client.patch(url, json={"weight": 0.6, "category_hint": "Living Room"})
        assert updated.status_code == 200
        assert updated.json()["weight"] == 0.6
        assert updated.json()["category_hint"] == "Living Room"

        toggled = await async_client.post(f"{url}/toggle")
        assert toggled.json() == {"id": created["id"], "is_active": False}

        deleted = await async_client.delete(url)
        assert deleted.status_code == 204
        assert (await async_client.get(url)).status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_id_returns_not_found(self, async_client):
        response = await async_client.get(f"{API}/synonyms/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_groups_by_language_and_category(self, async_client):
        await _create(async_client, weight=0.9, category_hint="seating")
        await _create(async_client, synonym="canapé", language="fr", category_hint="seating")

        by_language = await async_client.get(f"{API}/synonyms/by-language/fr")
        assert by_language.json() == [
            {"canonical": "sofa", "synonyms": [{"term": "canapé", "weight": 1.0}]}
        ]

        by_category = await async_client.get(f"{API}/synonyms/by-category/seating")
        assert [t["term"] for t in by_category.json()[0]["synonyms"]] == ["canapé", "couch"]


# ---------------------------------------------------------------------------
# Matching tools
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_fuzzy_test_endpoint(async_client):
    await _create(async_client, canonical="wardrobe", synonym="closet")

    response = await async_client.get(f"{API}/synonyms/fuzzy-test", params={"term": "wardrobr"})

    body = response.json()
    assert body["fuzzy_matches"][0]["term"] == "wardrobe"
    assert body["fuzzy_matches"][0]["similarity"] == 0.875
    assert "wardrobe" in body["phonetic_matches"]
    assert body["suggestion"] == "wardrobe"


@pytest.mark.asyncio
async def test_translate_endpoint(async_client):
    response = await async_client.get(f"{API}/synonyms/translate", params={"q": "canapé"})

    body = response.json()
    assert body["detected_language"] == "fr"
    assert body["translated_query"] == "sofa"
    assert body["had_translation"] is True


# ---------------------------------------------------------------------------
# Query expansion and analytics
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_expand_without_outcome_does_not_log(async_client):
    await _create(async_client)

    response = await async_client.post(f"{API}/search/expand", json={"query": "couch"})

    body = response.json()
    assert body["recorded"] is False
    assert [t["term"] for t in body["expansion"]["terms"]] == ["couch", "sofa"]
    popular = await async_client.get(f"{API}/search-analytics/popular")
    assert popular.json()["items"] == []


@pytest.mark.asyncio
async def test_expand_with_outcome_feeds_reports(async_client):
    await _create(async_client)
    for result_count in (4, 6):
        response = await async_client.post(
            f"{API}/search/expand", json={"query": "Couch", "result_count": result_count}
        )
        assert response.json()["recorded"] is True
    await async_client.post(f"{API}/search/expand", json={"query": "futon", "result_count": 0})

    popular = (await async_client.get(f"{API}/search-analytics/popular", params={"days": 7})).json()
    assert popular["days"] == 7
    assert popular["items"][0] == {"query": "couch", "total_searches": 2, "avg_results": 5.0}

    zero = (await async_client.get(f"{API}/search-analytics/zero-results")).json()
    assert zero["items"] == [{"query": "futon", "zero_searches": 1, "total_searches": 1}]

    entry = (await async_client.get(f"{API}/synonyms", params={"search": "couch"})).json()["items"][0]
    assert entry["usage_count"] == 2


@pytest.mark.asyncio
async def test_report_window_is_bounded(async_client):
    response = await async_client.get(f"{API}/search-analytics/popular", params={"days": 400})
    assert response.status_code == 422


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_discover_and_auto_create(async_client):
    await _create(async_client, canonical="wardrobe", synonym="closet")
    for _ in range(3):
        await async_client.post(f"{API}/search/expand", json={"query": "wardrobr", "result_count": 0})

    discovered = (await async_client.get(f"{API}/synonyms/discover", params={"days": 7})).json()
    fuzzy = [s for s in discovered["suggestions"] if s["type"] == "fuzzy_match"]
    assert fuzzy[0]["term"] == "wardrobr"
    assert fuzzy[0]["matches"][0]["term"] == "wardrobe"

    result = (await async_client.post(f"{API}/synonyms/auto-create", json={"days": 7})).json()
    assert result == {"created": 1, "skipped": 0, "errors": []}

    expansion = (await async_client.post(f"{API}/search/expand", json={"query": "wardrobr"})).json()
    assert "wardrobe" in [t["term"] for t in expansion["expansion"]["terms"]]


@pytest.mark.asyncio
async def test_expand_survives_logging_failure(async_client):
    await _create(async_client)

    failing = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("db down")))
    with patch.object(SearchAnalyticsLogger, "record_search", failing):
        response = await async_client.post(f"{API}/search/expand", json={"query": "couch", "result_count": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["recorded"] is False
    assert [t["term"] for t in body["expansion"]["terms"]] == ["couch", "sofa"]

"""Tests for the static synonym seeder."""

import pytest

from catalog_search.models.enums import SynonymSource
from catalog_search.modules.synonyms.repository import SynonymRepository
from catalog_search.modules.synonyms.service import SynonymService
from catalog_search.seed import plan_static_entries, seed_synonyms
from catalog_search.seed_data.synonyms import STATIC_SYNONYMS


def test_plan_flattens_groups_with_category_hint():
    rows = plan_static_entries({"seating": {"Sofa": ["Couch", "settee"]}})
    assert rows == [
        {"canonical": "sofa", "synonym": "couch", "category_hint": "seating"},
        {"canonical": "sofa", "synonym": "settee", "category_hint": "seating"},
    ]


def test_plan_first_canonical_claims_a_synonym():
    groups = {
        "seating": {"sofa": ["couch"], "loveseat": ["couch", "sofa"]},
        "bedroom": {"bed": ["bed", "cot"]},
    }
    rows = plan_static_entries(groups, claimed={"cot"})
    assert [(r["canonical"], r["synonym"]) for r in rows] == [("sofa", "couch"), ("loveseat", "sofa")]


def test_static_map_has_no_self_mappings():
    for mapping in STATIC_SYNONYMS.values():
        for canonical, synonyms in mapping.items():
            assert canonical not in synonyms


@pytest.mark.asyncio
async def test_seed_is_idempotent(async_session):
    first = await seed_synonyms(async_session)
    await async_session.commit()
    second = await seed_synonyms(async_session)

    entries = await SynonymRepository(async_session).list_active()
    assert first == len(entries) > 0
    assert second == 0
    assert {e.source for e in entries} == {SynonymSource.STATIC}


@pytest.mark.asyncio
async def test_reseed_leaves_deactivated_entries_off(async_session):
    await seed_synonyms(async_session)
    await async_session.commit()
    seeded = await SynonymRepository(async_session).list_active()
    turned_off = await SynonymService(async_session).toggle_active(seeded[0].id)

    assert await seed_synonyms(async_session) == 0

    await async_session.refresh(turned_off)
    assert turned_off.is_active is False
    assert len(await SynonymRepository(async_session).list_all()) == len(seeded)

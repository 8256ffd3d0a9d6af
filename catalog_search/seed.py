"""Database seeder: loads the static synonym map into the dictionary.

Run via: python -m catalog_search.seed
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_search.database.engine import engine
from catalog_search.database.session import session_scope
from catalog_search.models.enums import SynonymLanguage, SynonymSource
from catalog_search.models.synonym import Synonym
from catalog_search.modules.synonyms.repository import SynonymRepository
from catalog_search.seed_data.synonyms import STATIC_SYNONYMS


def plan_static_entries(
    groups: dict[str, dict[str, list[str]]],
    claimed: set[str] | None = None,
) -> list[dict]:
    """Flatten the grouped map into insertable rows.

    A synonym may belong to a single canonical term per language, so the
    first canonical that claims it wins; ``claimed`` holds synonyms that are
    already mapped in the database.
    """
    claimed = set(claimed or ())
    rows = []
    for category_hint, mapping in groups.items():
        for canonical, synonyms in mapping.items():
            canonical = canonical.strip().lower()
            for synonym in synonyms:
                synonym = synonym.strip().lower()
                if synonym == canonical or synonym in claimed:
                    continue
                claimed.add(synonym)
                rows.append(
                    {
                        "canonical": canonical,
                        "synonym": synonym,
                        "category_hint": category_hint,
                    }
                )
    return rows


async def seed_synonyms(session: AsyncSession) -> int:
    """Insert static entries that are not mapped yet.

    Inactive entries still claim their synonym, so a mapping switched off by
    an admin stays off.
    """
    existing = await SynonymRepository(session).list_all(language=SynonymLanguage.EN)
    claimed = {e.synonym for e in existing}
    rows = plan_static_entries(STATIC_SYNONYMS, claimed)
    session.add_all(
        Synonym(
            weight=1.0,
            is_active=True,
            source=SynonymSource.STATIC,
            language=SynonymLanguage.EN,
            usage_count=0,
            **row,
        )
        for row in rows
    )
    await session.flush()
    print(f"  Seeded {len(rows)} static synonyms.")
    return len(rows)


async def main() -> None:
    print("Seeding catalog search database...")
    async with session_scope() as session:
        await seed_synonyms(session)
    await engine.dispose()
    print("Seeding complete.")


if __name__ == "__main__":
    asyncio.run(main())

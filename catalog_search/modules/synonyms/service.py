"""Synonym manager: dictionary CRUD, cached lookup index and expansion."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_search.exceptions import NotFoundException
from catalog_search.models.enums import SynonymLanguage
from catalog_search.models.synonym import Synonym
from catalog_search.modules.synonyms.cache import SynonymIndex, SynonymLookupCache, synonym_cache
from catalog_search.modules.synonyms.constants import DEFAULT_PAGE_SIZE
from catalog_search.modules.synonyms.repository import SynonymRepository
from catalog_search.modules.synonyms.schemas import (
    SynonymCreate,
    SynonymGroup,
    SynonymUpdate,
    WeightedTerm,
)
from catalog_search.modules.synonyms.validators import (
    ensure_distinct,
    validate_category_hint,
    validate_language,
    validate_source,
    validate_term,
    validate_weight,
)

logger = logging.getLogger(__name__)


class SynonymService:
    """Owns the synonym dictionary and the process-wide lookup cache.

    Every mutation validates first, writes, commits and only then
    invalidates the cache, so a successful call is visible to the next
    ``expand`` without a restart.
    """

    def __init__(self, session: AsyncSession, cache: SynonymLookupCache | None = None) -> None:
        self._session = session
        self._repo = SynonymRepository(session)
        self._cache = cache if cache is not None else synonym_cache

    # ------------------------------------------------------------------
    # Lookup index
    # ------------------------------------------------------------------

    async def load_data(self) -> SynonymIndex:
        return await self._cache.get(self._build_index)

    async def _build_index(self) -> SynonymIndex:
        entries = await self._repo.list_active()
        index = SynonymIndex.build(entries)
        logger.debug("Synonym index built: %d terms", len(index.vocabulary))
        return index

    async def vocabulary(self) -> frozenset[str]:
        return (await self.load_data()).vocabulary

    async def expand(
        self,
        term: str,
        language: SynonymLanguage | str | None = None,
        category_hint: str | None = None,
    ) -> list[WeightedTerm]:
        index = await self.load_data()
        lang = SynonymLanguage(language) if language is not None else None
        return index.expand(term, language=lang, category_hint=category_hint)

    async def get_synonyms_by_language(self, language: SynonymLanguage | str) -> list[SynonymGroup]:
        lang = validate_language(language)
        index = await self.load_data()
        groups = []
        for canonical in sorted(index.reverse):
            links = index.synonyms_of(canonical, lang)
            if links:
                groups.append(
                    SynonymGroup(
                        canonical=canonical,
                        synonyms=[WeightedTerm(term=link.term, weight=link.weight) for link in links],
                    )
                )
        return groups

    async def get_synonyms_by_category(self, category_hint: str) -> list[SynonymGroup]:
        hint = category_hint.strip().lower()
        index = await self.load_data()
        groups = []
        for canonical in sorted(index.reverse):
            links = [
                link
                for link in index.reverse[canonical]
                if link.category_hint and hint in link.category_hint.lower()
            ]
            if links:
                groups.append(
                    SynonymGroup(
                        canonical=canonical,
                        synonyms=[WeightedTerm(term=link.term, weight=link.weight) for link in links],
                    )
                )
        return groups

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    async def list_synonyms(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        search: str | None = None,
    ) -> tuple[list[Synonym], int]:
        page = max(page, 1)
        return await self._repo.list_page(offset=(page - 1) * page_size, limit=page_size, search=search)

    async def get_synonym(self, synonym_id: uuid.UUID) -> Synonym:
        entry = await self._repo.get(synonym_id)
        if entry is None:
            raise NotFoundException(f"Synonym {synonym_id} not found")
        return entry

    async def create_synonym(self, data: SynonymCreate) -> Synonym:
        canonical = validate_term(data.canonical, "canonical")
        synonym = validate_term(data.synonym, "synonym")
        ensure_distinct(canonical, synonym)
        entry = Synonym(
            canonical=canonical,
            synonym=synonym,
            weight=validate_weight(data.weight),
            is_active=data.is_active,
            source=validate_source(data.source),
            language=validate_language(data.language),
            category_hint=validate_category_hint(data.category_hint),
            usage_count=0,
        )
        await self._repo.insert(entry)
        await self._commit()
        logger.info("Synonym created: %s -> %s (%s)", synonym, canonical, entry.language.value)
        return entry

    async def update_synonym(self, synonym_id: uuid.UUID, data: SynonymUpdate) -> Synonym:
        entry = await self.get_synonym(synonym_id)
        changes = self._validated_changes(data.model_dump(exclude_unset=True))
        if "canonical" in changes or "synonym" in changes:
            ensure_distinct(
                changes.get("canonical", entry.canonical),
                changes.get("synonym", entry.synonym),
            )
        if not changes:
            return entry
        await self._repo.update(entry, changes)
        await self._commit()
        logger.info("Synonym %s updated: %s", synonym_id, sorted(changes))
        return entry

    async def delete_synonym(self, synonym_id: uuid.UUID) -> None:
        entry = await self.get_synonym(synonym_id)
        await self._repo.delete(entry)
        await self._commit()
        logger.info("Synonym %s deleted", synonym_id)

    async def toggle_active(self, synonym_id: uuid.UUID) -> Synonym:
        entry = await self.get_synonym(synonym_id)
        await self._repo.update(entry, {"is_active": not entry.is_active})
        await self._commit()
        logger.info("Synonym %s is_active=%s", synonym_id, entry.is_active)
        return entry

    async def record_usage(self, terms: list[str]) -> int:
        """Count a use of every active entry whose synonym appears in ``terms``."""
        return await self._repo.increment_usage(terms)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _commit(self) -> None:
        await self._session.commit()
        self._cache.invalidate()

    @staticmethod
    def _validated_changes(raw: dict) -> dict:
        validators = {
            "canonical": lambda v: validate_term(v, "canonical"),
            "synonym": lambda v: validate_term(v, "synonym"),
            "weight": validate_weight,
            "source": validate_source,
            "language": validate_language,
            "category_hint": validate_category_hint,
        }
        changes = {}
        for key, value in raw.items():
            if value is None and key != "category_hint":
                continue
            changes[key] = validators[key](value) if key in validators else value
        return changes

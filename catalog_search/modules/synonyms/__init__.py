"""Synonyms module: weighted synonym dictionary, lookup cache and term expansion."""

from catalog_search.modules.synonyms.cache import SynonymIndex, SynonymLink, SynonymLookupCache, synonym_cache
from catalog_search.modules.synonyms.service import SynonymService
from catalog_search.modules.synonyms.stemmer import stem

__all__ = [
    "SynonymIndex",
    "SynonymLink",
    "SynonymLookupCache",
    "SynonymService",
    "stem",
    "synonym_cache",
]

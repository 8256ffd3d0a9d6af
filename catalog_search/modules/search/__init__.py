"""Search module: query expansion pipeline feeding the retrieval engine."""

from catalog_search.modules.search.schemas import ExpandedQuery
from catalog_search.modules.search.service import QueryExpansionService

__all__ = ["ExpandedQuery", "QueryExpansionService"]

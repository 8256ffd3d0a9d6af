"""Discovery module: mines search analytics for synonym suggestions."""

from catalog_search.modules.discovery.schemas import (
    AutoCreateResult,
    DiscoverySuggestion,
    confidence_level,
)
from catalog_search.modules.discovery.service import SynonymAutoDiscovery

__all__ = [
    "AutoCreateResult",
    "DiscoverySuggestion",
    "SynonymAutoDiscovery",
    "confidence_level",
]

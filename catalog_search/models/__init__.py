# Import all models so SQLAlchemy metadata is populated for Alembic autogenerate
from catalog_search.models.enums import ConfidenceLevel, SuggestionType, SynonymLanguage, SynonymSource
from catalog_search.models.search_analytics import SearchAnalytics, SearchLog
from catalog_search.models.synonym import Synonym

__all__ = [
    "ConfidenceLevel",
    "SearchAnalytics",
    "SearchLog",
    "SuggestionType",
    "Synonym",
    "SynonymLanguage",
    "SynonymSource",
]

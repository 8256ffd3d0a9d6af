from catalog_search.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from catalog_search.database.engine import async_session, engine
from catalog_search.database.session import get_db, session_scope

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
    "async_session",
    "engine",
    "get_db",
    "session_scope",
]

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from catalog_search.config import settings


def _engine_options() -> dict:
    # SQLite's async driver uses a static/null pool without sizing options.
    if settings.is_sqlite:
        return {}
    return {
        "pool_size": 20,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "max_overflow": 5,
    }


engine = create_async_engine(
    settings.database_url,
    echo=settings.environment == "development",
    **_engine_options(),
)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

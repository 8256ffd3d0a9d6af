"""SQLAlchemy models for search analytics: daily aggregates and the raw search log."""

import datetime as dt

from sqlalchemy import JSON, Date, DateTime, Float, Index, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from catalog_search.database.base import Base, UUIDPrimaryKeyMixin, utcnow


class SearchAnalytics(UUIDPrimaryKeyMixin, Base):
    """Per-day accumulated counters for one normalized query."""

    __tablename__ = "search_analytics"

    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    query_normalized: Mapped[str] = mapped_column(String(255), nullable=False)
    search_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    zero_result_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    total_results: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    avg_results: Mapped[float] = mapped_column(Float, default=0.0, server_default="0", nullable=False)

    __table_args__ = (
        UniqueConstraint("date", "query_normalized", name="uq_search_analytics_date_query"),
        Index("ix_search_analytics_query", "query_normalized"),
    )


class SearchLog(UUIDPrimaryKeyMixin, Base):
    """One row per recorded search; the source for session pattern mining."""

    __tablename__ = "search_log"

    query: Mapped[str] = mapped_column(String(255), nullable=False)
    query_normalized: Mapped[str] = mapped_column(String(255), nullable=False)
    results_count: Mapped[int] = mapped_column(Integer, nullable=False)
    expanded_terms: Mapped[list | None] = mapped_column(JSON)
    execution_time_ms: Mapped[int | None] = mapped_column(Integer)
    session_id: Mapped[str | None] = mapped_column(String(128))
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )

    __table_args__ = (
        Index("ix_search_log_session_created", "session_id", "created_at"),
        Index("ix_search_log_created_at", "created_at"),
    )

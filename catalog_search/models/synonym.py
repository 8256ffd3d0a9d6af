"""SQLAlchemy model for the synonyms table."""

from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, Enum, Float, Index, Integer, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_search.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from catalog_search.models.enums import SynonymLanguage, SynonymSource


class Synonym(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A weighted canonical -> synonym mapping used for query expansion."""

    __tablename__ = "synonyms"

    canonical: Mapped[str] = mapped_column(String(100), nullable=False)
    synonym: Mapped[str] = mapped_column(String(100), nullable=False)
    weight: Mapped[float] = mapped_column(Float, default=1.0, server_default="1.0", nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, server_default=text("true"), nullable=False)
    source: Mapped[SynonymSource] = mapped_column(
        Enum(SynonymSource, name="synonym_source", values_callable=lambda e: [m.value for m in e]),
        default=SynonymSource.ADMIN,
        nullable=False,
    )
    language: Mapped[SynonymLanguage] = mapped_column(
        Enum(SynonymLanguage, name="synonym_language", values_callable=lambda e: [m.value for m in e]),
        default=SynonymLanguage.EN,
        nullable=False,
    )
    category_hint: Mapped[str | None] = mapped_column(String(100))
    usage_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    last_used_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    __table_args__ = (
        UniqueConstraint("canonical", "synonym", "language", name="uq_synonyms_canonical_synonym_language"),
        CheckConstraint("weight >= 0.1 AND weight <= 1.0", name="ck_synonyms_weight_range"),
        CheckConstraint("canonical <> synonym", name="ck_synonyms_canonical_ne_synonym"),
        # Only one active mapping per (synonym, language)
        Index(
            "uq_synonyms_active_synonym_language",
            "synonym",
            "language",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active = 1"),
        ),
        Index("ix_synonyms_canonical", "canonical"),
    )

"""Create synonyms, search_analytics and search_log tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

synonym_source = postgresql.ENUM("static", "admin", "analytics", "translation", name="synonym_source", create_type=False)
synonym_language = postgresql.ENUM("en", "fr", name="synonym_language", create_type=False)


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto";')
    synonym_source.create(op.get_bind(), checkfirst=True)
    synonym_language.create(op.get_bind(), checkfirst=True)

    # 1. Synonym dictionary
    op.create_table(
        "synonyms",
        sa.Column("id", postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), primary_key=True),
        sa.Column("canonical", sa.String(100), nullable=False),
        sa.Column("synonym", sa.String(100), nullable=False),
        sa.Column("weight", sa.Float(), server_default="1.0", nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("source", synonym_source, server_default="admin", nullable=False),
        sa.Column("language", synonym_language, server_default="en", nullable=False),
        sa.Column("category_hint", sa.String(100)),
        sa.Column("usage_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("last_used_at", sa.DateTime(timezone=True)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.UniqueConstraint("canonical", "synonym", "language", name="uq_synonyms_canonical_synonym_language"),
        sa.CheckConstraint("weight >= 0.1 AND weight <= 1.0", name="ck_synonyms_weight_range"),
        sa.CheckConstraint("canonical <> synonym", name="ck_synonyms_canonical_ne_synonym"),
    )
    op.create_index(
        "uq_synonyms_active_synonym_language",
        "synonyms",
        ["synonym", "language"],
        unique=True,
        postgresql_where=sa.text("is_active"),
    )
    op.create_index("ix_synonyms_canonical", "synonyms", ["canonical"])

    # 2. Daily search aggregates
    op.create_table(
        "search_analytics",
        sa.Column("id", postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), primary_key=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("query_normalized", sa.String(255), nullable=False),
        sa.Column("search_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("zero_result_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("total_results", sa.Integer(), server_default="0", nullable=False),
        sa.Column("avg_results", sa.Float(), server_default="0", nullable=False),
        sa.UniqueConstraint("date", "query_normalized", name="uq_search_analytics_date_query"),
    )
    op.create_index("ix_search_analytics_query", "search_analytics", ["query_normalized"])

    # 3. Raw search log
    op.create_table(
        "search_log",
        sa.Column("id", postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), primary_key=True),
        sa.Column("query", sa.String(255), nullable=False),
        sa.Column("query_normalized", sa.String(255), nullable=False),
        sa.Column("results_count", sa.Integer(), nullable=False),
        sa.Column("expanded_terms", sa.JSON()),
        sa.Column("execution_time_ms", sa.Integer()),
        sa.Column("session_id", sa.String(128)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )
    op.create_index("ix_search_log_session_created", "search_log", ["session_id", "created_at"])
    op.create_index("ix_search_log_created_at", "search_log", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_search_log_created_at", table_name="search_log")
    op.drop_index("ix_search_log_session_created", table_name="search_log")
    op.drop_table("search_log")
    op.drop_index("ix_search_analytics_query", table_name="search_analytics")
    op.drop_table("search_analytics")
    op.drop_index("ix_synonyms_canonical", table_name="synonyms")
    op.drop_index("uq_synonyms_active_synonym_language", table_name="synonyms")
    op.drop_table("synonyms")
    synonym_language.drop(op.get_bind(), checkfirst=True)
    synonym_source.drop(op.get_bind(), checkfirst=True)

"""SQLAlchemy table definitions.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, MetaData, String, Table, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column(
        "id",
        UUID(as_uuid=False),
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    ),
    Column("parent_id", UUID(as_uuid=False), nullable=False),  # The mod
    Column("author_id", UUID(as_uuid=False), nullable=False),
    Column("text", String(250), nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

# Reads always filter on deleted_at IS NULL
Index(
    "idx_comments_parent_id_live",
    comments_table.c.parent_id,
    postgresql_where=comments_table.c.deleted_at.is_(None),
)
Index("idx_comments_deleted_at", comments_table.c.deleted_at)

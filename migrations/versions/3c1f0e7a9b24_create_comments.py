"""create_comments

Create the comments table for mod comments:
- UUID primary key generated by the database
- varchar(250) text, matching the service's length rule
- soft deletion through deleted_at, with a partial index for live reads

Revision ID: 3c1f0e7a9b24
Revises:
Create Date: 2026-10-19 10:12:44.518207

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0e7a9b24"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("parent_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.String(250), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index(
        "idx_comments_parent_id_live",
        "comments",
        ["parent_id"],
        postgresql_where=sa.text("deleted_at IS NULL"),
    )
    op.create_index("idx_comments_deleted_at", "comments", ["deleted_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_deleted_at", table_name="comments")
    op.drop_index("idx_comments_parent_id_live", table_name="comments")
    op.drop_table("comments")

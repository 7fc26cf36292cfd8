# pylint: skip-file
# ruff: noqa
"""Initial schema - items, collections, collection_memberships

Revision ID: 001
Revises:
Create Date: 2026-06-01 00:00:00

Tables created:
- items: Catalog entries (songs) with display formatting
- collections: Named setlists
- collection_memberships: Ordered junction table

collection_memberships constraints:
- PRIMARY KEY (collection_id, item_id)   → an item is in a collection at most once
- UNIQUE (collection_id, position)       → no two members share a position
- FOREIGN KEYs with ON DELETE CASCADE    → deleting either side removes the row
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade database schema."""
    # Create items table
    op.create_table(
        "items",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("text_align", sa.String(8), nullable=False, server_default="left"),
        sa.Column("font_size", sa.String(4), nullable=False, server_default="M"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_items"),
    )

    # Create collections table
    op.create_table(
        "collections",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_collections"),
    )

    # Create collection_memberships table
    op.create_table(
        "collection_memberships",
        sa.Column("collection_id", sa.Integer(), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column(
            "added_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["collection_id"],
            ["collections.id"],
            name="fk_collection_memberships_collection_id_collections",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["item_id"],
            ["items.id"],
            name="fk_collection_memberships_item_id_items",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("collection_id", "item_id", name="pk_collection_memberships"),
        sa.UniqueConstraint(
            "collection_id",
            "position",
            name="uq_collection_memberships_collection_id_position",
        ),
    )
    op.create_index(
        "ix_collection_memberships_item_id",
        "collection_memberships",
        ["item_id"],
    )


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_index("ix_collection_memberships_item_id", table_name="collection_memberships")
    op.drop_table("collection_memberships")
    op.drop_table("collections")
    op.drop_table("items")

"""Create product and tag tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

_VISIBILITY = ("both", "catalog", "search", "none")
_CONDITION = ("new", "used", "refurbished")


def upgrade() -> None:
    op.create_table(
        "product",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column(
            "visibility",
            sa.Enum(*_VISIBILITY, name="product_visibility", native_enum=False, length=16),
            nullable=False,
        ),
        sa.Column("available_for_order", sa.Boolean(), nullable=False),
        sa.Column("online_only", sa.Boolean(), nullable=False),
        sa.Column("show_price", sa.Boolean(), nullable=False),
        sa.Column(
            "condition",
            sa.Enum(*_CONDITION, name="product_condition", native_enum=False, length=16),
            nullable=False,
        ),
        sa.Column("ean13", sa.String(length=13), nullable=False),
        sa.Column("isbn", sa.String(length=32), nullable=False),
        sa.Column("mpn", sa.String(length=40), nullable=False),
        sa.Column("reference", sa.String(length=64), nullable=False),
        sa.Column("upc", sa.String(length=12), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_product")),
    )
    op.create_table(
        "tag",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("language_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_tag")),
        sa.UniqueConstraint("language_id", "name", name=op.f("uq_tag_language_id")),
    )
    op.create_table(
        "product_tag",
        sa.Column("product_id", sa.Integer(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.Column("language_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["product_id"],
            ["product.id"],
            name=op.f("fk_product_tag_product_id_product"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["tag_id"],
            ["tag.id"],
            name=op.f("fk_product_tag_tag_id_tag"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("product_id", "tag_id", name=op.f("pk_product_tag")),
    )
    op.create_index(
        op.f("ix_product_tag_language_id"), "product_tag", ["language_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_product_tag_language_id"), table_name="product_tag")
    op.drop_table("product_tag")
    op.drop_table("tag")
    op.drop_table("product")

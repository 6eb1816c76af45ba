"""SQLAlchemy table metadata for products and their per-language tags.

Products are read into plain domain dataclasses and written with explicit
UPDATE statements, so only the columns named by a dirty mask are touched.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Dialect,
    Enum,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    TypeDecorator,
    UniqueConstraint,
)

from prodopts.domain.model import ProductCondition, ProductVisibility
from prodopts.domain.model.primitives import MPN_MAX_LENGTH, REFERENCE_MAX_LENGTH, TAG_MAX_LENGTH

if TYPE_CHECKING:
    from enum import StrEnum


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


def _enum_values(enum_cls: type[StrEnum]) -> list[str]:
    return [member.value for member in enum_cls]


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

product_table = Table(
    "product",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column(
        "visibility",
        Enum(
            ProductVisibility,
            native_enum=False,
            length=16,
            values_callable=_enum_values,
            name="product_visibility",
        ),
        nullable=False,
        default=ProductVisibility.BOTH,
    ),
    Column("available_for_order", Boolean, nullable=False, default=True),
    Column("online_only", Boolean, nullable=False, default=False),
    Column("show_price", Boolean, nullable=False, default=True),
    Column(
        "condition",
        Enum(
            ProductCondition,
            native_enum=False,
            length=16,
            values_callable=_enum_values,
            name="product_condition",
        ),
        nullable=False,
        default=ProductCondition.NEW,
    ),
    Column("ean13", String(13), nullable=False, default=""),
    Column("isbn", String(32), nullable=False, default=""),
    Column("mpn", String(MPN_MAX_LENGTH), nullable=False, default=""),
    Column("reference", String(REFERENCE_MAX_LENGTH), nullable=False, default=""),
    Column("upc", String(12), nullable=False, default=""),
    Column("updated_at", UTCDateTime(), nullable=True),
)

tag_table = Table(
    "tag",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("language_id", Integer, nullable=False),
    Column("name", String(TAG_MAX_LENGTH), nullable=False),
    UniqueConstraint("language_id", "name"),
)

product_tag_table = Table(
    "product_tag",
    metadata,
    Column(
        "product_id",
        Integer,
        ForeignKey("product.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("tag_id", Integer, ForeignKey("tag.id", ondelete="CASCADE"), primary_key=True),
    Column("language_id", Integer, nullable=False, index=True),
    Column("position", Integer, nullable=False, default=0),
)

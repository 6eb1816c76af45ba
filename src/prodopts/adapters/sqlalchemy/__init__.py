"""SQLAlchemy adapter package for prodopts."""

from __future__ import annotations

from .repositories import SqlAlchemyProductRepository, SqlAlchemyProductTagStore
from .tables import metadata, product_table, product_tag_table, tag_table
from .unit_of_work import (
    SqlAlchemyProductUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyProductRepository",
    "SqlAlchemyProductTagStore",
    "SqlAlchemyProductUnitOfWork",
    "StartupError",
    "is_started",
    "metadata",
    "product_table",
    "product_tag_table",
    "shutdown",
    "startup",
    "tag_table",
]

"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import ProductRepository, ProductTagStore
from .unit_of_work import (
    ProductRepositories,
    ProductUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)
from .validation import FieldValidator

__all__ = [
    "FieldValidator",
    "ProductRepositories",
    "ProductRepository",
    "ProductTagStore",
    "ProductUnitOfWork",
    "RepositoryCollection",
    "UnitOfWork",
]

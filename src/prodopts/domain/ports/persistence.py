"""Ports for loading and persisting products and their tags.

Methods returning ``bool`` report a non-exceptional failure with ``False``.
Adapters raise ``prodopts.domain.errors.StorageError`` when the underlying
storage itself fails.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from prodopts.domain.model import DirtyMask, Product


@runtime_checkable
class ProductRepository(Protocol):
    """Persistence contract for products."""

    def get(self, product_id: int) -> Product | None: ...

    def update(self, product: Product, fields: DirtyMask) -> bool:
        """Write only ``fields`` of ``product``; an empty mask still touches the row."""
        ...


@runtime_checkable
class ProductTagStore(Protocol):
    """Per-language tag storage for products."""

    def delete_all(self, product_id: int) -> bool: ...

    def delete_for_language(self, product_id: int, language_id: int) -> bool: ...

    def add_tags(self, product_id: int, language_id: int, tags: Sequence[str]) -> bool: ...

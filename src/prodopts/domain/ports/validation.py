"""Port for field-level product validation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from prodopts.domain.model import Product, ProductField


@runtime_checkable
class FieldValidator(Protocol):
    def is_valid(self, product: Product, field: ProductField) -> bool: ...

"""Domain error taxonomy for product option updates.

Every failure of an update surfaces as exactly one of the ``ProductError``
subclasses below, which is enough to tell which stage aborted and why.
``StorageError`` is the adapter-facing counterpart: adapters raise it around
driver errors and the domain translates it at the stage where it happened.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prodopts.domain.model.enums import (
        ProductConstraintCode,
        TagOperation,
        UpdateFailureCode,
    )


class ProductError(Exception):
    """Base class for product update failures."""


class ProductNotFoundError(ProductError):
    """Raised when the target product does not exist."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product #{product_id} was not found")
        self.product_id = product_id


class ProductConstraintError(ProductError, ValueError):
    """Raised when a product field value violates its format constraint."""

    def __init__(self, field: str, code: ProductConstraintCode, message: str | None = None) -> None:
        super().__init__(message or f"Invalid value for product field '{field}'")
        self.field = field
        self.code = code


class CannotUpdateProductError(ProductError):
    """Raised when the product row could not be persisted."""

    def __init__(self, product_id: int, code: UpdateFailureCode) -> None:
        super().__init__(f"Failed to update product #{product_id} options")
        self.product_id = product_id
        self.code = code


class TagReconciliationError(ProductError):
    """Raised when a tag delete or insert fails during reconciliation.

    Languages processed before the failing one keep their new tags.
    """

    def __init__(
        self,
        product_id: int,
        language_id: int | None,
        operation: TagOperation,
    ) -> None:
        action = str(operation).replace("_", " ")
        message = f"Failed to {action} tags for product #{product_id}"
        if language_id is not None:
            message = f"{message} in lang #{language_id}"
        super().__init__(message)
        self.product_id = product_id
        self.language_id = language_id
        self.operation = operation


class StorageError(RuntimeError):
    """Raised by adapters when the underlying storage fails."""

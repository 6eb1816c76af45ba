"""Partial product options update subsystem."""

from __future__ import annotations

from .apply import apply_options_update
from .command import UpdateProductOptionsCommand
from .handler import UpdateProductOptionsHandler
from .tags import reconcile_product_tags
from .validation import ProductFieldValidator

__all__ = [
    "ProductFieldValidator",
    "UpdateProductOptionsCommand",
    "UpdateProductOptionsHandler",
    "apply_options_update",
    "reconcile_product_tags",
]

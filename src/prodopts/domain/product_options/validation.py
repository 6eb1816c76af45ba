"""Default field rules for product option values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from prodopts.domain.model import ProductField
from prodopts.domain.model.primitives import (
    EAN13_PATTERN,
    ISBN_PATTERN,
    MPN_MAX_LENGTH,
    UPC_PATTERN,
    is_generic_name,
    is_valid_reference,
)

if TYPE_CHECKING:
    import re
    from collections.abc import Callable

    from prodopts.domain.model import Product


def _is_valid_mpn(value: object) -> bool:
    return isinstance(value, str) and len(value) <= MPN_MAX_LENGTH and is_generic_name(value)


def _matches(value: object, pattern: re.Pattern[str]) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


_RULES: Final[dict[ProductField, Callable[[object], bool]]] = {
    ProductField.MPN: _is_valid_mpn,
    ProductField.REFERENCE: lambda value: isinstance(value, str) and is_valid_reference(value),
    ProductField.EAN13: lambda value: _matches(value, EAN13_PATTERN),
    ProductField.ISBN: lambda value: _matches(value, ISBN_PATTERN),
    ProductField.UPC: lambda value: _matches(value, UPC_PATTERN),
}


class ProductFieldValidator:
    """Check the current value of a product field against its column rules.

    Fields without a rule are always valid.
    """

    def is_valid(self, product: Product, field: ProductField) -> bool:
        rule = _RULES.get(field)
        if rule is None:
            return True
        return rule(getattr(product, field.value))

"""Public domain model surface."""

from __future__ import annotations

from prodopts.domain.model.enums import (
    ProductCondition,
    ProductConstraintCode,
    ProductField,
    ProductVisibility,
    TagOperation,
    UpdateFailureCode,
)
from prodopts.domain.model.primitives import (
    UNSET,
    Ean13,
    Isbn,
    LanguageId,
    LocalizedTags,
    Maybe,
    Reference,
    Unset,
    Upc,
)
from prodopts.domain.model.product import DirtyMask, Product

__all__ = [
    "UNSET",
    "DirtyMask",
    "Ean13",
    "Isbn",
    "LanguageId",
    "LocalizedTags",
    "Maybe",
    "Product",
    "ProductCondition",
    "ProductConstraintCode",
    "ProductField",
    "ProductVisibility",
    "Reference",
    "TagOperation",
    "Unset",
    "UpdateFailureCode",
    "Upc",
]

"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class ProductVisibility(StrEnum):
    BOTH = "both"
    CATALOG = "catalog"
    SEARCH = "search"
    NONE = "none"


class ProductCondition(StrEnum):
    NEW = "new"
    USED = "used"
    REFURBISHED = "refurbished"


class ProductField(StrEnum):
    """Canonical names of the scalar product options, in update order."""

    VISIBILITY = "visibility"
    AVAILABLE_FOR_ORDER = "available_for_order"
    ONLINE_ONLY = "online_only"
    SHOW_PRICE = "show_price"
    CONDITION = "condition"
    EAN13 = "ean13"
    ISBN = "isbn"
    MPN = "mpn"
    REFERENCE = "reference"
    UPC = "upc"


class ProductConstraintCode(IntEnum):
    INVALID_ID = 1
    INVALID_VISIBILITY = 2
    INVALID_CONDITION = 3
    INVALID_EAN_13 = 4
    INVALID_ISBN = 5
    INVALID_MPN = 6
    INVALID_REFERENCE = 7
    INVALID_UPC = 8
    INVALID_LANGUAGE_ID = 9
    INVALID_TAGS = 10


class UpdateFailureCode(IntEnum):
    FAILED_UPDATE_OPTIONS = 1


class TagOperation(StrEnum):
    """Store operation a tag reconciliation step was performing."""

    DELETE_ALL = "delete_all"
    DELETE = "delete"
    INSERT = "insert"

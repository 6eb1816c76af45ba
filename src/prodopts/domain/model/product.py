"""Product aggregate as seen by the options update."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from prodopts.domain.model.enums import ProductCondition, ProductField, ProductVisibility

if TYPE_CHECKING:
    from datetime import datetime

type DirtyMask = frozenset[ProductField]


@dataclass(eq=False, kw_only=True)
class Product:
    """Product with its scalar option attributes.

    Tags are kept per language in a separate store, not on the entity.
    """

    id: int
    visibility: ProductVisibility = ProductVisibility.BOTH
    available_for_order: bool = True
    online_only: bool = False
    show_price: bool = True
    condition: ProductCondition = ProductCondition.NEW
    ean13: str = ""
    isbn: str = ""
    mpn: str = ""
    reference: str = ""
    upc: str = ""
    updated_at: datetime | None = None

    def options(self, fields: DirtyMask | None = None) -> dict[ProductField, object]:
        """Return option values keyed by field, optionally restricted to ``fields``."""

        selected = ProductField if fields is None else fields
        return {field: getattr(self, field.value) for field in ProductField if field in selected}

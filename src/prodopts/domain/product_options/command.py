"""Sparse command describing which product options to change."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from prodopts.domain.errors import ProductConstraintError
from prodopts.domain.model import (
    UNSET,
    Ean13,
    Isbn,
    LocalizedTags,
    ProductCondition,
    ProductConstraintCode,
    ProductField,
    ProductVisibility,
    Reference,
    Upc,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from prodopts.domain.model import Maybe

type TagsInput = Mapping[int, Iterable[str]] | Iterable[tuple[int, Iterable[str]] | LocalizedTags]


@dataclass(frozen=True, slots=True, kw_only=True)
class UpdateProductOptionsCommand:
    """Partial update of product options.

    Every field defaults to ``UNSET`` and is left untouched on the product.
    ``localized_tags`` has three states: ``UNSET`` skips tags entirely, an
    empty tuple removes every tag in every language, and entries replace the
    tags of the languages they name.
    """

    product_id: int
    visibility: Maybe[ProductVisibility] = UNSET
    available_for_order: Maybe[bool] = UNSET
    online_only: Maybe[bool] = UNSET
    show_price: Maybe[bool] = UNSET
    condition: Maybe[ProductCondition] = UNSET
    ean13: Maybe[Ean13] = UNSET
    isbn: Maybe[Isbn] = UNSET
    mpn: Maybe[str] = UNSET
    reference: Maybe[Reference] = UNSET
    upc: Maybe[Upc] = UNSET
    localized_tags: Maybe[tuple[LocalizedTags, ...]] = UNSET

    def __post_init__(self) -> None:
        if isinstance(self.product_id, bool) or self.product_id <= 0:
            raise ProductConstraintError(
                "id",
                ProductConstraintCode.INVALID_ID,
                f"Product id must be a positive integer, got {self.product_id!r}",
            )
        if self.localized_tags is not UNSET:
            object.__setattr__(self, "localized_tags", _localized_tags(self.localized_tags))

    def present_fields(self) -> frozenset[ProductField]:
        return frozenset(field for field in ProductField if getattr(self, field.value) is not UNSET)

    @classmethod
    def build(
        cls,
        product_id: int,
        *,
        visibility: Maybe[str] = UNSET,
        available_for_order: Maybe[bool] = UNSET,
        online_only: Maybe[bool] = UNSET,
        show_price: Maybe[bool] = UNSET,
        condition: Maybe[str] = UNSET,
        ean13: Maybe[str] = UNSET,
        isbn: Maybe[str] = UNSET,
        mpn: Maybe[str] = UNSET,
        reference: Maybe[str] = UNSET,
        upc: Maybe[str] = UNSET,
        localized_tags: Maybe[TagsInput] = UNSET,
    ) -> UpdateProductOptionsCommand:
        """Build a command from primitive values, wrapping them in value objects."""

        return cls(
            product_id=product_id,
            visibility=UNSET if visibility is UNSET else _visibility(visibility),
            available_for_order=available_for_order,
            online_only=online_only,
            show_price=show_price,
            condition=UNSET if condition is UNSET else _condition(condition),
            ean13=UNSET if ean13 is UNSET else Ean13(ean13),
            isbn=UNSET if isbn is UNSET else Isbn(isbn),
            mpn=mpn,
            reference=UNSET if reference is UNSET else Reference(reference),
            upc=UNSET if upc is UNSET else Upc(upc),
            localized_tags=UNSET if localized_tags is UNSET else _localized_tags(localized_tags),
        )


def _visibility(value: str) -> ProductVisibility:
    try:
        return ProductVisibility(value)
    except ValueError as exc:
        raise ProductConstraintError(
            "visibility",
            ProductConstraintCode.INVALID_VISIBILITY,
            f"Invalid product visibility '{value}'",
        ) from exc


def _condition(value: str) -> ProductCondition:
    try:
        return ProductCondition(value)
    except ValueError as exc:
        raise ProductConstraintError(
            "condition",
            ProductConstraintCode.INVALID_CONDITION,
            f"Invalid product condition '{value}'",
        ) from exc


def _localized_tags(value: TagsInput) -> tuple[LocalizedTags, ...]:
    if isinstance(value, str):
        raise _malformed_tags(value)
    try:
        items = iter(value.items() if isinstance(value, Mapping) else value)
    except TypeError as exc:
        raise _malformed_tags(value) from exc
    result: list[LocalizedTags] = []
    for item in items:
        if isinstance(item, LocalizedTags):
            result.append(item)
            continue
        try:
            language_id, tags = item
        except (TypeError, ValueError) as exc:
            raise _malformed_tags(item) from exc
        result.append(LocalizedTags(language_id, tags))
    return tuple(result)


def _malformed_tags(value: object) -> ProductConstraintError:
    return ProductConstraintError(
        "tags",
        ProductConstraintCode.INVALID_TAGS,
        f"Expected (language id, tags) entries, got {value!r}",
    )

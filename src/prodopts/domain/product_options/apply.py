"""Apply an options command to a product and record the touched fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prodopts.domain.errors import ProductConstraintError
from prodopts.domain.model import UNSET, ProductConstraintCode, ProductField

if TYPE_CHECKING:
    from prodopts.domain.model import DirtyMask, Product
    from prodopts.domain.ports.validation import FieldValidator

    from .command import UpdateProductOptionsCommand


def apply_options_update(
    product: Product,
    command: UpdateProductOptionsCommand,
    *,
    validator: FieldValidator,
) -> DirtyMask:
    """Copy every present command field onto ``product``.

    Returns the fields that were written. Absent fields are never touched.
    ``mpn`` is validated right after assignment and a violation aborts the
    update before any later field is applied.
    """

    dirty: set[ProductField] = set()

    if command.visibility is not UNSET:
        product.visibility = command.visibility
        dirty.add(ProductField.VISIBILITY)
    if command.available_for_order is not UNSET:
        product.available_for_order = command.available_for_order
        dirty.add(ProductField.AVAILABLE_FOR_ORDER)
    if command.online_only is not UNSET:
        product.online_only = command.online_only
        dirty.add(ProductField.ONLINE_ONLY)
    if command.show_price is not UNSET:
        product.show_price = command.show_price
        dirty.add(ProductField.SHOW_PRICE)
    if command.condition is not UNSET:
        product.condition = command.condition
        dirty.add(ProductField.CONDITION)
    if command.ean13 is not UNSET:
        product.ean13 = command.ean13.value
        dirty.add(ProductField.EAN13)
    if command.isbn is not UNSET:
        product.isbn = command.isbn.value
        dirty.add(ProductField.ISBN)
    if command.mpn is not UNSET:
        product.mpn = command.mpn
        _validate(product, ProductField.MPN, ProductConstraintCode.INVALID_MPN, validator)
        dirty.add(ProductField.MPN)
    if command.reference is not UNSET:
        product.reference = command.reference.value
        dirty.add(ProductField.REFERENCE)
    if command.upc is not UNSET:
        product.upc = command.upc.value
        dirty.add(ProductField.UPC)

    return frozenset(dirty)


def _validate(
    product: Product,
    field: ProductField,
    code: ProductConstraintCode,
    validator: FieldValidator,
) -> None:
    if not validator.is_valid(product, field):
        raise ProductConstraintError(
            field.value,
            code,
            f"Invalid {field.value} '{getattr(product, field.value)}' for product #{product.id}",
        )

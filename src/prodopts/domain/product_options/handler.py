"""Command handler for partial product option updates."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from prodopts.domain.errors import (
    CannotUpdateProductError,
    ProductNotFoundError,
    StorageError,
)
from prodopts.domain.model import UNSET, UpdateFailureCode

from .apply import apply_options_update
from .tags import reconcile_product_tags
from .validation import ProductFieldValidator

if TYPE_CHECKING:
    from collections.abc import Callable

    from prodopts.domain.model import DirtyMask, Product
    from prodopts.domain.ports.persistence import ProductRepository
    from prodopts.domain.ports.unit_of_work import ProductUnitOfWork
    from prodopts.domain.ports.validation import FieldValidator

    from .command import UpdateProductOptionsCommand

log = getLogger(__name__)


class UpdateProductOptionsHandler:
    """Apply, persist, then reconcile tags, in that order.

    Each stage runs only when the previous one succeeded and any failure ends
    the update with a single ``ProductError``. Scalar fields are committed
    before tags are touched.
    """

    def __init__(
        self,
        unit_of_work_factory: Callable[[], ProductUnitOfWork],
        *,
        validator: FieldValidator | None = None,
    ) -> None:
        self._unit_of_work_factory = unit_of_work_factory
        self._validator = validator or ProductFieldValidator()

    def handle(self, command: UpdateProductOptionsCommand) -> None:
        product_id = command.product_id
        log.info("Updating options of product #%s", product_id)

        with self._unit_of_work_factory() as uow:
            products = uow.repositories.products
            product = _load(products, product_id)

            fields = apply_options_update(product, command, validator=self._validator)
            _persist(products, product, fields, commit=uow.commit)
            log.debug(
                "Persisted product #%s fields: %s",
                product_id,
                ", ".join(sorted(fields)) or "<none>",
            )

            # absent tags mean a partial update that leaves tags as they are
            if command.localized_tags is not UNSET:
                reconcile_product_tags(
                    product_id,
                    command.localized_tags,
                    store=uow.repositories.tags,
                    commit=uow.commit,
                )

        log.info("Finished updating options of product #%s", product_id)


def _load(products: ProductRepository, product_id: int) -> Product:
    # a product that cannot be read is treated the same as a missing one
    try:
        product = products.get(product_id)
    except StorageError as exc:
        raise ProductNotFoundError(product_id) from exc
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


def _persist(
    products: ProductRepository,
    product: Product,
    fields: DirtyMask,
    *,
    commit: Callable[[], None],
) -> None:
    try:
        updated = products.update(product, fields)
        if updated:
            commit()
    except StorageError as exc:
        raise CannotUpdateProductError(
            product.id, UpdateFailureCode.FAILED_UPDATE_OPTIONS
        ) from exc
    if not updated:
        raise CannotUpdateProductError(product.id, UpdateFailureCode.FAILED_UPDATE_OPTIONS)

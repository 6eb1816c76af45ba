"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from prodopts.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyProductUnitOfWork,
    is_started,
    startup,
)
from prodopts.domain.model import UNSET
from prodopts.domain.ports.unit_of_work import ProductUnitOfWork
from prodopts.domain.product_options import UpdateProductOptionsHandler

if TYPE_CHECKING:
    from prodopts.domain.ports.validation import FieldValidator
    from prodopts.domain.product_options import UpdateProductOptionsCommand

UnitOfWorkFactory = Callable[[], ProductUnitOfWork]


log = getLogger(__name__)


def update_product_options(
    command: UpdateProductOptionsCommand,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    validator: FieldValidator | None = None,
) -> None:
    """Apply ``command`` using the configured adapters.

    The SQLAlchemy adapter is started on first use unless a unit of work
    factory is supplied.
    """

    if unit_of_work_factory is None and not is_started():
        startup()
    effective_uow = unit_of_work_factory or SqlAlchemyProductUnitOfWork
    log.debug(
        "Dispatching options update for product #%s (fields: %s, tags: %s)",
        command.product_id,
        ", ".join(sorted(command.present_fields())) or "<none>",
        "unchanged" if command.localized_tags is UNSET else len(command.localized_tags),
    )

    handler = UpdateProductOptionsHandler(effective_uow, validator=validator)
    handler.handle(command)

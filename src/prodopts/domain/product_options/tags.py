"""Reconcile per-language product tags against the tag store."""

from __future__ import annotations

from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from prodopts.domain.errors import StorageError, TagReconciliationError
from prodopts.domain.model import TagOperation

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from prodopts.domain.model import LocalizedTags
    from prodopts.domain.ports.persistence import ProductTagStore

log = getLogger(__name__)


def reconcile_product_tags(
    product_id: int,
    localized_tags: Sequence[LocalizedTags],
    *,
    store: ProductTagStore,
    commit: Callable[[], None],
) -> None:
    """Replace the tags of every language named in ``localized_tags``.

    - An empty sequence deletes all tags of the product, in every language.
    - Each entry first deletes the existing tags of its language; empty
      entries stop there, others insert their tags as the new set.
    - Languages not named are left alone.

    ``commit`` runs after each successful store operation. A failure raises
    ``TagReconciliationError`` for the failing language and leaves languages
    already processed in their new state; nothing is rolled back.
    """

    if not localized_tags:
        _run(
            partial(store.delete_all, product_id),
            commit=commit,
            product_id=product_id,
            language_id=None,
            operation=TagOperation.DELETE_ALL,
        )
        log.debug("Deleted all tags of product #%s", product_id)
        return

    for entry in localized_tags:
        language_id = entry.language_id.value
        _run(
            partial(store.delete_for_language, product_id, language_id),
            commit=commit,
            product_id=product_id,
            language_id=language_id,
            operation=TagOperation.DELETE,
        )

        if entry.is_empty():
            log.debug("Cleared tags of product #%s in lang #%s", product_id, language_id)
            continue

        tags = entry.tags
        _run(
            partial(store.add_tags, product_id, language_id, tags),
            commit=commit,
            product_id=product_id,
            language_id=language_id,
            operation=TagOperation.INSERT,
        )
        log.debug(
            "Replaced tags of product #%s in lang #%s with %d tag(s)",
            product_id,
            language_id,
            len(tags),
        )


def _run(
    operation_call: Callable[[], bool],
    *,
    commit: Callable[[], None],
    product_id: int,
    language_id: int | None,
    operation: TagOperation,
) -> None:
    try:
        succeeded = operation_call()
        if succeeded:
            commit()
    except StorageError as exc:
        log.warning(
            "Tag %s failed for product #%s (lang %s): %s",
            operation,
            product_id,
            language_id,
            exc,
        )
        raise TagReconciliationError(product_id, language_id, operation) from exc
    if not succeeded:
        log.warning(
            "Tag %s reported failure for product #%s (lang %s)",
            operation,
            product_id,
            language_id,
        )
        raise TagReconciliationError(product_id, language_id, operation)

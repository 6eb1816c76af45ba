"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from prodopts.adapters.sqlalchemy.tables import product_table, product_tag_table, tag_table
from prodopts.domain.errors import StorageError
from prodopts.domain.model import Product
from prodopts.domain.model.primitives import TAG_MAX_LENGTH, is_generic_name

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from sqlalchemy import CursorResult
    from sqlalchemy.orm import Session

    from prodopts.domain.model import DirtyMask

log = logging.getLogger(__name__)


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Re-raise driver errors as ``StorageError``."""

    try:
        yield
    except SQLAlchemyError as exc:
        raise StorageError(f"Storage failure while trying to {action}") from exc


class SqlAlchemyProductRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, product_id: int) -> Product | None:
        stmt = select(product_table).where(product_table.c.id == product_id)
        with storage_errors(f"load product #{product_id}"):
            row = self.session.execute(stmt).mappings().one_or_none()
        if row is None:
            return None
        return Product(**dict(row))

    def add(self, product: Product) -> None:
        values = {field.value: value for field, value in product.options().items()}
        stmt = insert(product_table).values(id=product.id, updated_at=product.updated_at, **values)
        with storage_errors(f"insert product #{product.id}"):
            self.session.execute(stmt)

    def update(self, product: Product, fields: DirtyMask) -> bool:
        now = datetime.now(tz=UTC)
        values: dict[str, object] = {
            field.value: value for field, value in product.options(fields).items()
        }
        values["updated_at"] = now
        stmt = update(product_table).where(product_table.c.id == product.id).values(values)
        with storage_errors(f"update product #{product.id}"):
            result = cast("CursorResult[Any]", self.session.execute(stmt))
        if result.rowcount != 1:
            log.warning("Update of product #%s matched %s rows", product.id, result.rowcount)
            return False
        product.updated_at = now
        return True


class SqlAlchemyProductTagStore:
    """Tag names are shared per language; products link to them in order."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def delete_all(self, product_id: int) -> bool:
        stmt = delete(product_tag_table).where(product_tag_table.c.product_id == product_id)
        with storage_errors(f"delete tags of product #{product_id}"):
            self.session.execute(stmt)
        return True

    def delete_for_language(self, product_id: int, language_id: int) -> bool:
        stmt = (
            delete(product_tag_table)
            .where(product_tag_table.c.product_id == product_id)
            .where(product_tag_table.c.language_id == language_id)
        )
        with storage_errors(f"delete tags of product #{product_id} in lang #{language_id}"):
            self.session.execute(stmt)
        return True

    def add_tags(self, product_id: int, language_id: int, tags: Sequence[str]) -> bool:
        names: list[str] = []
        for tag in tags:
            name = tag.strip()
            if not name:
                continue
            if len(name) > TAG_MAX_LENGTH or not is_generic_name(name):
                log.warning("Rejected tag %r for product #%s", tag, product_id)
                return False
            if name not in names:
                names.append(name)
        if not names:
            return True

        with storage_errors(f"add tags to product #{product_id} in lang #{language_id}"):
            tag_ids = self._ensure_tags(language_id, names)
            linked = set(
                self.session.execute(
                    select(product_tag_table.c.tag_id)
                    .where(product_tag_table.c.product_id == product_id)
                    .where(product_tag_table.c.tag_id.in_(tag_ids))
                ).scalars()
            )
            fresh = [tag_id for tag_id in tag_ids if tag_id not in linked]
            start = self._next_position(product_id, language_id)
            rows = [
                {
                    "product_id": product_id,
                    "tag_id": tag_id,
                    "language_id": language_id,
                    "position": start + offset,
                }
                for offset, tag_id in enumerate(fresh)
            ]
            if rows:
                self.session.execute(insert(product_tag_table), rows)
        return True

    def list_tags(self, product_id: int) -> dict[int, list[str]]:
        """Return the product's tag names grouped by language, in insertion order."""

        stmt = (
            select(product_tag_table.c.language_id, tag_table.c.name)
            .join(tag_table, tag_table.c.id == product_tag_table.c.tag_id)
            .where(product_tag_table.c.product_id == product_id)
            .order_by(product_tag_table.c.language_id, product_tag_table.c.position)
        )
        grouped: dict[int, list[str]] = {}
        with storage_errors(f"list tags of product #{product_id}"):
            for language_id, name in self.session.execute(stmt):
                grouped.setdefault(language_id, []).append(name)
        return grouped

    def _ensure_tags(self, language_id: int, names: list[str]) -> list[int]:
        stmt = (
            select(tag_table.c.name, tag_table.c.id)
            .where(tag_table.c.language_id == language_id)
            .where(tag_table.c.name.in_(names))
        )
        ids_by_name: dict[str, int] = {name: tag_id for name, tag_id in self.session.execute(stmt)}
        for name in names:
            if name in ids_by_name:
                continue
            result = self.session.execute(
                insert(tag_table).values(language_id=language_id, name=name)
            )
            ids_by_name[name] = result.inserted_primary_key[0]
        return [ids_by_name[name] for name in names]

    def _next_position(self, product_id: int, language_id: int) -> int:
        stmt = (
            select(product_tag_table.c.position)
            .where(product_tag_table.c.product_id == product_id)
            .where(product_tag_table.c.language_id == language_id)
            .order_by(product_tag_table.c.position.desc())
            .limit(1)
        )
        current = self.session.execute(stmt).scalar_one_or_none()
        return 0 if current is None else current + 1

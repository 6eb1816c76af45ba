"""Reusable fakes and helpers for product option tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from prodopts.domain.errors import StorageError
from prodopts.domain.model import Product, ProductField, TagOperation
from prodopts.domain.ports.unit_of_work import ProductRepositories

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from types import TracebackType

    from prodopts.domain.model import DirtyMask


def make_product(product_id: int = 1, **overrides: object) -> Product:
    """Create a product with distinctive, non-default option values."""

    values: dict[str, object] = {
        "reference": "REF-1",
        "mpn": "MPN-1",
        "ean13": "3017620422003",
        "isbn": "978-3-16",
        "upc": "036000291452",
    }
    values.update(overrides)
    return Product(id=product_id, **values)  # type: ignore[arg-type]


class FakeProductRepository:
    """Stores option values as plain rows so persistence is explicit."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self.rows: dict[int, dict[ProductField, object]] = {
            product.id: product.options() for product in products
        }
        self.get_calls: list[int] = []
        self.update_calls: list[tuple[int, DirtyMask]] = []
        self.update_result = True
        self.update_error: Exception | None = None
        self.get_error: Exception | None = None

    def get(self, product_id: int) -> Product | None:
        self.get_calls.append(product_id)
        if self.get_error is not None:
            raise self.get_error
        row = self.rows.get(product_id)
        if row is None:
            return None
        return Product(id=product_id, **{name.value: value for name, value in row.items()})  # type: ignore[arg-type]

    def update(self, product: Product, fields: DirtyMask) -> bool:
        self.update_calls.append((product.id, fields))
        if self.update_error is not None:
            raise self.update_error
        if not self.update_result:
            return False
        self.rows[product.id].update(product.options(fields))
        return True


type _FailureKey = tuple[TagOperation, int | None]


@dataclass
class FakeTagStore:
    """In-memory tag store with per-operation failure injection."""

    tags: dict[int, dict[int, list[str]]] = field(default_factory=dict)
    calls: list[tuple[object, ...]] = field(default_factory=list)
    failing: set[_FailureKey] = field(default_factory=set)
    raising: set[_FailureKey] = field(default_factory=set)

    def delete_all(self, product_id: int) -> bool:
        self.calls.append((TagOperation.DELETE_ALL, product_id))
        if not self._allowed(TagOperation.DELETE_ALL, None):
            return False
        self.tags.pop(product_id, None)
        return True

    def delete_for_language(self, product_id: int, language_id: int) -> bool:
        self.calls.append((TagOperation.DELETE, product_id, language_id))
        if not self._allowed(TagOperation.DELETE, language_id):
            return False
        self.tags.get(product_id, {}).pop(language_id, None)
        return True

    def add_tags(self, product_id: int, language_id: int, tags: Sequence[str]) -> bool:
        self.calls.append((TagOperation.INSERT, product_id, language_id, tuple(tags)))
        if not self._allowed(TagOperation.INSERT, language_id):
            return False
        current = self.tags.setdefault(product_id, {}).setdefault(language_id, [])
        current.extend(tag for tag in tags if tag not in current)
        return True

    def operations(self) -> list[TagOperation]:
        return [call[0] for call in self.calls]  # type: ignore[misc]

    def _allowed(self, operation: TagOperation, language_id: int | None) -> bool:
        if (operation, language_id) in self.raising:
            raise StorageError(f"{operation} exploded")
        return (operation, language_id) not in self.failing


class FakeProductUnitOfWork:
    """Unit of work over the fakes that counts commits and rollbacks."""

    def __init__(
        self,
        products: FakeProductRepository | None = None,
        tags: FakeTagStore | None = None,
    ) -> None:
        self._repositories = ProductRepositories(
            products=products or FakeProductRepository(),
            tags=tags or FakeTagStore(),
        )
        self.commits = 0
        self.rolled_back = False
        self.entered = 0

    @property
    def repositories(self) -> ProductRepositories:
        return self._repositories

    def __enter__(self) -> FakeProductUnitOfWork:
        self.entered += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        return False

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rolled_back = True


class RecordingValidator:
    """Validator that records calls and rejects the configured fields."""

    def __init__(self, invalid: Iterable[ProductField] = ()) -> None:
        self.invalid = set(invalid)
        self.calls: list[tuple[int, ProductField, object]] = []

    def is_valid(self, product: Product, field: ProductField) -> bool:
        self.calls.append((product.id, field, getattr(product, field.value)))
        return field not in self.invalid

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine, inspect

from prodopts.adapters.sqlalchemy.repositories import SqlAlchemyProductTagStore
from prodopts.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyProductUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)
from prodopts.domain.errors import TagReconciliationError
from prodopts.domain.model import ProductField, ProductVisibility
from prodopts.domain.product_options import (
    UpdateProductOptionsCommand,
    UpdateProductOptionsHandler,
)
from tests.helpers.products import make_product

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from sqlalchemy.engine import Engine


@pytest.fixture(autouse=True)
def reset_unit_of_work_state() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def test_sqlalchemy_unit_of_work_requires_startup() -> None:
    with pytest.raises(StartupError):
        SqlAlchemyProductUnitOfWork()


def test_startup_requires_force_for_reconfiguration() -> None:
    engine_a = create_engine("sqlite+pysqlite:///:memory:", future=True)
    engine_b = create_engine("sqlite+pysqlite:///:memory:", future=True)

    startup(engine=engine_a, force=True)

    with pytest.raises(StartupError):
        startup(engine=engine_b)

    startup(engine=engine_b, force=True)
    assert configured_engine() is engine_b
    assert is_started()


def test_startup_migrates_schema() -> None:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)

    startup(engine=engine)

    tables = set(inspect(engine).get_table_names())
    assert {"product", "tag", "product_tag", "alembic_version"} <= tables


def test_repositories_require_an_open_session(
    sqlite_unit_of_work: Callable[[], SqlAlchemyProductUnitOfWork],
) -> None:
    uow = sqlite_unit_of_work()

    with pytest.raises(StartupError):
        _ = uow.repositories


def test_uncommitted_work_is_rolled_back_on_error(
    sqlite_unit_of_work: Callable[[], SqlAlchemyProductUnitOfWork],
) -> None:
    with pytest.raises(RuntimeError), sqlite_unit_of_work() as uow:
        uow.repositories.products.add(make_product(1))  # type: ignore[attr-defined]
        raise RuntimeError("boom")

    with sqlite_unit_of_work() as uow:
        assert uow.repositories.products.get(1) is None


def _seed(
    factory: Callable[[], SqlAlchemyProductUnitOfWork],
    tags: Sequence[tuple[int, Sequence[str]]] = (),
) -> None:
    with factory() as uow:
        uow.repositories.products.add(make_product(1))  # type: ignore[attr-defined]
        for language_id, names in tags:
            uow.repositories.tags.add_tags(1, language_id, names)
        uow.commit()


def _tags(factory: Callable[[], SqlAlchemyProductUnitOfWork]) -> dict[int, list[str]]:
    with factory() as uow:
        return uow.repositories.tags.list_tags(1)  # type: ignore[attr-defined]


def test_handler_updates_fields_and_reconciles_tags(
    sqlite_unit_of_work: Callable[[], SqlAlchemyProductUnitOfWork],
) -> None:
    _seed(sqlite_unit_of_work, [(1, ["one"]), (2, ["old", "blue"]), (3, ["three"])])
    command = UpdateProductOptionsCommand.build(
        1,
        visibility="search",
        mpn="MPN-NEW",
        localized_tags=[(1, []), (2, ["red", "new"])],
    )

    UpdateProductOptionsHandler(sqlite_unit_of_work).handle(command)

    with sqlite_unit_of_work() as uow:
        product = uow.repositories.products.get(1)
    assert product is not None
    assert product.visibility is ProductVisibility.SEARCH
    assert product.mpn == "MPN-NEW"
    assert product.reference == "REF-1"
    assert product.updated_at is not None
    assert _tags(sqlite_unit_of_work) == {2: ["red", "new"], 3: ["three"]}


def test_handler_leaves_tags_alone_when_absent(
    sqlite_unit_of_work: Callable[[], SqlAlchemyProductUnitOfWork],
) -> None:
    _seed(sqlite_unit_of_work, [(1, ["keep"])])

    UpdateProductOptionsHandler(sqlite_unit_of_work).handle(
        UpdateProductOptionsCommand.build(1, show_price=False)
    )

    assert _tags(sqlite_unit_of_work) == {1: ["keep"]}


def test_handler_empty_tag_list_removes_every_language(
    sqlite_unit_of_work: Callable[[], SqlAlchemyProductUnitOfWork],
) -> None:
    _seed(sqlite_unit_of_work, [(1, ["a"]), (2, ["b"])])

    UpdateProductOptionsHandler(sqlite_unit_of_work).handle(
        UpdateProductOptionsCommand.build(1, localized_tags=[])
    )

    assert _tags(sqlite_unit_of_work) == {}


def test_failed_tag_insert_keeps_committed_languages(
    sqlite_unit_of_work: Callable[[], SqlAlchemyProductUnitOfWork],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # Known consistency gap: earlier languages are not rolled back.
    _seed(sqlite_unit_of_work, [(1, ["one"]), (2, ["two"])])
    original = SqlAlchemyProductTagStore.add_tags

    def failing_for_lang_2(
        self: SqlAlchemyProductTagStore, product_id: int, language_id: int, tags: Sequence[str]
    ) -> bool:
        if language_id == 2:
            return False
        return original(self, product_id, language_id, tags)

    monkeypatch.setattr(SqlAlchemyProductTagStore, "add_tags", failing_for_lang_2)
    command = UpdateProductOptionsCommand.build(
        1, upc="", localized_tags=[(1, ["a"]), (2, ["b"])]
    )

    with pytest.raises(TagReconciliationError) as exc:
        UpdateProductOptionsHandler(sqlite_unit_of_work).handle(command)

    assert exc.value.language_id == 2
    assert _tags(sqlite_unit_of_work) == {1: ["a"]}
    with sqlite_unit_of_work() as uow:
        product = uow.repositories.products.get(1)
    assert product is not None
    assert product.options(frozenset({ProductField.UPC})) == {ProductField.UPC: ""}

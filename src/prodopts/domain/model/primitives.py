"""Domain primitives: the tri-state sentinel + small value objects.

Value objects validate on construction and raise ``ProductConstraintError``
carrying the code of the violated constraint.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final, Literal

from prodopts.domain.errors import ProductConstraintError
from prodopts.domain.model.enums import ProductConstraintCode

if TYPE_CHECKING:
    from collections.abc import Iterable


class Unset(Enum):
    """Marker for a command field that was not provided."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> Literal[False]:
        return False


UNSET: Final = Unset.UNSET

type Maybe[T] = T | Literal[Unset.UNSET]

EAN13_PATTERN: Final = re.compile(r"^[0-9]{0,13}$")
ISBN_PATTERN: Final = re.compile(r"^[0-9-]{0,32}$")
UPC_PATTERN: Final = re.compile(r"^[0-9]{0,12}$")
REFERENCE_FORBIDDEN: Final = re.compile(r"[<>;={}]")
GENERIC_NAME_FORBIDDEN: Final = re.compile(r"[<>={}]")

REFERENCE_MAX_LENGTH: Final = 64
MPN_MAX_LENGTH: Final = 40
TAG_MAX_LENGTH: Final = 32


def is_generic_name(value: str) -> bool:
    return GENERIC_NAME_FORBIDDEN.search(value) is None


def is_valid_reference(value: str) -> bool:
    return len(value) <= REFERENCE_MAX_LENGTH and REFERENCE_FORBIDDEN.search(value) is None


@dataclass(frozen=True, slots=True)
class Ean13:
    value: str

    def __post_init__(self) -> None:
        if not EAN13_PATTERN.fullmatch(self.value):
            raise ProductConstraintError(
                "ean13",
                ProductConstraintCode.INVALID_EAN_13,
                f"Invalid EAN-13 code '{self.value}'",
            )


@dataclass(frozen=True, slots=True)
class Isbn:
    value: str

    def __post_init__(self) -> None:
        if not ISBN_PATTERN.fullmatch(self.value):
            raise ProductConstraintError(
                "isbn",
                ProductConstraintCode.INVALID_ISBN,
                f"Invalid ISBN code '{self.value}'",
            )


@dataclass(frozen=True, slots=True)
class Upc:
    value: str

    def __post_init__(self) -> None:
        if not UPC_PATTERN.fullmatch(self.value):
            raise ProductConstraintError(
                "upc",
                ProductConstraintCode.INVALID_UPC,
                f"Invalid UPC code '{self.value}'",
            )


@dataclass(frozen=True, slots=True)
class Reference:
    value: str

    def __post_init__(self) -> None:
        if not is_valid_reference(self.value):
            raise ProductConstraintError(
                "reference",
                ProductConstraintCode.INVALID_REFERENCE,
                f"Invalid product reference '{self.value}'",
            )


@dataclass(frozen=True, slots=True)
class LanguageId:
    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; reject it explicitly
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise ProductConstraintError(
                "language_id",
                ProductConstraintCode.INVALID_LANGUAGE_ID,
                f"Language id must be a positive integer, got {self.value!r}",
            )


@dataclass(frozen=True, slots=True, init=False)
class LocalizedTags:
    """Ordered tag names for one language."""

    language_id: LanguageId
    tags: tuple[str, ...]

    def __init__(self, language_id: LanguageId | int, tags: Iterable[str]) -> None:
        lang = language_id if isinstance(language_id, LanguageId) else LanguageId(language_id)
        # a bare string would otherwise be split into one tag per character
        if isinstance(tags, str):
            raise _invalid_tags(lang, tags)
        try:
            values = tuple(tags)
        except TypeError as exc:
            raise _invalid_tags(lang, tags) from exc
        for tag in values:
            if not isinstance(tag, str):
                raise _invalid_tags(lang, tags)
            if len(tag) > TAG_MAX_LENGTH or not is_generic_name(tag):
                raise ProductConstraintError(
                    "tags",
                    ProductConstraintCode.INVALID_TAGS,
                    f"Invalid tag '{tag}' in lang #{lang.value}",
                )
        object.__setattr__(self, "language_id", lang)
        object.__setattr__(self, "tags", values)

    def is_empty(self) -> bool:
        return not self.tags


def _invalid_tags(lang: LanguageId, tags: object) -> ProductConstraintError:
    return ProductConstraintError(
        "tags",
        ProductConstraintCode.INVALID_TAGS,
        f"Tags in lang #{lang.value} must be a sequence of names, got {tags!r}",
    )

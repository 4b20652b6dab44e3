"""Helpers shared by the public/wire translators."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)
S = TypeVar("S")
T = TypeVar("T")


def code_or_raw(enum_cls: type[E], value: str) -> E | str:
    """Return the enum member for a documented code, else the raw value.

    Replies are never validated locally, so an undocumented code reaches the
    caller unchanged.
    """
    try:
        return enum_cls(value)
    except ValueError:
        return value


def code_to_wire(value: Enum | str | None) -> str | None:
    if isinstance(value, Enum):
        return value.value
    return value


def optional(value: S | None, convert: Callable[[S], T]) -> T | None:
    """Convert a nested record, keeping None as None."""
    if value is None:
        return None
    return convert(value)


def map_list(items: Iterable[S] | None, convert: Callable[[S], T]) -> list[T] | None:
    """Convert each element in order; None stays None and empty stays empty."""
    if items is None:
        return None
    return [convert(item) for item in items]


def map_tuple(items: Iterable[S] | None, convert: Callable[[S], T]) -> tuple[T, ...] | None:
    if items is None:
        return None
    return tuple(convert(item) for item in items)

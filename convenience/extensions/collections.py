"""Helpers over iterables, lists and dicts.

Unlike the string helpers, these treat a ``None`` collection or callback as
caller error and raise ``MissingArgumentError`` for it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, MutableMapping, MutableSequence
from typing import Any, TypeVar

from convenience.core.errors import DuplicateKeyError, MissingArgumentError

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def where_not_none(source: Iterable[T | None]) -> Iterator[T]:
    """Lazily yield the items of *source* that are not ``None``.

    *source* itself is checked eagerly, before any item is requested.
    """
    if source is None:
        raise MissingArgumentError("source")
    return (item for item in source if item is not None)


def for_each(source: Iterable[T], action: Callable[[T], Any]) -> None:
    """Call *action* on every item of *source*.

    *source* is materialized first, so *action* may mutate the underlying
    collection without disturbing the iteration.
    """
    if source is None:
        raise MissingArgumentError("source")
    if action is None:
        raise MissingArgumentError("action")
    for item in list(source):
        action(item)


def append_if_not_none(items: MutableSequence[T], item: T | None) -> None:
    if item is not None:
        items.append(item)


def add_if_not_none(mapping: MutableMapping[K, V], key: K, value: V | None) -> None:
    """Insert *key* → *value* unless *value* is ``None``.

    Raises ``DuplicateKeyError`` if *key* is already present and *value*
    would have been inserted.
    """
    if value is None:
        return
    if key in mapping:
        raise DuplicateKeyError(key)
    mapping[key] = value

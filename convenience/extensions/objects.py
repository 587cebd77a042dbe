"""``None`` predicates for arbitrary values.

Readable names for the checks that otherwise end up as inline ``is None``
comparisons in filter lambdas and guard clauses.
"""

from __future__ import annotations

from typing import Any


def is_none(value: Any) -> bool:
    return value is None


def is_not_none(value: Any) -> bool:
    return value is not None


def has_no_value(value: Any) -> bool:
    """``True`` when an optional value is absent."""
    return value is None


def has_no_value_or_default(value: Any, default: Any) -> bool:
    """``True`` when an optional value is absent or equal to *default*.

    Useful for optional numbers where ``0`` means "not set" as well.
    """
    return value is None or value == default

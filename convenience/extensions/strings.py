"""String predicates and small string helpers.

All functions accept ``None`` wherever a string is expected and never raise
for it.  "Empty" throughout means ``None``, ``""`` or whitespace-only.
"""

from __future__ import annotations

import re

from dateutil.parser import parse as parse_date

from convenience.extensions.conversions import to_culture_info, to_nullable_guid

_EMAIL_PATTERN = re.compile(r"\w+([-+.']\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*")
_URL_PATTERN = re.compile(r"http(s)?://([\w-]+\.)+[\w-]+(/[\w\- ./?%&=]*)?")


# ── Checks for empty ────────────────────────────────────────────────────


def has_value(value: str | None) -> bool:
    """``True`` when *value* holds at least one non-whitespace character."""
    return value is not None and value.strip() != ""


def is_empty(value: str | None) -> bool:
    return not has_value(value)


# ── Case checks ─────────────────────────────────────────────────────────


def is_upper(value: str | None) -> bool:
    """``True`` when every letter in *value* is upper case.

    Non-letters are ignored, so ``"A1"`` is upper.  ``None`` and ``""``
    are neither upper nor lower.
    """
    return bool(value) and all(not c.isalpha() or c.isupper() for c in value)


def is_lower(value: str | None) -> bool:
    """Lower-case counterpart of ``is_upper``."""
    return bool(value) and all(not c.isalpha() or c.islower() for c in value)


# ── Null handling ───────────────────────────────────────────────────────


def value_or_default(value: str | None, fallback: str) -> str:
    return fallback if value is None else value


# ── Type checks ─────────────────────────────────────────────────────────


def is_guid(value: str | None) -> bool:
    return to_nullable_guid(value) is not None


def is_date_time(value: str | None) -> bool:
    """``True`` when *value* parses as a date and/or time.

    A bare number such as ``"1"`` or ``"20200101"`` is not a date here,
    although ``dateutil`` would read it as one.
    """
    if is_empty(value) or value.strip().isdigit():
        return False
    try:
        parse_date(value)
    except (ValueError, OverflowError):
        return False
    return True


def is_culture(value: str | None) -> bool:
    """``True`` when *value* names a known culture such as ``en-US``."""
    return to_culture_info(value) is not None


# ── Ensure prefix / suffix ──────────────────────────────────────────────


def ensure_starts_with(value: str | None, prefix: str, ignore_case: bool = True) -> str:
    """Return *value* with *prefix* prepended unless it already starts with it.

    An empty *value* yields *prefix* alone.
    """
    if is_empty(value):
        return prefix
    subject, wanted = (value.casefold(), prefix.casefold()) if ignore_case else (value, prefix)
    return value if subject.startswith(wanted) else prefix + value


def ensure_ends_with(value: str | None, suffix: str, ignore_case: bool = True) -> str:
    """Return *value* with *suffix* appended unless it already ends with it.

    An empty *value* yields *suffix* alone.
    """
    if is_empty(value):
        return suffix
    subject, wanted = (value.casefold(), suffix.casefold()) if ignore_case else (value, suffix)
    return value if subject.endswith(wanted) else value + suffix


# ── Validations ─────────────────────────────────────────────────────────


def is_email(value: str | None) -> bool:
    """``True`` when an e-mail address occurs anywhere in *value*."""
    return has_value(value) and _EMAIL_PATTERN.search(value) is not None


def is_url(value: str | None) -> bool:
    """``True`` when an http(s) URL occurs anywhere in *value*."""
    return has_value(value) and _URL_PATTERN.search(value) is not None

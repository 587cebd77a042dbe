"""Safe string-to-value conversions.

Every ``to_*`` function returns the parsed value, or the caller-supplied
default when the input is ``None`` or does not parse.  None of them raise.

Integer forms accept surrounding whitespace, an optional sign and ASCII
digits, and must fit the target width.  Floating-point and decimal forms
are culture-aware: with the invariant culture (the default) they accept
``,`` group separators and a ``.`` decimal point; with a named culture such
as ``de-DE`` parsing is delegated to ``babel.numbers.parse_decimal``.
"""

from __future__ import annotations

import logging
import math
import re
import struct
import uuid
from decimal import Decimal, InvalidOperation
from typing import TypeVar

from babel import Locale, UnknownLocaleError
from babel.numbers import NumberFormatError, parse_decimal

from convenience.core.config import get_settings

_logger = logging.getLogger("convenience.conversions")

Culture = Locale | str | None

T = TypeVar("T")
D = TypeVar("D")

_INTEGER_PATTERN = re.compile(r"\s*([+-]?)0*([0-9]+)\s*")
_MAX_INTEGER_DIGITS = len(str(2**64 - 1))
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?=\.?[0-9])(?:[0-9][0-9,]*)?(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?"
)
_DECIMAL_PATTERN = re.compile(r"[+-]?(?=\.?[0-9])(?:[0-9][0-9,]*)?(?:\.[0-9]*)?")
_FLOAT_SPECIALS: dict[str, float] = {
    "nan": math.nan,
    "+nan": math.nan,
    "-nan": math.nan,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
    "∞": math.inf,
    "+∞": math.inf,
    "-∞": -math.inf,
}

_HEX = "[0-9a-fA-F]"
_GUID_D = rf"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}"
_GUID_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"{_HEX}{{32}}"),  # N
    re.compile(_GUID_D),  # D
    re.compile(rf"\{{{_GUID_D}\}}"),  # B
    re.compile(rf"\({_GUID_D}\)"),  # P
)
_NON_HEX = re.compile(r"[^0-9a-fA-F]")

_BYTE = (0, 2**8 - 1)
_SBYTE = (-(2**7), 2**7 - 1)
_INT16 = (-(2**15), 2**15 - 1)
_UINT16 = (0, 2**16 - 1)
_INT32 = (-(2**31), 2**31 - 1)
_UINT32 = (0, 2**32 - 1)
_INT64 = (-(2**63), 2**63 - 1)
_UINT64 = (0, 2**64 - 1)

_DECIMAL_MAX = Decimal("79228162514264337593543950335")


# ── Culture ─────────────────────────────────────────────────────────────


def to_culture_info(value: str | None) -> Locale | None:
    """Resolve a culture name such as ``en-US`` to a ``babel.Locale``.

    Returns ``None`` for empty input and for names babel does not know.
    """
    if value is None or not value.strip():
        return None
    try:
        return Locale.parse(value, sep="-")
    except (ValueError, TypeError, UnknownLocaleError):
        _logger.debug("Unknown culture name %r", value)
        return None


def _resolve_culture(culture: Culture) -> Locale | None:
    """Return the locale to parse with, or ``None`` for the invariant culture."""
    if isinstance(culture, Locale):
        return culture
    if culture is None:
        culture = get_settings().DEFAULT_CULTURE
    if not culture.strip():
        return None
    # Unknown names fall back to the invariant culture.
    return to_culture_info(culture)


# ── Parsers ─────────────────────────────────────────────────────────────


def _parse_integer(value: str | None, bounds: tuple[int, int]) -> int | None:
    if value is None:
        return None
    match = _INTEGER_PATTERN.fullmatch(value)
    if match is None:
        return None
    sign, digits = match.groups()
    if len(digits) > _MAX_INTEGER_DIGITS:
        return None
    number = int(sign + digits)
    low, high = bounds
    return number if low <= number <= high else None


def _parse_localized(value: str, locale: Locale) -> Decimal | None:
    try:
        return parse_decimal(value, locale=locale)
    except (NumberFormatError, ValueError, InvalidOperation):
        return None


def _parse_float(value: str | None, culture: Culture) -> float | None:
    if value is None:
        return None
    text = value.strip()
    locale = _resolve_culture(culture)
    if locale is not None:
        number = _parse_localized(text, locale)
        return None if number is None else float(number)

    special = _FLOAT_SPECIALS.get(text.casefold())
    if special is not None:
        return special
    if _FLOAT_PATTERN.fullmatch(text) is None:
        return None
    return float(text.replace(",", ""))


def _parse_decimal(value: str | None, culture: Culture) -> Decimal | None:
    if value is None:
        return None
    text = value.strip()
    locale = _resolve_culture(culture)
    if locale is not None:
        number = _parse_localized(text, locale)
    elif _DECIMAL_PATTERN.fullmatch(text) is None:
        return None
    else:
        number = Decimal(text.replace(",", ""))
    if number is None or not number.is_finite() or number.copy_abs() > _DECIMAL_MAX:
        return None
    return number


def _to_single_precision(number: float | None) -> float | None:
    if number is None:
        return None
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError:
        return None


def _parse_guid(value: str | None) -> uuid.UUID | None:
    if value is None:
        return None
    text = value.strip()
    if not any(pattern.fullmatch(text) for pattern in _GUID_PATTERNS):
        return None
    return uuid.UUID(hex=_NON_HEX.sub("", text))


def _or_default(parsed: T | None, default: D) -> T | D:
    return default if parsed is None else parsed


# ── Integers ────────────────────────────────────────────────────────────


def to_byte(value: str | None, default: int = 0) -> int:
    return _or_default(_parse_integer(value, _BYTE), default)


def to_nullable_byte(value: str | None, default: int | None = None) -> int | None:
    return _or_default(_parse_integer(value, _BYTE), default)


def to_sbyte(value: str | None, default: int = 0) -> int:
    return _or_default(_parse_integer(value, _SBYTE), default)


def to_nullable_sbyte(value: str | None, default: int | None = None) -> int | None:
    return _or_default(_parse_integer(value, _SBYTE), default)


def to_int16(value: str | None, default: int = 0) -> int:
    return _or_default(_parse_integer(value, _INT16), default)


def to_nullable_int16(value: str | None, default: int | None = None) -> int | None:
    return _or_default(_parse_integer(value, _INT16), default)


def to_uint16(value: str | None, default: int = 0) -> int:
    return _or_default(_parse_integer(value, _UINT16), default)


def to_nullable_uint16(value: str | None, default: int | None = None) -> int | None:
    return _or_default(_parse_integer(value, _UINT16), default)


def to_int32(value: str | None, default: int = 0) -> int:
    """Parse a 32-bit signed integer, e.g. ``" -42 "`` → ``-42``."""
    return _or_default(_parse_integer(value, _INT32), default)


def to_nullable_int32(value: str | None, default: int | None = None) -> int | None:
    return _or_default(_parse_integer(value, _INT32), default)


def to_uint32(value: str | None, default: int = 0) -> int:
    return _or_default(_parse_integer(value, _UINT32), default)


def to_nullable_uint32(value: str | None, default: int | None = None) -> int | None:
    return _or_default(_parse_integer(value, _UINT32), default)


def to_int64(value: str | None, default: int = 0) -> int:
    return _or_default(_parse_integer(value, _INT64), default)


def to_nullable_int64(value: str | None, default: int | None = None) -> int | None:
    return _or_default(_parse_integer(value, _INT64), default)


def to_uint64(value: str | None, default: int = 0) -> int:
    return _or_default(_parse_integer(value, _UINT64), default)


def to_nullable_uint64(value: str | None, default: int | None = None) -> int | None:
    return _or_default(_parse_integer(value, _UINT64), default)


# ── Floating point and decimal ──────────────────────────────────────────


def to_double(value: str | None, default: float = 0.0, culture: Culture = None) -> float:
    """Parse a double-precision number.

    *culture* is a culture name, a ``babel.Locale`` or ``None`` for the
    configured ``DEFAULT_CULTURE`` (invariant unless overridden).
    """
    return _or_default(_parse_float(value, culture), default)


def to_nullable_double(
    value: str | None, default: float | None = None, culture: Culture = None
) -> float | None:
    return _or_default(_parse_float(value, culture), default)


def to_single(value: str | None, default: float = 0.0, culture: Culture = None) -> float:
    """Parse a number and round it to single (32-bit) precision.

    Finite values beyond the single-precision range do not parse.
    """
    return _or_default(_to_single_precision(_parse_float(value, culture)), default)


def to_nullable_single(
    value: str | None, default: float | None = None, culture: Culture = None
) -> float | None:
    return _or_default(_to_single_precision(_parse_float(value, culture)), default)


def to_decimal(
    value: str | None, default: Decimal = Decimal(0), culture: Culture = None
) -> Decimal:
    """Parse a ``Decimal``.  Exponents and NaN/Infinity are rejected."""
    return _or_default(_parse_decimal(value, culture), default)


def to_nullable_decimal(
    value: str | None, default: Decimal | None = None, culture: Culture = None
) -> Decimal | None:
    return _or_default(_parse_decimal(value, culture), default)


# ── GUID and boolean ────────────────────────────────────────────────────


def to_guid(value: str | None, default: uuid.UUID) -> uuid.UUID:
    """Parse a GUID in ``N``, ``D``, ``B`` (braces) or ``P`` (parentheses) form."""
    return _or_default(_parse_guid(value), default)


def to_nullable_guid(value: str | None) -> uuid.UUID | None:
    return _parse_guid(value)


def to_boolean(value: str | None, default: bool = False) -> bool:
    """Parse ``"true"``/``"false"`` in any case, ignoring surrounding whitespace."""
    if value is None:
        return default
    text = value.strip().casefold()
    if text == "true":
        return True
    if text == "false":
        return False
    return default

"""Helpers over built-in types.

Safe string conversions, ``None``/emptiness predicates, regex-based tag and
event stripping, conditional collection mutation and a sync-over-async
bridge.
"""

from convenience.core.errors import (
    ConvenienceError,
    DuplicateKeyError,
    MissingArgumentError,
)
from convenience.extensions.collections import (
    add_if_not_none,
    append_if_not_none,
    for_each,
    where_not_none,
)
from convenience.extensions.conversions import (
    to_boolean,
    to_byte,
    to_culture_info,
    to_decimal,
    to_double,
    to_guid,
    to_int16,
    to_int32,
    to_int64,
    to_nullable_byte,
    to_nullable_decimal,
    to_nullable_double,
    to_nullable_guid,
    to_nullable_int16,
    to_nullable_int32,
    to_nullable_int64,
    to_nullable_sbyte,
    to_nullable_single,
    to_nullable_uint16,
    to_nullable_uint32,
    to_nullable_uint64,
    to_sbyte,
    to_single,
    to_uint16,
    to_uint32,
    to_uint64,
)
from convenience.extensions.objects import (
    has_no_value,
    has_no_value_or_default,
    is_none,
    is_not_none,
)
from convenience.extensions.strings import (
    ensure_ends_with,
    ensure_starts_with,
    has_value,
    is_culture,
    is_date_time,
    is_email,
    is_empty,
    is_guid,
    is_lower,
    is_upper,
    is_url,
    value_or_default,
)
from convenience.models.schemas import TagAllowlist
from convenience.security.tag_sanitizer import strip_events, strip_tags
from convenience.sync.bridge import run_sync, shutdown_run_sync

__version__ = "0.1.0"

__all__ = [
    "ConvenienceError",
    "DuplicateKeyError",
    "MissingArgumentError",
    "TagAllowlist",
    "add_if_not_none",
    "append_if_not_none",
    "ensure_ends_with",
    "ensure_starts_with",
    "for_each",
    "has_no_value",
    "has_no_value_or_default",
    "has_value",
    "is_culture",
    "is_date_time",
    "is_email",
    "is_empty",
    "is_guid",
    "is_lower",
    "is_none",
    "is_not_none",
    "is_upper",
    "is_url",
    "run_sync",
    "shutdown_run_sync",
    "strip_events",
    "strip_tags",
    "to_boolean",
    "to_byte",
    "to_culture_info",
    "to_decimal",
    "to_double",
    "to_guid",
    "to_int16",
    "to_int32",
    "to_int64",
    "to_nullable_byte",
    "to_nullable_decimal",
    "to_nullable_double",
    "to_nullable_guid",
    "to_nullable_int16",
    "to_nullable_int32",
    "to_nullable_int64",
    "to_nullable_sbyte",
    "to_nullable_single",
    "to_nullable_uint16",
    "to_nullable_uint32",
    "to_nullable_uint64",
    "to_sbyte",
    "to_single",
    "to_uint16",
    "to_uint32",
    "to_uint64",
    "value_or_default",
    "where_not_none",
]

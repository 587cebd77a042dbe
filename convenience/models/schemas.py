"""Pydantic models shared by the helpers.

``TagAllowlist`` normalizes the allowed-tag argument of ``strip_tags`` once,
whether it arrives as a sequence of prefixes or as a ``;``-joined string.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

ALLOWLIST_SEPARATOR = ";"


def _normalize_entry(entry: Any) -> Any:
    """Drop every ``>`` and surrounding whitespace so ``<a>`` equals ``<a``."""
    if isinstance(entry, str):
        return entry.replace(">", "").strip()
    return entry


class TagAllowlist(BaseModel):
    """Immutable set of tag-name prefixes that survive tag stripping.

    Entries are matched as prefixes of the raw tag text, ignoring case, so
    ``<b`` keeps ``<b>``, ``<B class="x">`` and also ``<br>``.  Closing tags
    are matched by their opening form: ``</b>`` is compared as ``<b>``.
    """

    model_config = ConfigDict(frozen=True)

    tags: tuple[str, ...] = ()

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, str):
            v = v.split(ALLOWLIST_SEPARATOR)
        if isinstance(v, Iterable):
            normalized = (_normalize_entry(entry) for entry in v)
            return tuple(entry for entry in normalized if entry != "")
        return v

    @classmethod
    def from_value(cls, value: TagAllowlist | str | Iterable[str] | None) -> TagAllowlist:
        """Build an allowlist from any of the accepted argument shapes."""
        if isinstance(value, TagAllowlist):
            return value
        return cls(tags=value)

    @property
    def is_empty(self) -> bool:
        return not self.tags

    def allows(self, tag_text: str) -> bool:
        """Return ``True`` when *tag_text* starts with an allowed prefix."""
        raw = tag_text.casefold()
        opening = "<" + raw[2:] if raw.startswith("</") else raw
        return any(
            raw.startswith(prefix) or opening.startswith(prefix)
            for prefix in (tag.casefold() for tag in self.tags)
        )

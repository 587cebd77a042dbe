"""Regex-based markup stripping.

Provides ``strip_events()`` for removing inline event-handler attributes
(``onclick="..."``) from tags, and ``strip_tags()`` for removing tags, either
all of them or all but an allowlist of tag prefixes.

This is a syntactic filter, not an HTML parser.  Anything shaped like
``<...>`` is a tag, whatever its context.  Malformed markup is left as the
patterns find it.  ``None``, empty and whitespace-only input is always
returned unchanged, and no function here raises for ``str | None`` input.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from convenience.extensions.strings import is_empty
from convenience.models.schemas import TagAllowlist

_security_logger = logging.getLogger("convenience.security")

# Any tag-shaped span: "<", one or more non-">" characters, ">".
_TAG_PATTERN = re.compile(r"<[^>]+>")

# A tag prefix, " on<name>=", a quoted value, and the rest of the tag.
# Groups 1 and 3 are kept; the attribute between them is dropped.
_EVENT_PATTERN = re.compile(
    r"(<[\s\S]*?) on.*?\=(['\"])[\s\S]*?\2([\s\S]*?>)",
    re.IGNORECASE,
)

# Elements whose body is script or style source, not text.
_CONTENT_ELEMENT_PATTERN = re.compile(
    r"(<(script|style)\b[^>]*>)[\s\S]*?</\2\s*>",
    re.IGNORECASE,
)


def _excise_event(match: re.Match[str]) -> str:
    return match.group(1) + match.group(3)


def strip_events(text: str | None) -> str | None:
    """Remove inline event-handler attributes, keeping the tags themselves.

    The rewrite is repeated until the text stops changing, so a tag carrying
    several handlers loses all of them.  ``strip_events`` applied to its own
    output is therefore a no-op.
    """
    if is_empty(text):
        return text

    passes = 0
    previous = None
    result = text
    while result != previous:
        previous = result
        result = _EVENT_PATTERN.sub(_excise_event, previous)
        passes += 1

    if result != text:
        _security_logger.debug(
            "SECURITY event=event_attributes_removed passes=%d removed_chars=%d",
            passes,
            len(text) - len(result),
        )
    return result


def _strip_all_tags(text: str) -> str:
    return _TAG_PATTERN.sub("", text)


def _strip_content_elements(text: str, allowlist: TagAllowlist) -> str:
    """Drop disallowed ``<script>``/``<style>`` elements together with their bodies."""

    def evaluate(match: re.Match[str]) -> str:
        if allowlist.allows(match.group(1)):
            return match.group(0)
        _security_logger.debug(
            "SECURITY event=content_element_removed tag=%s", match.group(2).lower()
        )
        return ""

    return _CONTENT_ELEMENT_PATTERN.sub(evaluate, text)


def strip_tags(
    text: str | None,
    allowed_tags: TagAllowlist | str | Iterable[str] | None = None,
) -> str | None:
    """Remove markup tags from *text*.

    Without *allowed_tags* every ``<...>`` span is removed in a single pass.

    With *allowed_tags*, given as a sequence such as ``["<a", "<b>"]`` or a
    ``;``-joined string such as ``"<a;<b>"``, tags starting with an allowed
    prefix are kept verbatim (closing tags included).  Everything else is
    removed, and so are the bodies of disallowed ``<script>`` and ``<style>``
    elements.  Surviving tags are then passed through ``strip_events()``.
    An allowlist that normalizes to nothing behaves like no allowlist.
    Empty entries are dropped rather than matching every tag, so
    ``"<a;"`` keeps ``<a`` tags only.
    """
    if is_empty(text):
        return text

    allowlist = TagAllowlist.from_value(allowed_tags)
    if allowlist.is_empty:
        return _strip_all_tags(text)

    result = _strip_content_elements(text, allowlist)
    result = _TAG_PATTERN.sub(
        lambda match: match.group(0) if allowlist.allows(match.group(0)) else "",
        result,
    )
    return strip_events(result)

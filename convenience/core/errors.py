"""Exception hierarchy for the convenience library.

Most helpers never raise: the sanitizer and the conversions treat bad or
missing input as a pass-through or a default.  The collection helpers are
the exception and report misuse with the errors below.
"""

from typing import Any


class ConvenienceError(Exception):
    """Base exception for all convenience errors."""


class MissingArgumentError(ConvenienceError):
    """Raised when a required argument is ``None``."""

    def __init__(self, argument_name: str) -> None:
        self.argument_name = argument_name
        super().__init__(f"Argument '{argument_name}' must not be None")


class DuplicateKeyError(ConvenienceError):
    """Raised when ``add_if_not_none`` targets a key that already exists.

    Mirrors ``dict`` insertion with "add" semantics: an existing entry is
    never silently overwritten.
    """

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"An item with the key {key!r} has already been added")

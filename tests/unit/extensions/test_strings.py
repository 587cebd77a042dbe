"""Tests for string predicates and helpers."""

import pytest

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


class TestEmptiness:
    """has_value()/is_empty() treat whitespace-only as empty."""

    @pytest.mark.parametrize(
        "value, expected",
        [(None, False), ("", False), ("   ", False), ("\t\n", False), ("abc", True), (" a ", True)],
    )
    def test_has_value(self, value, expected):
        assert has_value(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [(None, True), ("", True), ("   ", True), ("abc", False)],
    )
    def test_is_empty(self, value, expected):
        assert is_empty(value) is expected


class TestCaseChecks:
    @pytest.mark.parametrize(
        "value, expected",
        [("A", True), ("a", False), ("A1", True), ("a1", False), ("ÄÖ", True), ("123", True), ("", False), (None, False)],
    )
    def test_is_upper(self, value, expected):
        assert is_upper(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [("a", True), ("A", False), ("a1", True), ("A1", False), ("äö", True), ("", False), (None, False)],
    )
    def test_is_lower(self, value, expected):
        assert is_lower(value) is expected


class TestValueOrDefault:
    def test_returns_fallback_when_none(self):
        assert value_or_default(None, "fallback") == "fallback"

    def test_returns_value_when_not_none(self):
        assert value_or_default("value", "fallback") == "value"

    def test_empty_string_is_a_value(self):
        assert value_or_default("", "fallback") == ""


class TestTypeChecks:
    @pytest.mark.parametrize(
        "value, expected",
        [("d2719c2e-6c7e-4e2e-8e2e-2e2e2e2e2e2e", True), ("not-a-guid", False), (None, False)],
    )
    def test_is_guid(self, value, expected):
        assert is_guid(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2020-01-01", True),
            ("2020-01-01T12:30:00", True),
            ("March 3, 2021", True),
            ("not-a-date", False),
            ("1", False),
            ("20200101", False),
            ("   ", False),
            (None, False),
        ],
    )
    def test_is_date_time(self, value, expected):
        assert is_date_time(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [("en-US", True), ("de", True), ("not-a-culture", False), (None, False)],
    )
    def test_is_culture(self, value, expected):
        assert is_culture(value) is expected


class TestEnsureStartsWith:
    def test_prepends_missing_prefix(self):
        assert ensure_starts_with("example.com", "https://") == "https://example.com"

    def test_keeps_existing_prefix(self):
        assert ensure_starts_with("https://example.com", "https://") == "https://example.com"

    def test_ignores_case_by_default(self):
        assert ensure_starts_with("HTTPS://example.com", "https://") == "HTTPS://example.com"

    def test_case_sensitive_when_requested(self):
        assert ensure_starts_with("HTTPS://x", "https://", ignore_case=False) == "https://HTTPS://x"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_value_yields_prefix(self, value):
        assert ensure_starts_with(value, "/") == "/"


class TestEnsureEndsWith:
    def test_appends_missing_suffix(self):
        assert ensure_ends_with("path", "/") == "path/"

    def test_keeps_existing_suffix(self):
        assert ensure_ends_with("path/", "/") == "path/"

    def test_ignores_case_by_default(self):
        assert ensure_ends_with("report.PDF", ".pdf") == "report.PDF"

    def test_case_sensitive_when_requested(self):
        assert ensure_ends_with("report.PDF", ".pdf", ignore_case=False) == "report.PDF.pdf"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_value_yields_suffix(self, value):
        assert ensure_ends_with(value, "/") == "/"


class TestValidations:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("user@example.com", True),
            ("first.last+tag@mail.example.org", True),
            ("contact: a.b@c.org please", True),
            ("not an email", False),
            ("user@localhost", False),
            ("   ", False),
            (None, False),
        ],
    )
    def test_is_email(self, value, expected):
        assert is_email(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("https://example.com/path?q=1", True),
            ("http://sub.example.org", True),
            ("see http://a.b for details", True),
            ("ftp://example.com", False),
            ("example.com", False),
            ("http://localhost", False),
            ("http://example.com/some path/a-b.html?x=1&y=%20", True),
            (None, False),
        ],
    )
    def test_is_url(self, value, expected):
        assert is_url(value) is expected

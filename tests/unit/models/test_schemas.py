"""Tests for the TagAllowlist model.

Covers entry normalization, construction from every accepted shape,
immutability and prefix matching.
"""

import pytest
from pydantic import ValidationError

from convenience.models.schemas import TagAllowlist


class TestTagAllowlistNormalization:
    """Entries lose '>' and whitespace; empty entries are dropped."""

    def test_sequence_is_kept_in_order(self):
        assert TagAllowlist(tags=["<a", "<b"]).tags == ("<a", "<b")

    def test_closing_bracket_removed(self):
        assert TagAllowlist(tags=["<a>", "<b>"]).tags == ("<a", "<b")

    def test_joined_string_split_on_semicolon(self):
        assert TagAllowlist(tags="<a;<b>").tags == ("<a", "<b")

    def test_whitespace_around_entries_trimmed(self):
        assert TagAllowlist(tags="<a ; <b").tags == ("<a", "<b")

    def test_empty_entries_dropped(self):
        assert TagAllowlist(tags="<a;;<b;").tags == ("<a", "<b")

    def test_none_gives_empty(self):
        assert TagAllowlist(tags=None).is_empty

    def test_default_is_empty(self):
        assert TagAllowlist().is_empty

    def test_non_string_entry_rejected(self):
        with pytest.raises(ValidationError):
            TagAllowlist(tags=["<a", 3])


class TestTagAllowlistFromValue:
    def test_returns_same_instance_for_model(self):
        allowlist = TagAllowlist(tags=["<a"])
        assert TagAllowlist.from_value(allowlist) is allowlist

    def test_string_and_sequence_are_equal(self):
        assert TagAllowlist.from_value("<a;<b") == TagAllowlist.from_value(["<a", "<b"])

    def test_generator_accepted(self):
        allowlist = TagAllowlist.from_value(tag for tag in ["<a", "<b>"])
        assert allowlist.tags == ("<a", "<b")

    def test_is_frozen(self):
        allowlist = TagAllowlist(tags=["<a"])
        with pytest.raises(ValidationError):
            allowlist.tags = ("<b",)


class TestTagAllowlistAllows:
    """Prefix matching against raw tag text."""

    @pytest.fixture()
    def allowlist(self):
        return TagAllowlist(tags=["<a", "<b"])

    def test_opening_tag(self, allowlist):
        assert allowlist.allows("<a href='#'>")

    def test_closing_tag(self, allowlist):
        assert allowlist.allows("</b>")

    def test_case_insensitive(self, allowlist):
        assert allowlist.allows("<A HREF='#'>")
        assert allowlist.allows("</B>")

    def test_prefix_semantics(self, allowlist):
        assert allowlist.allows("<blockquote>")

    def test_other_tag_rejected(self, allowlist):
        assert not allowlist.allows("<script>")
        assert not allowlist.allows("</i>")

    def test_explicit_closing_entry(self):
        assert TagAllowlist(tags=["</p"]).allows("</p>")

    def test_empty_allowlist_allows_nothing(self):
        assert not TagAllowlist().allows("<a>")

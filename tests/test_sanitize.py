"""Tests for form field sanitizers."""

from __future__ import annotations

import pytest

from form_intake.sanitize import sanitize_email, sanitize_text_field


class TestSanitizeTextField:
    """Tests for sanitize_text_field."""

    def test_plain_text_unchanged(self) -> None:
        assert sanitize_text_field("Bob Hansen") == "Bob Hansen"

    def test_none_and_empty(self) -> None:
        assert sanitize_text_field(None) == ""
        assert sanitize_text_field("") == ""

    def test_strips_tags(self) -> None:
        assert sanitize_text_field("<b>Bob</b>") == "Bob"

    def test_drops_script_content(self) -> None:
        assert sanitize_text_field("<script>alert(1)</script>Hi") == "Hi"

    def test_collapses_whitespace_and_line_breaks(self) -> None:
        assert sanitize_text_field("  12\n\tmm  ") == "12 mm"

    def test_removes_percent_encoded_octets(self) -> None:
        assert sanitize_text_field("100%20mm") == "100mm"

    def test_strips_unclosed_trailing_tag(self) -> None:
        assert sanitize_text_field("Bob <b onclick=x") == "Bob"

    def test_lone_less_than_is_kept(self) -> None:
        """A '<' that does not open a tag is plain text; escaping happens on output."""
        assert sanitize_text_field("5 < 6") == "5 < 6"


class TestSanitizeEmail:
    """Tests for sanitize_email."""

    def test_valid_email(self) -> None:
        assert sanitize_email("bob@example.com") == "bob@example.com"

    def test_surrounding_whitespace(self) -> None:
        assert sanitize_email("  bob@example.com \n") == "bob@example.com"

    @pytest.mark.parametrize(
        "value",
        ["", None, "not-an-email", "a@b.c", "@example.com", "bob@localhost", "<>@example.com"],
    )
    def test_rejects_non_email_shapes(self, value: str | None) -> None:
        assert sanitize_email(value) == ""

    def test_removes_invalid_characters(self) -> None:
        assert sanitize_email("bo b@exa mple.com") == "bob@example.com"

    def test_collapses_domain_dots(self) -> None:
        assert sanitize_email("bob@.example.com.") == "bob@example.com"

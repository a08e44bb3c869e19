"""Unit tests for jira_branch.matcher module."""

from __future__ import annotations

import pytest

from jira_branch.matcher import match_ticket_key


class TestMatchTicketKey:
    """Tests for match_ticket_key."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("ABC-123", "ABC-123"),
            ("feature/ABC-123-fix-bug", "ABC-123"),
            ("  * XYZ-9 notes", "XYZ-9"),
            ("* PROJ-42", "PROJ-42"),
            ("\tSERVER-1234\n", "SERVER-1234"),
            ("snake_case-7", "snake_case-7"),
        ],
    )
    def test_extracts_key(self, line: str, expected: str) -> None:
        """Test that the ticket key is captured from common branch names."""
        assert match_ticket_key(line) == expected

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "main",
            "* master",
            "random text, no ticket",
            "release-v2",
            "-123",
        ],
    )
    def test_no_match(self, line: str) -> None:
        """Test lines without a word-hyphen-digits run."""
        assert match_ticket_key(line) is None

    def test_first_key_wins(self) -> None:
        """Test that only the first key in a line is used."""
        assert match_ticket_key("ABC-1 duplicates DEF-2") == "ABC-1"

    def test_lowercase_key_kept_as_is(self) -> None:
        """Test that keys are not normalized."""
        assert match_ticket_key("abc-12-thing") == "abc-12"

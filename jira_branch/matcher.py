"""Ticket key detection in branch names."""

from __future__ import annotations

import re

# Optional "* " marker as printed by `git branch` for the current branch.
TICKET_KEY_PATTERN = re.compile(r"\s*\*?\s*(\w+-\d+).*")


def match_ticket_key(line: str) -> str | None:
    """Return the first ticket key found in ``line``, or None."""
    match = TICKET_KEY_PATTERN.search(line)
    if not match:
        return None
    return match.group(1)

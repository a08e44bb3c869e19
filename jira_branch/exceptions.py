"""Exceptions raised by jira-branch."""

from __future__ import annotations


class JiraBranchError(Exception):
    """Base class for jira-branch errors."""


class TicketLookupError(JiraBranchError, LookupError):
    """A ticket could not be fetched or understood."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key


class TransportError(TicketLookupError):
    """The tracker could not be reached."""


class HTTPStatusError(TicketLookupError):
    """The tracker answered with something other than 200 OK."""

    def __init__(self, key: str, status_code: int) -> None:
        super().__init__(key, f"unexpected HTTP status {status_code}")
        self.status_code = status_code


class BodyReadError(TicketLookupError):
    """The response body could not be read."""


class DecodeError(TicketLookupError):
    """The response body is not JSON or lacks the expected fields."""


class InputReadError(JiraBranchError):
    """Reading the input lines failed."""

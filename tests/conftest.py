"""Shared test fixtures for jira-branch tests."""

from __future__ import annotations

import json
import threading
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from jira_branch.exceptions import HTTPStatusError, TicketLookupError
from jira_branch.models import OutputOptions, TicketRecord, TrackerSettings
from jira_branch.tracker_clients.abstract_tracker import AbstractTrackerClient

JIRA_URL = "https://jira.example.com"


class StubTrackerClient(AbstractTrackerClient):
    """In-memory tracker that records every lookup."""

    def __init__(
        self,
        settings: TrackerSettings,
        tickets: dict[str, TicketRecord] | None = None,
        errors: dict[str, TicketLookupError] | None = None,
    ) -> None:
        self.settings = settings
        self.tickets = tickets or {}
        self.errors = errors or {}
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def get_ticket(self, key: str) -> TicketRecord:
        with self._lock:
            self.calls.append(key)
        if key in self.errors:
            raise self.errors[key]
        if key not in self.tickets:
            raise HTTPStatusError(key, 404)
        return self.tickets[key]


def make_response(payload: Any, status_code: int = 200) -> MagicMock:
    """Build a mock ``requests.Response`` carrying ``payload`` as a JSON body."""
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.content = json.dumps(payload).encode("utf-8")
    return mock_response


@pytest.fixture
def tracker_settings() -> TrackerSettings:
    """Settings pointing at a fake Jira server."""
    return TrackerSettings(url=f"{JIRA_URL}/")


@pytest.fixture
def plain_options() -> OutputOptions:
    """Uncolored output with URLs."""
    return OutputOptions(color=False, include_url=True)


@pytest.fixture
def open_issue_payload() -> dict[str, Any]:
    """Jira payload for an unresolved issue."""
    return {
        "key": "ABC-123",
        "fields": {
            "status": {"name": "In Progress"},
            "resolution": None,
            "resolutiondate": None,
            "summary": "Fix bug",
            "created": "2024-01-10T09:00:00.000+0000",
            "updated": "2024-01-15T10:30:00.000+0000",
            "watches": {"watchCount": 2, "isWatching": False},
        },
    }


@pytest.fixture
def resolved_issue_payload() -> dict[str, Any]:
    """Jira payload for a resolved issue."""
    return {
        "key": "XYZ-9",
        "fields": {
            "status": {"name": "Done"},
            "resolution": {"name": "Fixed"},
            "resolutiondate": "2024-02-01T12:00:00.000+0000",
            "summary": "Write notes",
        },
    }


@pytest.fixture
def open_ticket() -> TicketRecord:
    return TicketRecord(
        key="ABC-123",
        status="In Progress",
        summary="Fix bug",
        url=f"{JIRA_URL}/browse/ABC-123",
    )


@pytest.fixture
def resolved_ticket() -> TicketRecord:
    return TicketRecord(
        key="XYZ-9",
        status="Done",
        summary="Write notes",
        resolution="Fixed",
        resolution_date="2024-02-01T12:00:00.000+0000",
        url=f"{JIRA_URL}/browse/XYZ-9",
    )


@pytest.fixture
def stub_client(
    tracker_settings: TrackerSettings,
    open_ticket: TicketRecord,
    resolved_ticket: TicketRecord,
) -> StubTrackerClient:
    """Tracker stub that knows ABC-123 and XYZ-9."""
    return StubTrackerClient(
        tracker_settings,
        tickets={"ABC-123": open_ticket, "XYZ-9": resolved_ticket},
    )


@pytest.fixture
def isolated_config(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Keep the user's environment and home config out of CLI runs."""
    for name in ("JIRA_URL", "JIRA_USERNAME", "JIRA_API_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("jira_branch.cli.DEFAULT_CONFIG_PATH", tmp_path / "missing.yaml")
    yield


@pytest.fixture
def response_factory() -> Callable[..., MagicMock]:
    """Factory for mock Jira responses."""
    return make_response


@pytest.fixture
def stub_tracker_cls() -> type[StubTrackerClient]:
    """The stub tracker class, for tests that need custom tickets or errors."""
    return StubTrackerClient

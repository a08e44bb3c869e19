"""Jira issue tracker client."""

from __future__ import annotations

import json
import logging
import typing
from typing import TYPE_CHECKING, Any

import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter

from jira_branch.exceptions import (
    BodyReadError,
    DecodeError,
    HTTPStatusError,
    TransportError,
)
from jira_branch.models import TicketRecord
from jira_branch.tracker_clients.abstract_tracker import AbstractTrackerClient

if TYPE_CHECKING:
    from jira_branch.models import TrackerSettings

logger = logging.getLogger(__name__)

# Lookups run concurrently over one session; keep enough pooled connections
# around that urllib3 does not discard them under load.
DEFAULT_POOL_SIZE = 32


class JiraClient(AbstractTrackerClient):
    """Client for the Jira REST API."""

    def __init__(self, settings: TrackerSettings, pool_size: int = DEFAULT_POOL_SIZE):
        self.settings = settings
        self.session = requests.Session()

        if settings.has_credentials:
            self.session.auth = (settings.username, settings.password)

        adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        self.session.headers.update({"Accept": "application/json"})

    @typing.override
    def get_ticket(self, key: str) -> TicketRecord:
        """Fetch a ticket from Jira."""
        url = self.settings.issue_api_url(key)
        logger.debug(f"Fetching {url}")

        try:
            response = self.session.get(url, stream=True, timeout=self.settings.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(key, str(e)) from e

        try:
            if response.status_code != 200:
                raise HTTPStatusError(key, response.status_code)

            try:
                body = response.content
            except requests.exceptions.RequestException as e:
                raise BodyReadError(key, str(e)) from e

            try:
                issue_data = json.loads(body)
            except ValueError as e:
                raise DecodeError(key, f"invalid JSON: {e}") from e
        finally:
            response.close()

        return self._parse_ticket(key, issue_data)

    def _parse_ticket(self, key: str, issue_data: Any) -> TicketRecord:
        """Build a TicketRecord from an issue payload."""
        try:
            fields = issue_data["fields"]
            ticket_key = issue_data["key"]
            resolution = fields.get("resolution") or {}

            return TicketRecord(
                key=ticket_key,
                status=fields["status"]["name"],
                summary=fields["summary"] or "",
                resolution=resolution.get("name") or "",
                resolution_date=fields.get("resolutiondate") or "",
                url=self.settings.browse_url(ticket_key),
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            raise DecodeError(key, f"unexpected response structure: {e!r}") from e

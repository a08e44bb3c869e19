"""Issue tracker integrations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jira_branch.models import TicketRecord, TrackerSettings


class AbstractTrackerClient(ABC):
    """Base class for issue tracker clients."""

    @abstractmethod
    def __init__(self, settings: TrackerSettings) -> None:
        """Initialize the tracker client."""
        ...

    @abstractmethod
    def get_ticket(self, key: str) -> TicketRecord:
        """Fetch ticket information.

        Raises:
            TicketLookupError: If the ticket cannot be fetched or parsed.
        """
        raise NotImplementedError

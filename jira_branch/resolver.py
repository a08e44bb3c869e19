"""Turn one input line into one output line."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jira_branch.exceptions import HTTPStatusError, TicketLookupError
from jira_branch.formatter import format_description
from jira_branch.matcher import match_ticket_key

if TYPE_CHECKING:
    from rich.text import Text

    from jira_branch.models import OutputOptions
    from jira_branch.tracker_clients.abstract_tracker import AbstractTrackerClient

logger = logging.getLogger(__name__)


def resolve_line(line: str, client: AbstractTrackerClient, options: OutputOptions) -> Text | str:
    """
    Describe the ticket referenced by ``line``.

    Falls back to the stripped line, as a plain str and otherwise untouched,
    when it holds no ticket key or the lookup fails; lookup errors never
    reach the caller.
    """
    line = line.strip()
    key = match_ticket_key(line)
    if key is None:
        return line

    try:
        record = client.get_ticket(key)
    except HTTPStatusError as e:
        logger.debug(f"Skipping {key}: {e}")
        return line
    except TicketLookupError as e:
        logger.warning(f"Error fetching Jira issue {key}: {e}")
        return line

    return format_description(record, options.include_url)

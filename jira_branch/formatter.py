"""One-line ticket descriptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

if TYPE_CHECKING:
    from jira_branch.models import TicketRecord

RESOLVED_STYLE = "green"
UNRESOLVED_STYLE = "red"
URL_STYLE = "cyan"


def format_description(record: TicketRecord, include_url: bool = True) -> Text:
    """
    Describe a ticket as ``"{key} ({state}) {summary} {url}"``.

    The state is the status name, extended with ``": {resolution}"`` once the
    ticket has a resolution date. Styles are attached as spans so the plain
    text is identical with or without color.
    """
    state = record.status
    state_style = UNRESOLVED_STYLE
    if record.is_resolved:
        state += f": {record.resolution}"
        state_style = RESOLVED_STYLE

    url = record.url if include_url else ""

    description = Text.assemble(
        f"{record.key} (",
        (state, state_style),
        f") {record.summary} ",
        (url, URL_STYLE),
    )
    description.rstrip()
    return description


def render_plain(record: TicketRecord, include_url: bool = True) -> str:
    return format_description(record, include_url).plain

"""Annotate branch names with the status of the Jira tickets they mention."""

from jira_branch.dispatcher import Dispatcher, LineSink
from jira_branch.models import Config, TicketRecord, TrackerSettings
from jira_branch.resolver import resolve_line

__version__ = "0.1.0"
__all__ = ["Config", "Dispatcher", "LineSink", "TicketRecord", "TrackerSettings", "resolve_line"]

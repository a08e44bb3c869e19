"""Example usage of jira-branch as a library."""

import sys
from functools import partial
from pathlib import Path

from jira_branch import Dispatcher, LineSink, TrackerSettings, resolve_line
from jira_branch.branch_source import BranchSource
from jira_branch.models import OutputOptions
from jira_branch.tracker_clients.jira_client import JiraClient


# Example 1: Describe a single branch name
def example_single_line() -> None:
    """Look up the ticket behind one branch name."""
    client = JiraClient(TrackerSettings(url="https://jira.mongodb.org/"))
    options = OutputOptions(color=False, include_url=True)

    print(resolve_line("SERVER-1234-fix-replication", client, options))


# Example 2: Annotate every branch of a local repository
def example_local_repo() -> None:
    """Resolve all local branches concurrently, at most 8 lookups at a time."""
    client = JiraClient(TrackerSettings(url="https://jira.mongodb.org/"))
    options = OutputOptions(color=True, include_url=False)

    dispatcher = Dispatcher(
        resolve=partial(resolve_line, client=client, options=options),
        sink=LineSink(sys.stdout, color=options.color),
        max_workers=8,
    )
    dispatcher.run(BranchSource(Path.cwd()).lines())


# Example 3: Authenticated server
def example_authenticated() -> None:
    """Use basic auth with an API token."""
    settings = TrackerSettings(
        url="https://jira.example.com",
        username="me@example.com",
        password="api-token",
        timeout=10.0,
    )
    client = JiraClient(settings)
    ticket = client.get_ticket("ABC-123")
    print(f"{ticket.key}: {ticket.status} ({ticket.url})")


if __name__ == "__main__":
    example_single_line()
    example_local_repo()

"""CLI interface for jira-branch."""

import logging
import sys
from functools import partial
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from jira_branch.branch_source import BranchSource
from jira_branch.config import (
    DEFAULT_CONFIG_PATH,
    ENV_API_TOKEN,
    apply_environment,
    apply_overrides,
    load_config,
    save_config,
)
from jira_branch.dispatcher import Dispatcher, LineSink
from jira_branch.exceptions import JiraBranchError
from jira_branch.models import Config
from jira_branch.resolver import resolve_line
from jira_branch.tracker_clients.jira_client import DEFAULT_POOL_SIZE, JiraClient

app = typer.Typer(
    name="jira-branch",
    help="Annotate branch names with the status of the Jira tickets they mention",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.command()
def resolve(
    url: Annotated[
        str | None, typer.Option("--url", "-u", help="Root URL of the Jira server")
    ] = None,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colors in output")] = False,
    no_links: Annotated[bool, typer.Option("--no-links", help="Hide URLs in output")] = False,
    username: Annotated[str | None, typer.Option("--username", help="Jira username")] = None,
    password: Annotated[
        str | None, typer.Option("--password", help="Jira password or API token")
    ] = None,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Configuration YAML file")
    ] = None,
    repo: Annotated[
        Path | None,
        typer.Option("--repo", "-r", help="Read branches from this git repository instead of stdin"),
    ] = None,
    max_workers: Annotated[
        int | None,
        typer.Option("--max-workers", "-j", min=1, help="Limit concurrent lookups (default: no limit)"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log lookups to stderr")] = False,
) -> None:
    """Describe the Jira ticket of every line read from stdin."""
    _configure_logging(verbose)

    if config and not config.exists():
        err_console.print(f"[red]Error: config file {config} not found[/red]")
        raise typer.Exit(1)

    try:
        settings = load_config(config or DEFAULT_CONFIG_PATH)
        settings = apply_environment(settings)
        settings = apply_overrides(
            settings,
            url=url,
            username=username,
            password=password,
            color=False if no_color else None,
            include_url=False if no_links else None,
            max_workers=max_workers,
        )

        client = JiraClient(settings.tracker, pool_size=settings.max_workers or DEFAULT_POOL_SIZE)
        dispatcher = Dispatcher(
            resolve=partial(resolve_line, client=client, options=settings.output),
            sink=LineSink(sys.stdout, color=settings.output.color),
            max_workers=settings.max_workers,
        )

        lines = BranchSource(repo).lines() if repo else sys.stdin
        dispatcher.run(lines)

    except JiraBranchError as e:
        err_console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(1) from e


@app.command()
def init(
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Output config file")
    ] = DEFAULT_CONFIG_PATH,
    url: Annotated[
        str | None, typer.Option("--url", "-u", help="Root URL of the Jira server")
    ] = None,
    username: Annotated[str | None, typer.Option("--username", help="Jira username")] = None,
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file")] = False,
) -> None:
    """Initialize a configuration file."""
    if output.exists() and not force:
        err_console.print(f"[red]Error: {output} already exists (use --force to overwrite)[/red]")
        raise typer.Exit(1)

    config = apply_overrides(Config(), url=url, username=username)
    try:
        save_config(config, output)
    except OSError as e:
        err_console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(1) from e

    console.print(f"[green]✓ Configuration saved to {output}[/green]")
    console.print(f"\nSet {ENV_API_TOKEN} to authenticate; passwords are not stored.")
    console.print(f"\nRun with: git branch | jira-branch resolve --config {output}")


@app.command()
def version() -> None:
    """Show version information."""
    from jira_branch import __version__

    console.print(f"jira-branch version {__version__}")


if __name__ == "__main__":
    app()

"""Read branch names straight from a local git repository."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import git

from jira_branch.exceptions import InputReadError

logger = logging.getLogger(__name__)


class BranchSource:
    """Lists local branches the way ``git branch`` prints them."""

    def __init__(self, local_path: Path | None = None):
        self.local_path = local_path or Path.cwd()
        self.repo: git.Repo | None = None

    def open(self) -> git.Repo:
        """Open the repository, searching parent directories like git does."""
        try:
            self.repo = git.Repo(self.local_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise InputReadError(f"not a git repository: {self.local_path}") from e
        return self.repo

    def _current_branch(self, repo: git.Repo) -> str | None:
        try:
            return repo.active_branch.name
        except TypeError:
            # Detached HEAD
            return None

    def lines(self) -> Iterator[str]:
        """Yield one ``git branch`` style line per local branch."""
        repo = self.repo or self.open()
        current = self._current_branch(repo)
        logger.debug(f"Listing branches of {repo.working_dir}, current: {current}")

        for head in sorted(repo.heads, key=lambda h: h.name):
            marker = "*" if head.name == current else " "
            yield f"{marker} {head.name}\n"

"""Configuration management."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from jira_branch.exceptions import JiraBranchError
from jira_branch.models import Config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".jira-branch.yaml"

ENV_URL = "JIRA_URL"
ENV_USERNAME = "JIRA_USERNAME"
ENV_API_TOKEN = "JIRA_API_TOKEN"


class ConfigError(JiraBranchError):
    """The configuration file is unreadable or invalid."""


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from YAML file or use defaults."""
    if config_path and config_path.exists():
        try:
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}
            return Config(**config_data)
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
            raise ConfigError(f"invalid config file {config_path}: {e}") from e
    return Config()


def apply_environment(config: Config, environ: Mapping[str, str] | None = None) -> Config:
    """Overlay JIRA_URL, JIRA_USERNAME and JIRA_API_TOKEN onto ``config``."""
    environ = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}
    if environ.get(ENV_URL):
        overrides["url"] = environ[ENV_URL]
    if environ.get(ENV_USERNAME):
        overrides["username"] = environ[ENV_USERNAME]
    if environ.get(ENV_API_TOKEN):
        overrides["password"] = environ[ENV_API_TOKEN]
    return apply_overrides(config, **overrides)


def apply_overrides(
    config: Config,
    *,
    url: str | None = None,
    username: str | None = None,
    password: str | None = None,
    color: bool | None = None,
    include_url: bool | None = None,
    max_workers: int | None = None,
) -> Config:
    """Return a copy of ``config`` with every non-None override applied."""
    tracker = {
        k: v
        for k, v in {"url": url, "username": username, "password": password}.items()
        if v is not None
    }
    output = {
        k: v for k, v in {"color": color, "include_url": include_url}.items() if v is not None
    }

    data = config.model_dump()
    data["tracker"].update(tracker)
    data["output"].update(output)
    if max_workers is not None:
        data["max_workers"] = max_workers
    # Re-validate so the URL normalization runs on overridden values too
    return Config.model_validate(data)


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to YAML file. The password is never written."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude={"tracker": {"password"}})

    with open(config_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

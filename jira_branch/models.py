"""Data models for jira-branch."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_JIRA_URL = "https://jira.mongodb.org/"


class TrackerSettings(BaseModel):
    """Connection settings for the Jira server, shared read-only by all lookups."""

    model_config = ConfigDict(frozen=True)

    url: str = DEFAULT_JIRA_URL
    username: str | None = None
    password: str | None = Field(default=None, repr=False)
    timeout: float | None = None

    @field_validator("url")
    @classmethod
    def strip_trailing_slashes(cls, v: str) -> str:
        """Normalize the base URL so paths can be appended with a single slash."""
        return v.rstrip("/")

    @property
    def has_credentials(self) -> bool:
        """Basic auth is only sent when both parts are present."""
        return bool(self.username) and bool(self.password)

    def issue_api_url(self, key: str) -> str:
        return f"{self.url}/rest/api/latest/issue/{key}"

    def browse_url(self, key: str) -> str:
        return f"{self.url}/browse/{key}"


class TicketRecord(BaseModel):
    """Result of one successful ticket lookup."""

    model_config = ConfigDict(frozen=True)

    key: str
    status: str
    summary: str
    url: str
    resolution: str = ""
    resolution_date: str = ""

    @property
    def is_resolved(self) -> bool:
        return bool(self.resolution_date)


class OutputOptions(BaseModel):
    """Styling mode for a whole run."""

    model_config = ConfigDict(frozen=True)

    color: bool = True
    include_url: bool = True


class Config(BaseModel):
    """Main configuration."""

    tracker: TrackerSettings = Field(default_factory=TrackerSettings)
    output: OutputOptions = Field(default_factory=OutputOptions)
    max_workers: int | None = Field(default=None, ge=1)

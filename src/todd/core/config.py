"""Environment-sourced configuration for Todd."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_SSH_HOST = "github.com"
DEFAULT_COMMAND_TIMEOUT = 600.0
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_CHANGELOG_COMMAND = "make changelog"
DEFAULT_CHANGELOG_FILE = "CHANGES.md"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def init_env(dotenv_path: Optional[str] = None) -> None:
    """Load environment variables from a .env file.

    Args:
        dotenv_path: Optional path to a specific .env file to load.
    """
    load_dotenv(dotenv_path=dotenv_path, override=True)


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{raw}'")


@dataclass
class ToddConfig:
    """Configuration for the release workflows.

    Attributes:
        repo_owner: GitHub owner (user or organization) of the target repository
        repo_name: GitHub repository name
        token: GitHub API token
        slack_channel: Channel identifier notifications are sent to
        slack_token: Slack bot token, enables Slack notifications when set
        api_url: GitHub REST API base URL
        ssh_host: Host used to build the SSH clone URL
        command_timeout: Timeout in seconds for each external command
        http_timeout: Timeout in seconds for each HTTP request
        keep_failed_workspace: Keep the local clone after a failed run
        changelog_command: Command that regenerates the changelog
        changelog_file: Changelog file committed by the prepare-next workflow
    """

    repo_owner: str
    repo_name: str
    token: str
    slack_channel: Optional[str] = None
    slack_token: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    ssh_host: str = DEFAULT_SSH_HOST
    command_timeout: float = DEFAULT_COMMAND_TIMEOUT
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    keep_failed_workspace: bool = False
    changelog_command: str = DEFAULT_CHANGELOG_COMMAND
    changelog_file: str = DEFAULT_CHANGELOG_FILE

    def __post_init__(self):
        """Validate configuration values."""
        missing = []
        if not self.repo_owner:
            missing.append("GITHUB_REPO_OWNER")
        if not self.repo_name:
            missing.append("GITHUB_REPO")
        if not self.token:
            missing.append("GITHUB_TOKEN")
        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                f"Please set these in your environment or .env file."
            )

        if self.command_timeout <= 0:
            raise ValueError("command_timeout must be positive")

        if self.http_timeout <= 0:
            raise ValueError("http_timeout must be positive")

        if not self.changelog_command.strip():
            raise ValueError("changelog_command cannot be empty")

    @classmethod
    def from_env(cls) -> "ToddConfig":
        """Build configuration from environment variables."""
        return cls(
            repo_owner=os.environ.get("GITHUB_REPO_OWNER", ""),
            repo_name=os.environ.get("GITHUB_REPO", ""),
            token=os.environ.get("GITHUB_TOKEN", ""),
            slack_channel=os.environ.get("SLACK_CHANNEL") or None,
            slack_token=os.environ.get("SLACK_TOKEN") or None,
            api_url=os.environ.get("GITHUB_API_URL", DEFAULT_API_URL),
            ssh_host=os.environ.get("GITHUB_SSH_HOST", DEFAULT_SSH_HOST),
            command_timeout=_float_env("TODD_COMMAND_TIMEOUT", DEFAULT_COMMAND_TIMEOUT),
            http_timeout=_float_env("TODD_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            keep_failed_workspace=(
                os.environ.get("TODD_KEEP_FAILED_WORKSPACE", "").lower() in _TRUE_VALUES
            ),
            changelog_command=os.environ.get("TODD_CHANGELOG_COMMAND", DEFAULT_CHANGELOG_COMMAND),
            changelog_file=os.environ.get("TODD_CHANGELOG_FILE", DEFAULT_CHANGELOG_FILE),
        )

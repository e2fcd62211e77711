"""Tests for CLI commands."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from todd.cli.cli import _build_sink, app
from todd.core.config import ToddConfig
from todd.core.notifications import EchoSink, SlackSink

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_log_handlers():
    """Keep CLI runs from attaching handlers to the shared todd logger."""
    with patch("todd.cli.cli.setup_logger") as mock_setup:
        yield mock_setup


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("GITHUB_REPO_OWNER", "acme")
    monkeypatch.setenv("GITHUB_REPO", "widgets")
    monkeypatch.setenv("GITHUB_TOKEN", "test_token")
    monkeypatch.delenv("SLACK_TOKEN", raising=False)


def test_cli_help():
    """Test CLI help command."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Todd CLI" in result.output


def test_cli_version():
    """Test version flag."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


@patch("todd.cli.cli.execute_merge")
def test_merge_command_success(mock_execute, mock_env):
    mock_execute.return_value = (True, "abc12345")

    result = runner.invoke(app, ["merge", "42"])

    assert result.exit_code == 0
    args, kwargs = mock_execute.call_args
    assert args[0] == 42
    assert args[1].repo_owner == "acme"


@patch("todd.cli.cli.execute_merge")
def test_merge_command_failure_exits_nonzero(mock_execute, mock_env):
    mock_execute.return_value = (False, "abc12345")

    result = runner.invoke(app, ["merge", "42"])

    assert result.exit_code == 1


@patch("todd.cli.cli.execute_prepare_next")
def test_prepare_next_command(mock_execute, mock_env):
    mock_execute.return_value = (True, "abc12345")

    result = runner.invoke(app, ["prepare-next"])

    assert result.exit_code == 0
    mock_execute.assert_called_once()


def test_missing_config_exits(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_REPO_OWNER", raising=False)
    monkeypatch.delenv("GITHUB_REPO", raising=False)

    result = runner.invoke(app, ["prepare-next"])

    assert result.exit_code == 1
    assert "GITHUB_TOKEN" in result.output


@patch("todd.cli.cli.execute_merge")
def test_respond_dispatches_merge(mock_execute, mock_env):
    mock_execute.return_value = (True, "abc12345")

    result = runner.invoke(app, ["respond", "merge #15"])

    assert result.exit_code == 0
    assert mock_execute.call_args[0][0] == 15


@patch("todd.cli.cli.execute_prepare_next")
def test_respond_dispatches_prepare_next(mock_execute, mock_env):
    mock_execute.return_value = (True, "abc12345")

    result = runner.invoke(app, ["respond", "prepare next"])

    assert result.exit_code == 0
    mock_execute.assert_called_once()


def test_respond_unrecognized(mock_env):
    result = runner.invoke(app, ["respond", "deploy everything"])

    assert result.exit_code == 1
    assert "unrecognized command" in result.output


def test_build_sink_prefers_slack():
    config = ToddConfig(
        repo_owner="a", repo_name="b", token="c", slack_token="xoxb", slack_channel="C1"
    )
    assert isinstance(_build_sink(config), SlackSink)


def test_build_sink_falls_back_to_echo():
    config = ToddConfig(repo_owner="a", repo_name="b", token="c", slack_channel="C1")
    assert isinstance(_build_sink(config), EchoSink)

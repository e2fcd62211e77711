"""Todd CLI - release-train automation."""

from typing import Optional

import typer
from dotenv import load_dotenv

from todd import __version__
from todd.core.commands import HELP_TEXT, parse_command
from todd.core.config import ToddConfig
from todd.core.github import GitHubClient
from todd.core.notifications import EchoSink, NotificationSink, SlackSink
from todd.core.utils import make_run_id, setup_logger
from todd.core.workflow import execute_merge, execute_prepare_next

# Load environment variables
load_dotenv()

app = typer.Typer(
    invoke_without_command=True,
    no_args_is_help=True,
    help="Todd CLI - merge pull requests into next and prepare releases",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"Todd CLI version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Todd CLI - release-train automation."""
    pass


def _load_config() -> ToddConfig:
    try:
        return ToddConfig.from_env()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _build_sink(config: ToddConfig) -> NotificationSink:
    if config.slack_token and config.slack_channel:
        return SlackSink(config.slack_token, config.slack_channel, timeout=config.http_timeout)
    return EchoSink()


def _close_sink(sink: NotificationSink) -> None:
    if isinstance(sink, SlackSink):
        sink.close()


def _run_merge(number: int, config: ToddConfig) -> bool:
    run_id = make_run_id()
    setup_logger(run_id, "merge")
    sink = _build_sink(config)
    try:
        with GitHubClient.from_config(config) as client:
            success, _ = execute_merge(number, config, client, sink, run_id=run_id)
    finally:
        _close_sink(sink)
    return success


def _run_prepare_next(config: ToddConfig) -> bool:
    run_id = make_run_id()
    setup_logger(run_id, "prepare_next")
    sink = _build_sink(config)
    try:
        with GitHubClient.from_config(config) as client:
            success, _ = execute_prepare_next(config, client, sink, run_id=run_id)
    finally:
        _close_sink(sink)
    return success


@app.command()
def merge(number: int = typer.Argument(..., min=1, help="Pull request number")):
    """Squash-merge a pull request into the next branch.

    Example:
        todd merge 42
    """
    config = _load_config()
    if not _run_merge(number, config):
        raise typer.Exit(1)


@app.command("prepare-next")
def prepare_next():
    """Prepare the next branch for being released.

    Example:
        todd prepare-next
    """
    config = _load_config()
    if not _run_prepare_next(config):
        raise typer.Exit(1)


@app.command()
def respond(text: str):
    """Dispatch operator chat text to the matching workflow.

    Example:
        todd respond "merge #42"
        todd respond "prepare next"
    """
    command = parse_command(text)
    if command is None:
        typer.echo(f"Error: unrecognized command '{text}'", err=True)
        typer.echo(HELP_TEXT, err=True)
        raise typer.Exit(1)

    config = _load_config()
    if command.kind == "merge":
        success = _run_merge(command.number, config)
    else:
        success = _run_prepare_next(config)

    if not success:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()

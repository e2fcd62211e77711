"""Notification sinks that deliver workflow messages to operators."""

import logging
from typing import List, Optional, Protocol

import httpx
import typer

logger = logging.getLogger(__name__)

SLACK_POST_MESSAGE_URL = "https://slack.com/api/chat.postMessage"


class NotificationError(Exception):
    """A notification could not be delivered."""


class NotificationSink(Protocol):
    """Anything that can deliver a human-readable message."""

    def send(self, message: str) -> None: ...


class EchoSink:
    """Print messages to the terminal."""

    def __init__(self, err: bool = False) -> None:
        self._err = err

    def send(self, message: str) -> None:
        typer.echo(message, err=self._err)


class MemorySink:
    """Collect messages in a list, used for dry runs and tests."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def send(self, message: str) -> None:
        self.messages.append(message)


class SlackSink:
    """Post messages to a Slack channel via chat.postMessage."""

    def __init__(
        self,
        token: str,
        channel: str,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._channel = channel
        self._http = http_client or httpx.Client(timeout=timeout)
        self._http.headers["Authorization"] = f"Bearer {token}"

    def send(self, message: str) -> None:
        """Post a message.

        Raises:
            NotificationError: If Slack is unreachable or rejects the message
        """
        try:
            response = self._http.post(
                SLACK_POST_MESSAGE_URL,
                json={"channel": self._channel, "text": message},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise NotificationError(f"Slack request failed: {e}") from e

        payload = response.json()
        if not payload.get("ok"):
            raise NotificationError(f"Slack rejected message: {payload.get('error', 'unknown')}")
        logger.debug("Posted message to Slack channel %s", self._channel)

    def close(self) -> None:
        self._http.close()

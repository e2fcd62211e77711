"""Notification sinks and message text for workflow reporting.

Example:
    from todd.core.notifications import EchoSink, format_failure

    sink = EchoSink()
    sink.send(format_failure("I was unable to set labels on the PR", "Not Found"))
"""

from todd.core.notifications.messages import (
    MERGE_SUCCESS,
    PREPARE_NEXT_ANNOUNCEMENT,
    format_failure,
    merge_announcement,
    prepare_next_success,
)
from todd.core.notifications.sinks import (
    EchoSink,
    MemorySink,
    NotificationError,
    NotificationSink,
    SlackSink,
)

__all__ = [
    "NotificationSink",
    "NotificationError",
    "EchoSink",
    "MemorySink",
    "SlackSink",
    "format_failure",
    "merge_announcement",
    "prepare_next_success",
    "MERGE_SUCCESS",
    "PREPARE_NEXT_ANNOUNCEMENT",
]

"""Shared I/O utilities for workflow steps.

Centralizes repetitive patterns for logging and operator notifications.
"""

import logging
from typing import Optional, Tuple

from todd.core.notifications import NotificationSink

logger = logging.getLogger(__name__)


def emit_notification(sink: Optional[NotificationSink], message: str) -> Tuple[str, str]:
    """Send a message to the notification sink.

    Best-effort: delivery failures are logged and never raised.

    Args:
        sink: Destination, or None to only log
        message: The message text

    Returns:
        Tuple of (status, detail) where status is "success", "skipped" or "error"
    """
    if sink is None:
        logger.info("Notification (no sink): %s", message)
        return "skipped", message
    try:
        sink.send(message)
    except Exception as e:
        detail = f"Failed to send notification: {e}"
        logger.error(detail)
        return "error", detail
    logger.debug("Notification sent: %s", message)
    return "success", message


def log_step_start(step_name: str, run_id: Optional[str] = None) -> None:
    """Log the start of a workflow step.

    Args:
        step_name: Name of the step starting
        run_id: Optional run ID for correlation
    """
    if run_id:
        logger.info(f"\n=== {step_name} [{run_id}] ===")
    else:
        logger.info(f"\n=== {step_name} ===")


def log_step_end(step_name: str, success: bool) -> None:
    """Log the end of a workflow step.

    Args:
        step_name: Name of the step ending
        success: Whether the step succeeded
    """
    if success:
        logger.info(f"{step_name} completed successfully")
    else:
        logger.error(f"{step_name} failed")

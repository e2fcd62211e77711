"""Utility functions for Todd workflows."""

import logging
import os
import sys
import uuid

from todd.core.paths import ToddPaths


def make_run_id() -> str:
    """Generate a short 8-character UUID for run tracking in logs."""
    return str(uuid.uuid4())[:8]


def _get_log_level() -> int:
    """Get log level from TODD_LOG_LEVEL environment variable.

    Supports: DEBUG, INFO, WARNING, ERROR (case-insensitive).
    Defaults to INFO if not set or invalid.

    Returns:
        Logging level constant
    """
    level_str = os.environ.get("TODD_LOG_LEVEL", "INFO").upper()
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
    }
    return level_map.get(level_str, logging.INFO)


def setup_logger(
    run_id: str,
    trigger_type: str = "todd",
    detached_mode: bool = False,
) -> logging.Logger:
    """Set up the ``todd`` logger to write to both console and a per-run file.

    Module loggers (``todd.core...``) propagate to the returned logger, so a
    single call captures the whole run.

    Args:
        run_id: The run ID
        trigger_type: Logical source of the run (e.g., merge, prepare_next)
        detached_mode: If True, disable console handler

    Returns:
        Configured logger instance
    """
    log_dir = ToddPaths.get_logs_dir() / run_id / trigger_type
    log_dir.mkdir(parents=True, exist_ok=True, mode=0o755)
    log_file = log_dir / "execution.log"

    logger = logging.getLogger("todd")
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers to avoid duplicates
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    # File handler - captures everything
    file_handler = logging.FileHandler(log_file, mode="a")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(file_handler)

    if not detached_mode:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(_get_log_level())
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    logger.info(f"Todd logger initialized - ID: {run_id} (detached={detached_mode})")
    logger.debug(f"Log file: {log_file}")

    return logger

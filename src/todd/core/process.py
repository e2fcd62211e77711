"""External command execution for workflow steps."""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union

from todd.core.config import DEFAULT_COMMAND_TIMEOUT
from todd.core.errors import CommandError, ProcessTimeoutError

logger = logging.getLogger(__name__)

# Conventional shell exit status for "command not found"
COMMAND_NOT_FOUND = 127


class ProcessRunner:
    """Run commands with captured output and a bounded timeout."""

    def __init__(self, timeout: float = DEFAULT_COMMAND_TIMEOUT) -> None:
        self.timeout = timeout

    def run(
        self,
        args: Sequence[str],
        cwd: Optional[Union[str, Path]] = None,
    ) -> subprocess.CompletedProcess:
        """Execute a command and return the completed process.

        Args:
            args: Command and arguments, executed without a shell
            cwd: Working directory for the command

        Returns:
            CompletedProcess with text stdout and stderr

        Raises:
            CommandError: If the command exits non-zero or is not installed
            ProcessTimeoutError: If the command exceeds the timeout
        """
        cmd = list(args)
        logger.debug("Executing: %s (cwd=%s)", " ".join(cmd), cwd)

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                cwd=cwd,
            )
        except subprocess.TimeoutExpired:
            logger.error("%s timed out after %s seconds", " ".join(cmd), self.timeout)
            raise ProcessTimeoutError(cmd, self.timeout)
        except FileNotFoundError:
            raise CommandError(cmd, COMMAND_NOT_FOUND, f"{cmd[0]}: command not found")

        if result.returncode != 0:
            logger.debug(
                "%s failed (exit code %d): %s",
                " ".join(cmd),
                result.returncode,
                result.stderr,
            )
            raise CommandError(cmd, result.returncode, result.stderr)

        return result

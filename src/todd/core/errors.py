"""Error taxonomy for Todd workflows.

Remote API failures derive from TransportError, process failures from
CommandError. Workflow steps catch ToddError and turn it into a failed
StepResult, so nothing here is expected to escape a pipeline run.
"""

from typing import Optional, Sequence


class ToddError(Exception):
    """Base class for all Todd errors."""


# ============================================================================
# Remote host errors
# ============================================================================


class TransportError(ToddError):
    """Network, authentication or unexpected HTTP failure from GitHub.

    Attributes:
        message: Short summary, taken from the API error payload when available
        status_code: HTTP status code, None for network-level failures
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(TransportError):
    """The requested pull request does not exist."""


class ConflictError(TransportError):
    """A pull request already exists for the head/base pair."""


class MergeConflictError(TransportError):
    """GitHub refused to merge the pull request."""


class AmbiguousStateError(ToddError):
    """Remote state violates a workflow precondition (e.g. two open next PRs)."""


# ============================================================================
# Process errors
# ============================================================================


class CommandError(ToddError):
    """External command exited with a non-zero status.

    Attributes:
        command: The argument list that was executed
        returncode: Process exit status
        stderr: Captured standard error
    """

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"{' '.join(self.command)} failed (exit code {returncode})"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)


class CloneError(CommandError):
    """git clone failed."""


class ProcessTimeoutError(CommandError):
    """External command did not finish within its timeout."""

    def __init__(self, command: Sequence[str], timeout: float) -> None:
        self.timeout = timeout
        super().__init__(command, returncode=-1, stderr=f"timed out after {timeout:g} seconds")


class CleanupError(ToddError):
    """Workspace teardown failed. Logged only, never propagated."""

"""Abstract base class for workflow steps and run state."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from todd.core.models import PullRequestRef

if TYPE_CHECKING:
    from todd.core.workflow.types import StepResult
    from todd.core.workspace import Workspace


@dataclass
class WorkflowContext:
    """Shared state passed between the steps of one run.

    Attributes:
        run_id: Run ID for log correlation
        owner: Repository owner
        repo: Repository name
        pr_number: Pull request the run operates on, once known
        pull_request: The fetched pull request, if a step fetched it
        workspace: Local clone, set by the step that creates it
        data: Dictionary to store intermediate step data
    """

    run_id: str
    owner: str
    repo: str
    pr_number: Optional[int] = None
    pull_request: Optional[PullRequestRef] = None
    workspace: Optional["Workspace"] = None
    data: Dict[str, Any] = field(default_factory=dict)


class WorkflowStep(ABC):
    """Abstract base class for workflow steps.

    Each step implements the run() method to perform its work.
    Steps can be marked as critical (default) or best-effort.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging/identification."""
        ...

    @property
    def is_critical(self) -> bool:
        """Whether failure of this step should abort the workflow.

        Returns:
            True if step failure should abort workflow (default).
            False for best-effort steps that continue on failure.
        """
        return True

    @property
    def failure_message(self) -> str:
        """Operator-facing description used when the step fails."""
        return f"I wasn't able to finish '{self.name}'"

    @abstractmethod
    def run(self, context: WorkflowContext) -> "StepResult":
        """Execute the step logic.

        Args:
            context: Shared workflow context with state and data

        Returns:
            StepResult with success status, optional data, and optional error message
        """
        ...

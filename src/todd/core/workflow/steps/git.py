"""Git steps that run inside the run's workspace."""

import logging
from typing import Callable

from todd.core.errors import CommandError
from todd.core.workflow.shared import BASE_BRANCH, NEXT_BRANCH
from todd.core.workflow.step_base import WorkflowContext, WorkflowStep
from todd.core.workflow.types import StepResult
from todd.core.workspace import Workspace, ssh_remote_url

logger = logging.getLogger(__name__)

WorkspaceFactory = Callable[[], Workspace]


def _missing_workspace() -> StepResult:
    return StepResult.fail("no workspace has been cloned for this run")


class CloneRepositoryStep(WorkflowStep):
    """Allocate a workspace and clone the repository over SSH."""

    def __init__(self, workspace_factory: WorkspaceFactory, ssh_host: str = "github.com") -> None:
        self._workspace_factory = workspace_factory
        self._ssh_host = ssh_host

    @property
    def name(self) -> str:
        return "Cloning repository"

    @property
    def failure_message(self) -> str:
        return "I wasn't able to clone the github repo"

    def run(self, context: WorkflowContext) -> StepResult:
        workspace = self._workspace_factory()
        # Recorded before cloning so the finalizer removes partial clones
        context.workspace = workspace

        try:
            workspace.clone(ssh_remote_url(context.owner, context.repo, self._ssh_host))
        except CommandError as e:
            logger.error("Clone failed: %s", e)
            return StepResult.from_error(e)

        return StepResult.ok(None)


class CheckoutNextStep(WorkflowStep):
    """Check out the next branch."""

    @property
    def name(self) -> str:
        return f"Checking out {NEXT_BRANCH}"

    @property
    def failure_message(self) -> str:
        return f"I wasn't able to checkout the {NEXT_BRANCH} branch"

    def run(self, context: WorkflowContext) -> StepResult:
        if context.workspace is None:
            return _missing_workspace()
        try:
            context.workspace.run(["git", "checkout", NEXT_BRANCH])
        except CommandError as e:
            logger.error("Checkout failed: %s", e)
            return StepResult.from_error(e)
        return StepResult.ok(None)


class SyncWithMasterStep(WorkflowStep):
    """Rebase next onto master and force-push it.

    next is a disposable integration branch, so rewriting its remote history
    is expected. A failed push after a successful rebase is not undone.
    """

    @property
    def name(self) -> str:
        return f"Rebasing {NEXT_BRANCH} onto {BASE_BRANCH}"

    @property
    def failure_message(self) -> str:
        return f"I wasn't able to rebase {NEXT_BRANCH} branch onto {BASE_BRANCH}"

    def run(self, context: WorkflowContext) -> StepResult:
        if context.workspace is None:
            return _missing_workspace()
        try:
            context.workspace.run(["git", "rebase", BASE_BRANCH])
            context.workspace.run(["git", "push", "origin", NEXT_BRANCH, "--force"])
        except CommandError as e:
            logger.error("Rebase onto %s failed: %s", BASE_BRANCH, e)
            return StepResult.from_error(e)
        return StepResult.ok(None)

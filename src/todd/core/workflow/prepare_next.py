"""Prepare-next workflow: get the next branch ready to be released.

1. Find the open next pull request (fail if there is more than one)
2. Open one if none exists
3. Clone the repository into a fresh workspace
4. Check out next
5. Rebase next onto master and force-push
6. Regenerate the changelog as a single commit
7. Label the pull request Frozen and Needs Canary

The workspace is removed when the run ends, whatever the outcome.
"""

import logging
from typing import List, Optional

from todd.core.config import ToddConfig
from todd.core.github import GitHubClient
from todd.core.notifications import (
    PREPARE_NEXT_ANNOUNCEMENT,
    NotificationSink,
    prepare_next_success,
)
from todd.core.process import ProcessRunner
from todd.core.workflow.pipeline import Finalizer, WorkflowRunner
from todd.core.workflow.step_base import WorkflowContext, WorkflowStep
from todd.core.workflow.steps import (
    CheckoutNextStep,
    CloneRepositoryStep,
    EnsurePullRequestOpenStep,
    FindOpenPullRequestStep,
    LabelPullRequestStep,
    RegenerateChangelogStep,
    SyncWithMasterStep,
)
from todd.core.workflow.steps.git import WorkspaceFactory
from todd.core.workflow.types import Failure
from todd.core.workspace import Workspace

logger = logging.getLogger(__name__)


def default_workspace_factory(config: ToddConfig) -> WorkspaceFactory:
    """Create workspaces under the Todd data dir using the configured timeout."""
    runner = ProcessRunner(timeout=config.command_timeout)
    return lambda: Workspace.create(runner=runner)


def make_workspace_finalizer(keep_failed_workspace: bool = False) -> Finalizer:
    """Build the finalizer that removes the run's workspace.

    Args:
        keep_failed_workspace: Leave the clone in place after a failed run
            so it can be inspected
    """

    def destroy_workspace(context: WorkflowContext, failure: Optional[Failure]) -> None:
        workspace = context.workspace
        if workspace is None:
            return
        if failure is not None and keep_failed_workspace:
            logger.warning("Keeping workspace %s for inspection", workspace.path)
            return
        workspace.destroy()

    return destroy_workspace


def get_prepare_next_pipeline(
    client: GitHubClient,
    config: ToddConfig,
    workspace_factory: Optional[WorkspaceFactory] = None,
) -> List[WorkflowStep]:
    """Create the prepare-next step pipeline.

    Returns:
        List of WorkflowStep instances in execution order
    """
    if workspace_factory is None:
        workspace_factory = default_workspace_factory(config)

    return [
        FindOpenPullRequestStep(client),
        EnsurePullRequestOpenStep(client),
        CloneRepositoryStep(workspace_factory, ssh_host=config.ssh_host),
        CheckoutNextStep(),
        SyncWithMasterStep(),
        RegenerateChangelogStep(config.changelog_command, config.changelog_file),
        LabelPullRequestStep(client),
    ]


def build_prepare_next_runner(
    client: GitHubClient,
    config: ToddConfig,
    sink: Optional[NotificationSink] = None,
    workspace_factory: Optional[WorkspaceFactory] = None,
) -> WorkflowRunner:
    return WorkflowRunner(
        get_prepare_next_pipeline(client, config, workspace_factory),
        sink=sink,
        finalizer=make_workspace_finalizer(config.keep_failed_workspace),
        success_message=lambda context: prepare_next_success(context.pr_number),
        announcement=PREPARE_NEXT_ANNOUNCEMENT,
    )

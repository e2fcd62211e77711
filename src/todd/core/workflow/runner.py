"""Main workflow orchestration entry points.

This module provides the public API for running the merge and prepare-next
workflows for a configured repository.
"""

from typing import Optional, Tuple

from todd.core.config import ToddConfig
from todd.core.github import GitHubClient
from todd.core.notifications import NotificationSink
from todd.core.utils import make_run_id
from todd.core.workflow.merge import build_merge_runner
from todd.core.workflow.prepare_next import build_prepare_next_runner
from todd.core.workflow.step_base import WorkflowContext
from todd.core.workflow.steps.git import WorkspaceFactory


def execute_merge(
    number: int,
    config: ToddConfig,
    client: GitHubClient,
    sink: Optional[NotificationSink] = None,
    run_id: Optional[str] = None,
) -> Tuple[bool, str]:
    """Squash-merge pull request ``number`` into next.

    Args:
        number: Pull request number
        config: Repository configuration
        client: GitHub client shared by the process
        sink: Destination for operator messages
        run_id: Optional run ID (auto-generated if omitted)

    Returns:
        Tuple of (success, run_id)
    """
    run_id = run_id or make_run_id()
    context = WorkflowContext(
        run_id=run_id,
        owner=config.repo_owner,
        repo=config.repo_name,
        pr_number=number,
    )
    _, failure = build_merge_runner(client, number, sink).run(context)
    return failure is None, run_id


def execute_prepare_next(
    config: ToddConfig,
    client: GitHubClient,
    sink: Optional[NotificationSink] = None,
    workspace_factory: Optional[WorkspaceFactory] = None,
    run_id: Optional[str] = None,
) -> Tuple[bool, str]:
    """Prepare the next branch for release.

    Args:
        config: Repository configuration
        client: GitHub client shared by the process
        sink: Destination for operator messages
        workspace_factory: Optional factory for the run's workspace
        run_id: Optional run ID (auto-generated if omitted)

    Returns:
        Tuple of (success, run_id)
    """
    run_id = run_id or make_run_id()
    context = WorkflowContext(run_id=run_id, owner=config.repo_owner, repo=config.repo_name)
    runner = build_prepare_next_runner(client, config, sink, workspace_factory)
    _, failure = runner.run(context)
    return failure is None, run_id

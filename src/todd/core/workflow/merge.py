"""Merge workflow: squash-merge a pull request into next.

No local workspace is involved, so there is no finalizer.
"""

from typing import List, Optional

from todd.core.github import GitHubClient
from todd.core.notifications import MERGE_SUCCESS, NotificationSink, merge_announcement
from todd.core.workflow.pipeline import WorkflowRunner
from todd.core.workflow.step_base import WorkflowStep
from todd.core.workflow.steps import (
    CommentAcknowledgeStep,
    FetchPullRequestStep,
    SquashMergeStep,
)


def get_merge_pipeline(client: GitHubClient) -> List[WorkflowStep]:
    """Create the merge step pipeline."""
    return [
        FetchPullRequestStep(client),
        SquashMergeStep(client),
        CommentAcknowledgeStep(client),
    ]


def build_merge_runner(
    client: GitHubClient,
    number: int,
    sink: Optional[NotificationSink] = None,
) -> WorkflowRunner:
    return WorkflowRunner(
        get_merge_pipeline(client),
        sink=sink,
        success_message=lambda context: MERGE_SUCCESS,
        announcement=merge_announcement(number),
    )

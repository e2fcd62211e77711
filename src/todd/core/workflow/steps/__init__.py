"""Workflow step implementations.

This package contains the individual WorkflowStep classes the merge and
prepare-next pipelines are built from.
"""

from todd.core.workflow.steps.changelog import RegenerateChangelogStep
from todd.core.workflow.steps.git import CheckoutNextStep, CloneRepositoryStep, SyncWithMasterStep
from todd.core.workflow.steps.label import LabelPullRequestStep
from todd.core.workflow.steps.merge import (
    CommentAcknowledgeStep,
    FetchPullRequestStep,
    SquashMergeStep,
)
from todd.core.workflow.steps.open_pr import EnsurePullRequestOpenStep, FindOpenPullRequestStep

__all__ = [
    "FindOpenPullRequestStep",
    "EnsurePullRequestOpenStep",
    "CloneRepositoryStep",
    "CheckoutNextStep",
    "SyncWithMasterStep",
    "RegenerateChangelogStep",
    "LabelPullRequestStep",
    "FetchPullRequestStep",
    "SquashMergeStep",
    "CommentAcknowledgeStep",
]

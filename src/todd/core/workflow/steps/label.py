"""Label the release pull request."""

import logging
from typing import AbstractSet

from todd.core.errors import TransportError
from todd.core.github import GitHubClient
from todd.core.workflow.shared import RELEASE_LABELS
from todd.core.workflow.step_base import WorkflowContext, WorkflowStep
from todd.core.workflow.types import StepResult

logger = logging.getLogger(__name__)


class LabelPullRequestStep(WorkflowStep):
    """Mark the next pull request as frozen and awaiting canary."""

    def __init__(self, client: GitHubClient, labels: AbstractSet[str] = RELEASE_LABELS) -> None:
        self._client = client
        self._labels = frozenset(labels)

    @property
    def name(self) -> str:
        return "Labelling pull request"

    @property
    def failure_message(self) -> str:
        return "I was unable to set labels on the PR"

    def run(self, context: WorkflowContext) -> StepResult:
        if context.pr_number is None:
            return StepResult.fail("no pull request number recorded for this run")
        try:
            self._client.add_labels(context.owner, context.repo, context.pr_number, self._labels)
        except TransportError as e:
            logger.error("Adding labels to #%d failed: %s", context.pr_number, e)
            return StepResult.from_error(e)

        logger.info("Labelled #%d with %s", context.pr_number, ", ".join(sorted(self._labels)))
        return StepResult.ok(None)

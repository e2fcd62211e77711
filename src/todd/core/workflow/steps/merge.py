"""Steps of the merge workflow."""

import logging

from todd.core.errors import MergeConflictError, NotFoundError, TransportError
from todd.core.github import GitHubClient
from todd.core.workflow.shared import MERGE_COMMENT, MERGE_METHOD, NEXT_BRANCH
from todd.core.workflow.step_base import WorkflowContext, WorkflowStep
from todd.core.workflow.types import StepResult

logger = logging.getLogger(__name__)


class FetchPullRequestStep(WorkflowStep):
    """Fetch the pull request and check that it targets next."""

    def __init__(self, client: GitHubClient) -> None:
        self._client = client

    @property
    def name(self) -> str:
        return "Fetching pull request"

    @property
    def failure_message(self) -> str:
        return "I wasn't able to get any information on that PR"

    def run(self, context: WorkflowContext) -> StepResult:
        if context.pr_number is None:
            return StepResult.fail("no pull request number given")

        try:
            pull = self._client.get_pull_request(context.owner, context.repo, context.pr_number)
        except NotFoundError as e:
            logger.error("Pull request #%d not found", context.pr_number)
            return StepResult.from_error(e)
        except TransportError as e:
            logger.error("Fetching pull request #%d failed: %s", context.pr_number, e)
            return StepResult.from_error(e)

        if not pull.base_branch:
            return StepResult.fail(
                f"pull request #{pull.number} has no base branch",
                user_message="I wasn't able to get the base of that PR",
            )

        if pull.base_branch != NEXT_BRANCH:
            logger.warning(
                "Refusing to merge #%d into %s, only %s is allowed",
                pull.number,
                pull.base_branch,
                NEXT_BRANCH,
            )
            return StepResult.fail(
                f"branch is {pull.base_branch}",
                user_message=f"I can't merge PRs into anything but the {NEXT_BRANCH} branch",
                error_type="PolicyViolation",
            )

        context.pull_request = pull
        return StepResult.ok(pull)


class SquashMergeStep(WorkflowStep):
    """Squash-merge the pull request."""

    def __init__(self, client: GitHubClient, method: str = MERGE_METHOD) -> None:
        self._client = client
        self._method = method

    @property
    def name(self) -> str:
        return "Squash merging pull request"

    @property
    def failure_message(self) -> str:
        return "the merge failed"

    def run(self, context: WorkflowContext) -> StepResult:
        if context.pr_number is None:
            return StepResult.fail("no pull request number given")
        try:
            self._client.merge_pull_request(
                context.owner, context.repo, context.pr_number, method=self._method
            )
        except MergeConflictError as e:
            logger.error("GitHub refused to merge #%d: %s", context.pr_number, e)
            return StepResult.from_error(e)
        except TransportError as e:
            logger.error("Merging #%d failed: %s", context.pr_number, e)
            return StepResult.from_error(e)
        return StepResult.ok(None)


class CommentAcknowledgeStep(WorkflowStep):
    """Leave an acknowledgement comment on the merged pull request."""

    def __init__(self, client: GitHubClient, body: str = MERGE_COMMENT) -> None:
        self._client = client
        self._body = body

    @property
    def name(self) -> str:
        return "Commenting on pull request"

    @property
    def is_critical(self) -> bool:
        # The merge already happened
        return False

    def run(self, context: WorkflowContext) -> StepResult:
        if context.pr_number is None:
            return StepResult.fail("no pull request number given")
        try:
            self._client.add_comment(context.owner, context.repo, context.pr_number, self._body)
        except TransportError as e:
            logger.warning("Commenting on #%d failed: %s", context.pr_number, e)
            return StepResult.from_error(e)
        return StepResult.ok(None)

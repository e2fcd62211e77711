"""Steps that locate or open the release pull request for next."""

import logging

from todd.core.errors import AmbiguousStateError, TransportError
from todd.core.github import GitHubClient
from todd.core.workflow.shared import BASE_BRANCH, NEXT_BRANCH, NEXT_PR_TITLE
from todd.core.workflow.step_base import WorkflowContext, WorkflowStep
from todd.core.workflow.types import StepResult

logger = logging.getLogger(__name__)


class FindOpenPullRequestStep(WorkflowStep):
    """Find the open pull request for next, if there is one.

    More than one open pull request means the release train is ambiguous and
    the step fails rather than picking one.
    """

    def __init__(self, client: GitHubClient) -> None:
        self._client = client

    @property
    def name(self) -> str:
        return "Finding open next pull request"

    @property
    def failure_message(self) -> str:
        return "I was unable to search existing PRs"

    def run(self, context: WorkflowContext) -> StepResult:
        try:
            pulls = self._client.list_open_pull_requests(context.owner, context.repo, NEXT_BRANCH)
        except TransportError as e:
            logger.error("Listing open pull requests failed: %s", e)
            return StepResult.from_error(e)

        if len(pulls) > 1:
            numbers = ", ".join(f"#{pr.number}" for pr in pulls)
            error = AmbiguousStateError(f"open pull requests for {NEXT_BRANCH}: {numbers}")
            logger.error(str(error))
            return StepResult.from_error(
                error,
                user_message=(
                    f"I found more than one open PR for {NEXT_BRANCH}, I'm not sure what to do"
                ),
            )

        if not pulls:
            logger.info("No open pull request for %s", NEXT_BRANCH)
            return StepResult.ok(None)

        context.pr_number = pulls[0].number
        logger.info("Found open pull request #%d for %s", context.pr_number, NEXT_BRANCH)
        return StepResult.ok(pulls[0])


class EnsurePullRequestOpenStep(WorkflowStep):
    """Open a next -> master pull request when none was found."""

    def __init__(self, client: GitHubClient) -> None:
        self._client = client

    @property
    def name(self) -> str:
        return "Ensuring next pull request is open"

    @property
    def failure_message(self) -> str:
        return f"I was unable to open a PR for {NEXT_BRANCH}"

    def run(self, context: WorkflowContext) -> StepResult:
        if context.pr_number is not None:
            logger.debug("Pull request #%d already open, skipping creation", context.pr_number)
            return StepResult.ok(None)

        try:
            pull = self._client.create_pull_request(
                context.owner,
                context.repo,
                title=NEXT_PR_TITLE,
                head=NEXT_BRANCH,
                base=BASE_BRANCH,
                maintainer_can_modify=True,
            )
        except TransportError as e:
            logger.error("Opening pull request failed: %s", e)
            return StepResult.from_error(e)

        context.pr_number = pull.number
        return StepResult.ok(pull)

"""Regenerate changelog step implementation."""

import logging

from todd.core.config import DEFAULT_CHANGELOG_COMMAND, DEFAULT_CHANGELOG_FILE
from todd.core.errors import CommandError
from todd.core.workflow.changelog import regenerate_changelog
from todd.core.workflow.step_base import WorkflowContext, WorkflowStep
from todd.core.workflow.types import StepResult

logger = logging.getLogger(__name__)


class RegenerateChangelogStep(WorkflowStep):
    """Regenerate the changelog on next as a single commit."""

    def __init__(
        self,
        command: str = DEFAULT_CHANGELOG_COMMAND,
        changelog_file: str = DEFAULT_CHANGELOG_FILE,
    ) -> None:
        self._command = command
        self._changelog_file = changelog_file

    @property
    def name(self) -> str:
        return "Regenerating changelog"

    @property
    def failure_message(self) -> str:
        return "I wasn't able to generate the changelog"

    def run(self, context: WorkflowContext) -> StepResult:
        if context.workspace is None:
            return StepResult.fail("no workspace has been cloned for this run")
        try:
            parent = regenerate_changelog(
                context.workspace,
                command=self._command,
                changelog_file=self._changelog_file,
            )
        except CommandError as e:
            logger.error("Changelog regeneration failed: %s", e)
            return StepResult.from_error(e)

        context.data["changelog_parent"] = parent
        return StepResult.ok(parent)

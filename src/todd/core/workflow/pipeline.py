"""Pipeline orchestrator for workflow execution."""

import logging
from typing import Callable, List, Optional, Tuple

from todd.core.notifications import NotificationSink, format_failure
from todd.core.workflow.step_base import WorkflowContext, WorkflowStep
from todd.core.workflow.types import Failure, StepResult
from todd.core.workflow.workflow_io import emit_notification, log_step_end, log_step_start

logger = logging.getLogger(__name__)

Finalizer = Callable[[WorkflowContext, Optional[Failure]], None]
SuccessMessage = Callable[[WorkflowContext], str]


class WorkflowRunner:
    """Orchestrates execution of workflow steps in sequence.

    Runs steps linearly, stopping on critical step failures and
    continuing past best-effort step failures. The finalizer runs exactly
    once per run whatever the outcome, and exactly one success or failure
    message reaches the sink.
    """

    def __init__(
        self,
        steps: List[WorkflowStep],
        sink: Optional[NotificationSink] = None,
        finalizer: Optional[Finalizer] = None,
        success_message: Optional[SuccessMessage] = None,
        announcement: Optional[str] = None,
    ) -> None:
        """Initialize the runner with a list of steps.

        Args:
            steps: Ordered list of workflow steps to execute
            sink: Destination for operator messages
            finalizer: Cleanup called with the final context and failure, if any
            success_message: Builds the message sent when every step succeeds
            announcement: Message sent before the first step runs
        """
        self._steps = steps
        self._sink = sink
        self._finalizer = finalizer
        self._success_message = success_message
        self._announcement = announcement

    def run(self, context: WorkflowContext) -> Tuple[WorkflowContext, Optional[Failure]]:
        """Execute all workflow steps in sequence.

        Args:
            context: Initial run state, mutated by the steps

        Returns:
            Tuple of (final context, Failure or None on success)
        """
        logger.info(f"Run ID: {context.run_id}")
        logger.info(f"Repository: {context.owner}/{context.repo}")

        if self._announcement:
            emit_notification(self._sink, self._announcement)

        failure: Optional[Failure] = None
        try:
            failure = self._run_steps(context)
        finally:
            self._finalize(context, failure)

        if failure is not None:
            emit_notification(self._sink, format_failure(failure.user_message, failure.cause))
            return context, failure

        logger.info("\n=== Workflow completed successfully ===")
        if self._success_message is not None:
            emit_notification(self._sink, self._success_message(context))
        return context, None

    def _run_steps(self, context: WorkflowContext) -> Optional[Failure]:
        for step in self._steps:
            log_step_start(step.name, run_id=context.run_id)

            try:
                result = step.run(context)
            except Exception as e:
                logger.exception(f"Unexpected error in step '{step.name}'")
                result = StepResult.fail(
                    f"{type(e).__name__}: {e}",
                    error_type=type(e).__name__,
                )

            if result.success:
                log_step_end(step.name, result.success)
                continue

            if step.is_critical:
                log_step_end(step.name, result.success)
                error_msg = f"Critical step '{step.name}' failed"
                if result.error:
                    error_msg += f": {result.error}"
                logger.error(f"{error_msg}, aborting workflow")
                return Failure(
                    step_name=step.name,
                    user_message=result.user_message or step.failure_message,
                    cause=result.error or "unknown error",
                    error_type=result.metadata.get("error_type"),
                )

            warning_msg = f"Best-effort step '{step.name}' failed"
            if result.error:
                warning_msg += f": {result.error}"
            logger.warning(f"{warning_msg}, continuing")

        return None

    def _finalize(self, context: WorkflowContext, failure: Optional[Failure]) -> None:
        if self._finalizer is None:
            return
        try:
            self._finalizer(context, failure)
        except Exception as e:
            logger.error(f"Finalizer failed for run {context.run_id}: {e}")

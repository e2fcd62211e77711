"""Workflow orchestration package for Todd.

This package provides a step pipeline architecture for the release
workflows, where each step implements a common WorkflowStep interface.

Main components:
- runner: Entry points (execute_merge, execute_prepare_next)
- pipeline: WorkflowRunner orchestrator
- step_base: Abstract WorkflowStep base class and WorkflowContext
- steps/: Individual step implementations
- merge, prepare_next: The two concrete pipelines
- changelog: Two-pass changelog regeneration
- types: StepResult and Failure
- workflow_io: Logging and notification helpers for steps
"""

from todd.core.workflow.changelog import regenerate_changelog
from todd.core.workflow.merge import build_merge_runner, get_merge_pipeline
from todd.core.workflow.pipeline import WorkflowRunner
from todd.core.workflow.prepare_next import (
    build_prepare_next_runner,
    get_prepare_next_pipeline,
    make_workspace_finalizer,
)
from todd.core.workflow.runner import execute_merge, execute_prepare_next
from todd.core.workflow.step_base import WorkflowContext, WorkflowStep
from todd.core.workflow.types import Failure, StepResult

__all__ = [
    # Entry points
    "execute_merge",
    "execute_prepare_next",
    # Pipeline components
    "WorkflowRunner",
    "WorkflowStep",
    "WorkflowContext",
    "get_merge_pipeline",
    "get_prepare_next_pipeline",
    "build_merge_runner",
    "build_prepare_next_runner",
    "make_workspace_finalizer",
    "regenerate_changelog",
    # Result types
    "StepResult",
    "Failure",
]

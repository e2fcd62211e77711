"""Unified result types for workflow orchestration.

Every step returns a StepResult; the runner turns the first critical
failed result into a Failure that is reported to the operator.
"""

from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel

# Generic type parameter for StepResult data payload
T = TypeVar("T")


class StepResult(BaseModel, Generic[T]):
    """Generic result type for workflow steps.

    Attributes:
        success: Whether the step completed successfully
        data: Optional typed payload specific to the step
        error: Optional error detail if step failed
        user_message: Optional operator-facing description of what went wrong,
            overriding the step's default failure message
        metadata: Additional context (e.g., error_type)
    """

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    user_message: Optional[str] = None
    metadata: Dict[str, Any] = {}

    @classmethod
    def ok(cls, data: Optional[T] = None, **metadata: Any) -> "StepResult[T]":
        """Create a successful result with data.

        Args:
            data: The success payload
            **metadata: Additional metadata key-value pairs

        Returns:
            StepResult instance marked as successful
        """
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def fail(
        cls,
        error: str,
        user_message: Optional[str] = None,
        **metadata: Any,
    ) -> "StepResult[T]":
        """Create a failed result with error message.

        Args:
            error: Description of the failure
            user_message: Optional operator-facing message for this failure
            **metadata: Additional metadata key-value pairs

        Returns:
            StepResult instance marked as failed
        """
        return cls(
            success=False,
            data=None,
            error=error,
            user_message=user_message,
            metadata=metadata,
        )

    @classmethod
    def from_error(
        cls,
        error: Exception,
        user_message: Optional[str] = None,
    ) -> "StepResult[T]":
        """Create a failed result from a raised error, recording its type."""
        return cls.fail(str(error), user_message=user_message, error_type=type(error).__name__)


class Failure(BaseModel):
    """Why a workflow run halted.

    Attributes:
        step_name: Name of the step that failed
        user_message: What Todd was unable to do, in operator terms
        cause: Short error detail (GitHub message, command stderr)
        error_type: Class name of the underlying error, if any
    """

    step_name: str
    user_message: str
    cause: str
    error_type: Optional[str] = None

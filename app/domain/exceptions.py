"""Domain exceptions for the task tracker.

Defines domain-level exceptions that represent business rule violations and
classified persistence failures. These exceptions are independent of
infrastructure concerns. Presentation layer maps them to HTTP responses in
exception handlers.
"""

from typing import Any


class TaskTrackerException(Exception):
    """Base exception for all task tracker errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error envelope (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskTrackerException):
    """Raised when input validation fails (e.g. empty title)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(TaskTrackerException):
    """Raised when a requested resource is not found."""

    def __init__(
        self, resource_type: str, resource_id: str, message: str | None = None
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task').
            resource_id: The ID that was not found.
            message: Optional message; defaults to '<type> not found: <id>'.
        """
        super().__init__(
            message or f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class TaskNotFoundException(ResourceNotFoundException):
    """Raised when no task matches the requested id."""

    def __init__(self, task_id: str) -> None:
        super().__init__("task", task_id, f"Task with id {task_id} not found")


class TaskWriteException(TaskTrackerException):
    """Raised when the store fails while creating or saving a task."""

    def __init__(self, message: str, operation: str) -> None:
        """Initialize with message and the write operation that failed.

        Args:
            message: Underlying error message, or the operation's fallback.
            operation: 'create' or 'update'.
        """
        super().__init__(message, "TASK_WRITE_FAILED", {"operation": operation})


class TaskRetrievalException(TaskTrackerException):
    """Raised when the store fails while counting or fetching tasks."""

    def __init__(self, message: str = "Failed to fetch tasks") -> None:
        super().__init__(message, "TASK_RETRIEVAL_FAILED")

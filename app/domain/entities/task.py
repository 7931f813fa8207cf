"""Task domain entity.

Represents a tracked unit of work, independent of persistence. The storage
row lives in app.infrastructure.persistence.models.task and is mapped
explicitly by the task repository.
"""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import TaskStatus
from app.domain.exceptions import ValidationException


@dataclass
class TaskEntity:
    """Domain entity for a task.

    id, created_at and updated_at are None on a draft and are assigned by the
    store on the first save. Validation runs on construction.
    """

    title: str
    description: str
    status: TaskStatus = TaskStatus.PENDING
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate task business rules. Raises ValidationException if invalid."""
        if not self.title:
            raise ValidationException("Task title is required", field="title")
        if not self.description:
            raise ValidationException(
                "Task description is required", field="description"
            )
        if not isinstance(self.status, TaskStatus):
            self.status = TaskStatus(self.status)

    @property
    def is_persisted(self) -> bool:
        """Return whether the store has assigned an id to this task."""
        return self.id is not None

    def complete(self, at: datetime) -> None:
        """Set status to COMPLETED and refresh updated_at.

        Not guarded: completing an already completed task succeeds again.

        Args:
            at: Timezone-aware UTC timestamp of the completion.
        """
        self.status = TaskStatus.COMPLETED
        self.updated_at = at

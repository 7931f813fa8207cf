"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain types only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from app.domain.enums import TaskStatus

if TYPE_CHECKING:
    from app.domain.entities.task import TaskEntity
    from app.domain.value_objects.task_query import TaskOrder, TaskPredicate


class ITaskRepository(Protocol):
    """Protocol for task storage (DIP)."""

    def create(
        self,
        title: str,
        description: str,
        status: TaskStatus = TaskStatus.PENDING,
    ) -> TaskEntity:
        """Build a draft task in memory (no I/O)."""

    async def save(self, task: TaskEntity) -> TaskEntity:
        """Durably store a task; assigns id and timestamps on first save."""

    async def find_one(self, task_id: str) -> TaskEntity | None:
        """Return task by id, or None."""

    async def find(
        self,
        predicate: TaskPredicate,
        order: TaskOrder,
        limit: int,
    ) -> tuple[list[TaskEntity], int]:
        """Return up to limit matching tasks in order, and the count of all matches."""

"""DTOs for task listing (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.entities.task import TaskEntity


@dataclass(frozen=True)
class TaskPage:
    """Most recent open tasks plus the count of every matching task.

    total can exceed len(tasks); callers use it to detect truncation.
    """

    tasks: list[TaskEntity] = field(default_factory=list)
    total: int = 0

"""Query value objects for task listing.

A TaskPredicate is an OR of TaskClauses; each clause is an AND of its set
conditions. Storage adapters translate these into their own query language
(see TaskRepository.find for the SQLAlchemy translation).
"""

from dataclasses import dataclass, field
from enum import Enum

from app.domain.enums import TaskStatus


class TaskSortField(str, Enum):
    """Task attribute a listing is ordered by (the Task column of the same name)."""

    CREATED_AT = "created_at"


@dataclass(frozen=True)
class TaskClause:
    """AND of conditions on a single task. Unset conditions are not applied.

    title_contains and description_contains are case-insensitive literal
    substring matches.
    """

    status_not: TaskStatus | None = None
    title_contains: str | None = None
    description_contains: str | None = None


@dataclass(frozen=True)
class TaskPredicate:
    """OR of clauses. An empty predicate matches every task."""

    clauses: tuple[TaskClause, ...] = field(default_factory=tuple)

    @classmethod
    def open_tasks(cls, search: str | None = None) -> "TaskPredicate":
        """Build the listing predicate: not completed, optionally matching search.

        With a non-empty search, a task matches when its title OR its
        description contains the search text (case-insensitive); both branches
        keep the not-completed condition.
        """
        if not search:
            return cls((TaskClause(status_not=TaskStatus.COMPLETED),))
        return cls(
            (
                TaskClause(status_not=TaskStatus.COMPLETED, title_contains=search),
                TaskClause(
                    status_not=TaskStatus.COMPLETED, description_contains=search
                ),
            )
        )


@dataclass(frozen=True)
class TaskOrder:
    """Sort order for a task listing."""

    by: TaskSortField = TaskSortField.CREATED_AT
    descending: bool = True

    @classmethod
    def newest_first(cls) -> "TaskOrder":
        return cls(TaskSortField.CREATED_AT, descending=True)

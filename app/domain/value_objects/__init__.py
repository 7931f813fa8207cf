"""Domain value objects (immutable, no identity)."""

from app.domain.value_objects.task_query import (
    TaskClause,
    TaskOrder,
    TaskPredicate,
    TaskSortField,
)

__all__ = ["TaskClause", "TaskOrder", "TaskPredicate", "TaskSortField"]

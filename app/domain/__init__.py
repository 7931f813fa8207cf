"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import TaskEntity
from app.domain.enums import TaskStatus
from app.domain.exceptions import (
    ResourceNotFoundException,
    TaskNotFoundException,
    TaskRetrievalException,
    TaskTrackerException,
    TaskWriteException,
    ValidationException,
)
from app.domain.value_objects import (
    TaskClause,
    TaskOrder,
    TaskPredicate,
    TaskSortField,
)

__all__ = [
    # Entities
    "TaskEntity",
    # Enums
    "TaskStatus",
    # Exceptions
    "ResourceNotFoundException",
    "TaskNotFoundException",
    "TaskRetrievalException",
    "TaskTrackerException",
    "TaskWriteException",
    "ValidationException",
    # Value objects
    "TaskClause",
    "TaskOrder",
    "TaskPredicate",
    "TaskSortField",
]

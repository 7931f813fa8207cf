"""Domain enumerations for the task tracker.

Enums represent fixed sets of domain values (e.g. task status).
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status.

    Every new task starts as PENDING and the complete operation moves it to
    COMPLETED. IN_PROGRESS, OVERDUE and DELETED are reserved: no operation
    produces them yet, but stored rows may carry them.
    """

    PENDING = "Pending"
    IN_PROGRESS = "In-progress"
    COMPLETED = "Completed"
    OVERDUE = "Overdue"
    DELETED = "Deleted"

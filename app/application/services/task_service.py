"""Task application service: create, complete and list tasks.

Owns the task lifecycle rules and classifies persistence failures:
not-found errors pass through untouched, other errors during create/save
become TaskWriteException, and errors while listing become
TaskRetrievalException.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.task import TaskPage
from app.core.constants import (
    CREATE_TASK_FAILED,
    FETCH_TASKS_FAILED,
    RECENT_TASKS_LIMIT,
    UPDATE_TASK_FAILED,
)
from app.domain.entities.task import TaskEntity
from app.domain.enums import TaskStatus
from app.domain.exceptions import (
    ResourceNotFoundException,
    TaskNotFoundException,
    TaskRetrievalException,
    TaskWriteException,
)
from app.domain.value_objects.task_query import TaskOrder, TaskPredicate
from app.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ITaskRepository

logger = logging.getLogger(__name__)


def _message(exc: Exception, fallback: str) -> str:
    """Return the exception's own message, or fallback when it has none."""
    return str(exc) or fallback


class TaskService:
    """Create, complete and list tasks against an ITaskRepository."""

    def __init__(self, task_repo: ITaskRepository) -> None:
        self._task_repo = task_repo

    async def create_task(self, title: str, description: str) -> TaskEntity:
        """Create a task. Status is always PENDING.

        Raises:
            ResourceNotFoundException: Passed through from the store unchanged.
            TaskWriteException: Any other failure while building or saving.
        """
        try:
            draft = self._task_repo.create(
                title=title,
                description=description,
                status=TaskStatus.PENDING,
            )
            task = await self._task_repo.save(draft)
        except ResourceNotFoundException:
            raise
        except Exception as exc:
            logger.warning("Task create failed: %s", exc)
            raise TaskWriteException(
                _message(exc, CREATE_TASK_FAILED), operation="create"
            ) from exc
        logger.info("Task created: %s", task.id)
        return task

    async def complete_task(self, task_id: str) -> TaskEntity:
        """Mark a task COMPLETED and refresh updated_at.

        Completing an already completed task succeeds again.

        Raises:
            TaskNotFoundException: If no task has this id (nothing is written).
            TaskWriteException: Any other failure while loading or saving.
        """
        try:
            task = await self._task_repo.find_one(task_id)
            if task is None:
                raise TaskNotFoundException(task_id)
            task.complete(at=utc_now())
            saved = await self._task_repo.save(task)
        except ResourceNotFoundException:
            raise
        except Exception as exc:
            logger.warning("Task %s update failed: %s", task_id, exc)
            raise TaskWriteException(
                _message(exc, UPDATE_TASK_FAILED), operation="update"
            ) from exc
        logger.info("Task completed: %s", task_id)
        return saved

    async def list_tasks(self, search: str | None = None) -> TaskPage:
        """Return the most recent open tasks, optionally filtered by search.

        Completed tasks are never listed. A non-empty search matches title or
        description as a case-insensitive literal substring. Results are newest
        first and capped at RECENT_TASKS_LIMIT; total counts every match.

        Raises:
            TaskRetrievalException: Any failure while counting or fetching.
        """
        try:
            tasks, total = await self._task_repo.find(
                TaskPredicate.open_tasks(search),
                TaskOrder.newest_first(),
                RECENT_TASKS_LIMIT,
            )
        except Exception as exc:
            logger.warning("Task listing failed: %s", exc)
            raise TaskRetrievalException(_message(exc, FETCH_TASKS_FAILED)) from exc
        return TaskPage(tasks=tasks, total=total)

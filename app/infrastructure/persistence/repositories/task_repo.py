"""Task repository: SQLAlchemy implementation of ITaskRepository.

Maps between TaskEntity (domain) and the Task row explicitly; callers never
see ORM objects.
"""

from __future__ import annotations

from sqlalchemy import ColumnElement, and_, func, or_, select, true
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities.task import TaskEntity
from app.domain.enums import TaskStatus
from app.domain.exceptions import TaskNotFoundException
from app.domain.value_objects.task_query import TaskClause, TaskOrder, TaskPredicate
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc, utc_now


def _to_entity(t: Task) -> TaskEntity:
    """Map Task row to TaskEntity."""
    return TaskEntity(
        id=t.id,
        title=t.title,
        description=t.description,
        status=TaskStatus(t.status),
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
    )


def _apply_to_row(task: TaskEntity, row: Task) -> None:
    """Copy mutable entity fields onto a row. id and created_at never change."""
    row.title = task.title
    row.description = task.description
    row.status = task.status.value
    if task.updated_at is not None:
        row.updated_at = task.updated_at


def _clause_condition(clause: TaskClause) -> ColumnElement[bool]:
    """Translate one AND clause. Substring matches are literal (autoescaped)."""
    conditions: list[ColumnElement[bool]] = []
    if clause.status_not is not None:
        conditions.append(Task.status != clause.status_not.value)
    if clause.title_contains is not None:
        conditions.append(Task.title.icontains(clause.title_contains, autoescape=True))
    if clause.description_contains is not None:
        conditions.append(
            Task.description.icontains(clause.description_contains, autoescape=True)
        )
    if not conditions:
        return true()
    return and_(*conditions)


def _predicate_condition(predicate: TaskPredicate) -> ColumnElement[bool]:
    """Translate an OR-of-AND predicate into a WHERE condition."""
    if not predicate.clauses:
        return true()
    return or_(*(_clause_condition(c) for c in predicate.clauses))


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    def create(
        self,
        title: str,
        description: str,
        status: TaskStatus = TaskStatus.PENDING,
    ) -> TaskEntity:
        """Build a draft task. No I/O; id and timestamps are assigned by save."""
        return TaskEntity(title=title, description=description, status=status)

    async def save(self, task: TaskEntity) -> TaskEntity:
        """Insert a draft or update a persisted task; return the stored state.

        On insert, created_at and updated_at are set to the same instant.

        Raises:
            TaskNotFoundException: If a persisted task's row no longer exists.
        """
        if not task.is_persisted:
            now = utc_now()
            row = Task(
                title=task.title,
                description=task.description,
                status=task.status.value,
                created_at=now,
                updated_at=now,
            )
            created = await self.insert(row)
            return _to_entity(created)
        assert task.id is not None
        row = await super().get_by_id(task.id)
        if row is None:
            raise TaskNotFoundException(task.id)
        _apply_to_row(task, row)
        updated = await self.update(row)
        return _to_entity(updated)

    async def find_one(self, task_id: str) -> TaskEntity | None:
        """Return task by id, or None."""
        row = await super().get_by_id(task_id)
        return _to_entity(row) if row else None

    async def find(
        self,
        predicate: TaskPredicate,
        order: TaskOrder,
        limit: int,
    ) -> tuple[list[TaskEntity], int]:
        """Return up to limit matching tasks in order, plus the total match count."""
        condition = _predicate_condition(predicate)
        total = (
            await self.db.execute(
                select(func.count()).select_from(Task).where(condition)
            )
        ).scalar_one()
        column = getattr(Task, order.by.value)
        result = await self.db.execute(
            select(Task)
            .where(condition)
            .order_by(column.desc() if order.descending else column.asc())
            .limit(limit)
        )
        return [_to_entity(t) for t in result.scalars().all()], total

"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories and services.
Routes depend only on these dependencies, not on infrastructure directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.task_service import TaskService
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import TaskRepository


async def get_task_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskRepository:
    """Task repository for read operations."""
    return TaskRepository(db)


async def get_task_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskRepository:
    """Task repository for create/update (commits at end of request)."""
    return TaskRepository(db)


async def get_task_service(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo)],
) -> TaskService:
    """Task service for listing."""
    return TaskService(task_repo)


async def get_task_service_for_write(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo_for_write)],
) -> TaskService:
    """Task service for create and complete."""
    return TaskService(task_repo)

"""Application services: task lifecycle."""

from app.application.services.task_service import TaskService

__all__ = ["TaskService"]

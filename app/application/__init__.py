"""Application layer: interfaces, DTOs and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from app.application.dtos import TaskPage
from app.application.interfaces import ITaskRepository
from app.application.services import TaskService

__all__ = ["ITaskRepository", "TaskPage", "TaskService"]

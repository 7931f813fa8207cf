"""Application DTOs (no ORM dependency)."""

from app.application.dtos.task import TaskPage

__all__ = ["TaskPage"]

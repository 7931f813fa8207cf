"""Application interfaces (ports) implemented by infrastructure."""

from app.application.interfaces.repositories import ITaskRepository

__all__ = ["ITaskRepository"]

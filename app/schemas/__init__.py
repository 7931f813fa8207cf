"""API request/response schemas (Pydantic)."""

from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.schemas.task import (
    ErrorResponse,
    TaskCompletedResponse,
    TaskCreatedResponse,
    TaskCreateRequest,
    TaskListData,
    TaskListResponse,
    TaskResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "TaskCompletedResponse",
    "TaskCreateRequest",
    "TaskCreatedResponse",
    "TaskListData",
    "TaskListResponse",
    "TaskResponse",
]

"""Task API schemas (request bodies and response envelopes)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import TaskStatus


class TaskCreateRequest(BaseModel):
    """Request body for POST /task/create-post. Any status sent is ignored."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str = Field(..., min_length=1)


class TaskResponse(BaseModel):
    """Task as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime


class TaskCreatedResponse(BaseModel):
    """Response for POST /task/create-post."""

    message: str = "Task Created"
    task: TaskResponse


class TaskListData(BaseModel):
    """Most recent open tasks and the count of all matches."""

    tasks: list[TaskResponse]
    total: int


class TaskListResponse(BaseModel):
    """Response for GET /task/all."""

    message: str = "Tasks fetched successfully"
    data: TaskListData


class TaskCompletedResponse(BaseModel):
    """Response for PATCH /task/{task_id}."""

    message: str = "Task completed successfully"
    data: TaskResponse


class ErrorResponse(BaseModel):
    """Error envelope returned for every failure."""

    error: str
    message: str
    details: dict | list = Field(default_factory=dict)

"""Task API: thin routes delegating to TaskService.

Domain exceptions raised by the service are mapped to status codes by the
central exception handlers (not-found 404, write failure 400, retrieval
failure 500).
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_task_service, get_task_service_for_write
from app.application.services.task_service import TaskService
from app.core.limiter import limit_writes
from app.schemas.task import (
    ErrorResponse,
    TaskCompletedResponse,
    TaskCreatedResponse,
    TaskCreateRequest,
    TaskListData,
    TaskListResponse,
    TaskResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/create-post",
    response_model=TaskCreatedResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
@limit_writes
async def create_task(
    request: Request,
    body: TaskCreateRequest,
    service: Annotated[TaskService, Depends(get_task_service_for_write)],
) -> TaskCreatedResponse:
    """Create a task. The new task is always Pending."""
    task = await service.create_task(title=body.title, description=body.description)
    return TaskCreatedResponse(task=TaskResponse.model_validate(task))


@router.get(
    "/all",
    response_model=TaskListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_tasks(
    service: Annotated[TaskService, Depends(get_task_service)],
    search: str | None = Query(None, description="Case-insensitive text matched in title or description"),
    page: int | None = Query(None, ge=1, description="Accepted for compatibility; not applied"),
    limit: int | None = Query(None, ge=1, description="Accepted for compatibility; not applied"),
) -> TaskListResponse:
    """List the 5 most recent open tasks, optionally filtered by search."""
    if page is not None or limit is not None:
        logger.debug("Ignoring pagination params page=%s limit=%s", page, limit)
    result = await service.list_tasks(search=search)
    return TaskListResponse(
        data=TaskListData(
            tasks=[TaskResponse.model_validate(t) for t in result.tasks],
            total=result.total,
        )
    )


@router.patch(
    "/{task_id}",
    response_model=TaskCompletedResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
@limit_writes
async def complete_task(
    request: Request,
    task_id: str,
    service: Annotated[TaskService, Depends(get_task_service_for_write)],
) -> TaskCompletedResponse:
    """Mark a task Completed."""
    task = await service.complete_task(task_id)
    return TaskCompletedResponse(data=TaskResponse.model_validate(task))

"""Response bodies for the liveness and readiness probes."""

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """GET /health: the process is up. Never touches the task store."""

    status: Literal["ok"] = "ok"


class ReadinessResponse(BaseModel):
    """GET /health/ready: SELECT 1 against the task store succeeded."""

    status: Literal["ok"] = "ok"


class ReadinessErrorResponse(BaseModel):
    """GET /health/ready (503): the task store did not answer."""

    status: Literal["not_ready"] = "not_ready"
    message: str

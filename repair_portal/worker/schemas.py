# repair_portal/worker/schemas.py
from pydantic import BaseModel, ConfigDict, Field

from repair_portal.core.constants import Specialization


class WorkerIn(BaseModel):
    """Untrusted body of POST /api/workers."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    specialization: str | None = None


class WorkerCreate(BaseModel):
    name: str = Field(..., min_length=1)
    specialization: Specialization


class WorkerOut(BaseModel):
    id: str
    name: str
    specialization: Specialization

    model_config = {"from_attributes": True}


class WorkerListOut(BaseModel):
    workers: list[WorkerOut]


class WorkerCreatedOut(BaseModel):
    status: str = "created"
    message: str = "Worker created successfully"
    worker: WorkerOut


class WorkerDeletedOut(BaseModel):
    status: str = "deleted"
    message: str = "Worker removed successfully"

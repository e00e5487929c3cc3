# repair_portal/ticket/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from repair_portal.core.constants import IssueType, Priority, TicketStatus
from repair_portal.worker.schemas import WorkerOut


class RepairRequestIn(BaseModel):
    """Untrusted body of POST /api/repair-requests; absent fields stay None."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    address: str | None = None
    issue_type: str | None = Field(default=None, alias="issueType")
    priority: str | None = None
    description: str | None = None


class TicketCreate(BaseModel):
    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    issue_type: IssueType
    priority: Priority
    description: str = Field(..., min_length=1)


class AssignIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    worker_id: str | None = Field(default=None, alias="workerId")


class TicketOut(BaseModel):
    id: str
    name: str
    address: str
    issue_type: IssueType
    priority: Priority
    description: str
    status: TicketStatus
    assigned_worker: WorkerOut | None = None
    created_at: str

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TicketListOut(BaseModel):
    tickets: list[TicketOut]


class TicketDetailOut(BaseModel):
    ticket: TicketOut


class TicketCreatedOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "created"
    message: str = "Repair request submitted successfully"
    ticket_id: str = Field(..., alias="ticketId")


class TicketAssignedOut(BaseModel):
    status: str = "updated"
    message: str
    ticket: TicketOut

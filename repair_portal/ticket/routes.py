# repair_portal/ticket/routes.py
from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from repair_portal.core.database import get_db
from repair_portal.core.errors import NotFound, parse_body
from repair_portal.core.logging_config import audit
from repair_portal.core.validation import validate_repair_request
from repair_portal.ticket.schemas import (
    AssignIn,
    RepairRequestIn,
    TicketAssignedOut,
    TicketCreate,
    TicketCreatedOut,
    TicketDetailOut,
    TicketListOut,
    TicketOut,
)
from repair_portal.ticket.services import TicketStore
from repair_portal.worker.routes import get_worker_store
from repair_portal.worker.services import WorkerStore

router = APIRouter(prefix="/api/repair-requests", tags=["Repair Requests"])


def get_ticket_store(
    db: Session = Depends(get_db),
    workers: WorkerStore = Depends(get_worker_store),
) -> TicketStore:
    return TicketStore(db, workers)


@router.post("", response_model=TicketCreatedOut, status_code=201)
def create(
    body: dict[str, Any] | None = Body(default=None),
    store: TicketStore = Depends(get_ticket_store),
):
    payload = parse_body(RepairRequestIn, body, validate_repair_request)

    ticket = store.create(
        TicketCreate(
            name=payload.name.strip(),
            address=payload.address.strip(),
            issue_type=payload.issue_type,
            priority=payload.priority,
            description=payload.description.strip(),
        )
    )
    audit(
        "repair_request_created",
        ticketId=ticket.id,
        name=ticket.name,
        address=ticket.address,
        issueType=ticket.issue_type,
        priority=ticket.priority,
        timestamp=ticket.created_at,
    )
    return TicketCreatedOut(ticket_id=ticket.id)


@router.get("", response_model=TicketListOut)
def list_all(store: TicketStore = Depends(get_ticket_store)):
    return {"tickets": [TicketOut.model_validate(t) for t in store.list_all()]}


@router.get("/{ticket_id}", response_model=TicketDetailOut)
def get(ticket_id: str, store: TicketStore = Depends(get_ticket_store)):
    ticket = store.get_by_id(ticket_id)
    if not ticket:
        raise NotFound("Ticket not found")
    return {"ticket": TicketOut.model_validate(ticket)}


@router.patch("/{ticket_id}/assign", response_model=TicketAssignedOut)
def assign(
    ticket_id: str,
    payload: AssignIn | None = None,
    store: TicketStore = Depends(get_ticket_store),
):
    ticket = store.assign(ticket_id, payload.worker_id if payload else None)
    worker = ticket.assigned_worker
    audit(
        "ticket_assigned",
        ticketId=ticket.id,
        workerId=worker["id"],
        workerName=worker["name"],
    )
    return {
        "message": f"Ticket assigned to {worker['name']}",
        "ticket": TicketOut.model_validate(ticket),
    }

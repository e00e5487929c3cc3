# repair_portal/ticket/services.py
from sqlalchemy.orm import Session

from repair_portal.core.constants import TicketStatus
from repair_portal.core.database import unit_of_work
from repair_portal.core.errors import MissingParameter, NotFound
from repair_portal.core.logging_config import utc_timestamp
from repair_portal.ticket.models import Ticket
from repair_portal.ticket.schemas import TicketCreate
from repair_portal.worker.models import new_id
from repair_portal.worker.services import WorkerStore


class TicketStore:
    """Repair tickets in submission order.

    Tickets are only ever created or assigned; there is no delete. Two
    assignments racing on the same ticket resolve as last write wins.
    """

    def __init__(self, db: Session, workers: WorkerStore):
        self.db = db
        self.workers = workers

    def create(self, payload: TicketCreate) -> Ticket:
        db_ticket = Ticket(
            id=new_id(),
            name=payload.name,
            address=payload.address,
            issue_type=payload.issue_type.value,
            priority=payload.priority.value,
            description=payload.description,
            status=TicketStatus.OPEN.value,
            assigned_worker=None,
            created_at=utc_timestamp(),
        )
        with unit_of_work(self.db):
            self.db.add(db_ticket)
            self.db.commit()
            self.db.refresh(db_ticket)
        return db_ticket

    def list_all(self) -> list[Ticket]:
        with unit_of_work(self.db):
            return self.db.query(Ticket).order_by(Ticket.pk).all()

    def get_by_id(self, ticket_id: str) -> Ticket | None:
        with unit_of_work(self.db):
            return self.db.query(Ticket).filter(Ticket.id == ticket_id).first()

    def assign(self, ticket_id: str, worker_id: str | None) -> Ticket:
        """Attach a snapshot of the worker; the ticket is untouched on any failure.

        An unknown ticket is reported before a missing ``worker_id``.
        """
        with unit_of_work(self.db):
            db_ticket = self.get_by_id(ticket_id)
            if not db_ticket:
                raise NotFound("Ticket not found")
            if not worker_id:
                raise MissingParameter("workerId is required")
            worker = self.workers.get_by_id(worker_id)
            if not worker:
                raise NotFound("Worker not found")

            db_ticket.assigned_worker = worker.snapshot()
            db_ticket.status = TicketStatus.ASSIGNED.value
            self.db.commit()
            self.db.refresh(db_ticket)
        return db_ticket

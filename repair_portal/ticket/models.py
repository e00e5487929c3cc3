# repair_portal/ticket/models.py
from sqlalchemy import JSON, Column, Integer, String

from repair_portal.core.constants import TicketStatus
from repair_portal.core.database import Base
from repair_portal.core.logging_config import utc_timestamp
from repair_portal.worker.models import new_id


class Ticket(Base):
    __tablename__ = "tickets"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, index=True, nullable=False, default=new_id)
    name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    issue_type = Column(String, nullable=False)
    priority = Column(String, nullable=False)
    description = Column(String, nullable=False)
    status = Column(String, default=TicketStatus.OPEN.value, index=True, nullable=False)
    # Snapshot of the worker at assignment time, not a foreign key
    assigned_worker = Column(JSON, nullable=True)
    created_at = Column(String, nullable=False, default=utc_timestamp)

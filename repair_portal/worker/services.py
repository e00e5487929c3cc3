# repair_portal/worker/services.py
from sqlalchemy.orm import Session

from repair_portal.core.database import unit_of_work
from repair_portal.core.errors import NotFound
from repair_portal.worker.models import Worker, new_id
from repair_portal.worker.schemas import WorkerCreate


class WorkerStore:
    """Workers available for assignment, in creation order."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, payload: WorkerCreate) -> Worker:
        db_worker = Worker(
            id=new_id(),
            name=payload.name,
            specialization=payload.specialization.value,
        )
        with unit_of_work(self.db):
            self.db.add(db_worker)
            self.db.commit()
            self.db.refresh(db_worker)
        return db_worker

    def list_all(self) -> list[Worker]:
        with unit_of_work(self.db):
            return self.db.query(Worker).order_by(Worker.pk).all()

    def get_by_id(self, worker_id: str) -> Worker | None:
        with unit_of_work(self.db):
            return self.db.query(Worker).filter(Worker.id == worker_id).first()

    def delete(self, worker_id: str) -> Worker:
        # Tickets keep their own snapshot, so nothing cascades
        with unit_of_work(self.db):
            db_worker = self.get_by_id(worker_id)
            if not db_worker:
                raise NotFound("Worker not found")
            self.db.delete(db_worker)
            self.db.commit()
        return db_worker

# repair_portal/worker/models.py
import uuid

from sqlalchemy import Column, Integer, String
from repair_portal.core.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


class Worker(Base):
    __tablename__ = "workers"

    # Surrogate key keeps insertion order; `id` is the public identifier
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, index=True, nullable=False, default=new_id)
    name = Column(String, nullable=False)
    specialization = Column(String, nullable=False)

    def snapshot(self) -> dict:
        """Detached copy embedded into tickets on assignment."""
        return {"id": self.id, "name": self.name, "specialization": self.specialization}

# repair_portal/worker/routes.py
from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from repair_portal.core.database import get_db
from repair_portal.core.errors import parse_body
from repair_portal.core.logging_config import audit
from repair_portal.core.validation import validate_worker
from repair_portal.worker.schemas import (
    WorkerCreate,
    WorkerCreatedOut,
    WorkerDeletedOut,
    WorkerIn,
    WorkerListOut,
    WorkerOut,
)
from repair_portal.worker.services import WorkerStore

router = APIRouter(prefix="/api/workers", tags=["Workers"])


def get_worker_store(db: Session = Depends(get_db)) -> WorkerStore:
    return WorkerStore(db)


@router.get("", response_model=WorkerListOut)
def list_all(store: WorkerStore = Depends(get_worker_store)):
    return {"workers": [WorkerOut.model_validate(w) for w in store.list_all()]}


@router.post("", response_model=WorkerCreatedOut, status_code=201)
def create(
    body: dict[str, Any] | None = Body(default=None),
    store: WorkerStore = Depends(get_worker_store),
):
    payload = parse_body(WorkerIn, body, validate_worker)

    worker = store.create(
        WorkerCreate(name=payload.name.strip(), specialization=payload.specialization)
    )
    audit(
        "worker_created",
        workerId=worker.id,
        name=worker.name,
        specialization=worker.specialization,
    )
    return {"worker": WorkerOut.model_validate(worker)}


@router.delete("/{worker_id}", response_model=WorkerDeletedOut)
def delete(worker_id: str, store: WorkerStore = Depends(get_worker_store)):
    removed = store.delete(worker_id)
    audit("worker_deleted", workerId=removed.id, name=removed.name)
    return {}

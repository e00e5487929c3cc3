# tests/test_stores.py
import pytest

from repair_portal.core.constants import IssueType, Priority, Specialization, TicketStatus
from repair_portal.core.database import build_engine, build_session_factory
from repair_portal.core.errors import MissingParameter, NotFound
from repair_portal.ticket.schemas import TicketCreate
from repair_portal.ticket.services import TicketStore
from repair_portal.worker.schemas import WorkerCreate
from repair_portal.worker.services import WorkerStore


@pytest.fixture
def workers(db):
    return WorkerStore(db)


@pytest.fixture
def tickets(db, workers):
    return TicketStore(db, workers)


def _ticket_fields(name="Jan"):
    return TicketCreate(
        name=name,
        address="Keizersgracht 123",
        issue_type=IssueType.HEATING,
        priority=Priority.MEDIUM,
        description="Radiator is cold",
    )


def test_create_ticket_starts_open(tickets):
    ticket = tickets.create(_ticket_fields())
    assert ticket.status == TicketStatus.OPEN.value
    assert ticket.assigned_worker is None
    assert ticket.issue_type == "Heating"
    assert tickets.get_by_id(ticket.id) is ticket


def test_get_unknown_ticket_returns_none(tickets):
    assert tickets.get_by_id("nope") is None


def test_list_all_keeps_insertion_order(tickets):
    created = [tickets.create(_ticket_fields(name)) for name in ("c", "a", "b")]
    assert [t.id for t in tickets.list_all()] == [t.id for t in created]


def test_assign_copies_worker_snapshot(tickets, workers):
    ticket = tickets.create(_ticket_fields())
    worker = workers.create(WorkerCreate(name="Erik", specialization=Specialization.ELECTRICIAN))

    updated = tickets.assign(ticket.id, worker.id)
    assert updated.status == TicketStatus.ASSIGNED.value
    assert updated.assigned_worker == {
        "id": worker.id,
        "name": "Erik",
        "specialization": "Electrician",
    }

    # Later changes to the worker do not reach the snapshot
    worker.name = "Renamed"
    workers.db.commit()
    assert tickets.get_by_id(ticket.id).assigned_worker["name"] == "Erik"


def test_assign_unknown_ids_raise_not_found(tickets, workers):
    ticket = tickets.create(_ticket_fields())
    worker = workers.create(WorkerCreate(name="Erik", specialization=Specialization.GENERAL))

    with pytest.raises(NotFound, match="Ticket not found"):
        tickets.assign("missing", worker.id)
    with pytest.raises(NotFound, match="Worker not found"):
        tickets.assign(ticket.id, "missing")
    assert tickets.get_by_id(ticket.id).status == TicketStatus.OPEN.value


def test_worker_delete(workers):
    keep = workers.create(WorkerCreate(name="Keep", specialization=Specialization.PLUMBER))
    drop = workers.create(WorkerCreate(name="Drop", specialization=Specialization.CARPENTER))

    removed = workers.delete(drop.id)
    assert removed.id == drop.id
    assert [w.id for w in workers.list_all()] == [keep.id]
    assert workers.get_by_id(drop.id) is None

    with pytest.raises(NotFound):
        workers.delete(drop.id)


def test_assign_checks_ticket_before_worker_id(tickets):
    ticket = tickets.create(_ticket_fields())

    with pytest.raises(NotFound, match="Ticket not found"):
        tickets.assign("missing", None)
    with pytest.raises(MissingParameter, match="workerId is required"):
        tickets.assign(ticket.id, "")
    assert tickets.get_by_id(ticket.id).assigned_worker is None


def test_sessions_from_one_factory_share_a_lock():
    engine = build_engine("sqlite://")
    factory = build_session_factory(engine)
    a, b = factory(), factory()
    try:
        assert a.info["lock"] is b.info["lock"]
    finally:
        a.close()
        b.close()
        engine.dispose()

# tests/test_assignment.py


def _assign(client, ticket_id, body):
    return client.patch(f"/api/repair-requests/{ticket_id}/assign", json=body)


def test_assign_worker(client, create_ticket, create_worker):
    tid = create_ticket()
    worker = create_worker("Assign Test Worker", "Plumber")

    r = _assign(client, tid, {"workerId": worker["id"]})
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "updated"
    assert body["message"] == "Ticket assigned to Assign Test Worker"
    assert body["ticket"]["status"] == "Assigned"
    assert body["ticket"]["assignedWorker"] == worker

    stored = client.get(f"/api/repair-requests/{tid}").json()["ticket"]
    assert stored["status"] == "Assigned"
    assert stored["assignedWorker"]["id"] == worker["id"]


def test_assign_without_worker_id_returns_400(client, create_ticket):
    tid = create_ticket()
    r = _assign(client, tid, {})
    assert r.status_code == 400
    assert r.json() == {"status": "error", "message": "workerId is required"}


def test_assign_without_body_returns_400(client, create_ticket):
    tid = create_ticket()
    r = client.patch(f"/api/repair-requests/{tid}/assign")
    assert r.status_code == 400
    assert r.json()["message"] == "workerId is required"


def test_assign_unknown_ticket_checked_before_worker_id(client):
    r = _assign(client, "missing", {})
    assert r.status_code == 404
    assert r.json()["message"] == "Ticket not found"


def test_assign_unknown_worker_leaves_ticket_untouched(client, create_ticket):
    tid = create_ticket()
    before = client.get(f"/api/repair-requests/{tid}").json()["ticket"]

    r = _assign(client, tid, {"workerId": "nobody"})
    assert r.status_code == 404
    assert r.json()["message"] == "Worker not found"

    after = client.get(f"/api/repair-requests/{tid}").json()["ticket"]
    assert after == before
    assert after["status"] == "Open"
    assert after["assignedWorker"] is None


def test_reassignment_replaces_snapshot(client, create_ticket, create_worker):
    tid = create_ticket()
    first = create_worker("First", "Plumber")
    second = create_worker("Second", "Carpenter")

    _assign(client, tid, {"workerId": first["id"]})
    r = _assign(client, tid, {"workerId": second["id"]})
    assert r.json()["ticket"]["assignedWorker"] == second


def test_deleting_worker_keeps_ticket_snapshot(client, create_ticket, create_worker):
    tid = create_ticket()
    worker = create_worker("Leaving Soon", "HVAC Technician")
    _assign(client, tid, {"workerId": worker["id"]})

    assert client.delete(f"/api/workers/{worker['id']}").status_code == 200

    ticket = client.get(f"/api/repair-requests/{tid}").json()["ticket"]
    assert ticket["status"] == "Assigned"
    assert ticket["assignedWorker"] == worker

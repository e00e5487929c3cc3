# tests/test_app.py
import json
import logging

from repair_portal.core.logging_config import AUDIT_LOGGER_NAME


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["timestamp"]


def test_unknown_route_uses_error_envelope(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.json()["status"] == "error"


def test_cors_allows_frontend_origin(client):
    r = client.options(
        "/api/repair-requests",
        headers={"Origin": "http://localhost:8501", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:8501"


def test_cors_rejects_other_origins(client):
    r = client.get("/api/health", headers={"Origin": "http://evil.example"})
    assert r.status_code == 200
    assert "access-control-allow-origin" not in r.headers


def _audit_events(caplog):
    return [
        json.loads(rec.getMessage())
        for rec in caplog.records
        if rec.name == AUDIT_LOGGER_NAME
    ]


def test_mutations_emit_audit_lines(client, caplog, create_ticket, create_worker):
    caplog.set_level(logging.INFO, logger=AUDIT_LOGGER_NAME)

    tid = create_ticket()
    worker = create_worker()
    client.patch(f"/api/repair-requests/{tid}/assign", json={"workerId": worker["id"]})
    client.delete(f"/api/workers/{worker['id']}")

    events = _audit_events(caplog)
    assert [e["event"] for e in events] == [
        "repair_request_created",
        "worker_created",
        "ticket_assigned",
        "worker_deleted",
    ]
    assert events[0]["ticketId"] == tid
    assert events[2]["workerId"] == worker["id"]
    assert events[2]["workerName"] == worker["name"]
    assert all(e["timestamp"] for e in events)


def test_rejected_submission_is_not_audited(client, caplog):
    caplog.set_level(logging.INFO, logger=AUDIT_LOGGER_NAME)
    client.post("/api/repair-requests", json={})
    assert _audit_events(caplog) == []

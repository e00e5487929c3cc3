# repair_portal/portal/client.py
"""HTTP client the UI uses for every read and write against the API."""
from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)


class PortalApiError(Exception):
    """Raised for any non-2xx response or transport failure."""

    def __init__(self, message: str, status_code: int | None = None, errors: list[dict] | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []

    def field_errors(self) -> dict[str, str]:
        return {e["field"]: e["message"] for e in self.errors if "field" in e}


class PortalClient:
    """Thin wrapper over the REST endpoints.

    ``session`` defaults to a ``requests.Session``; anything exposing the same
    ``request(method, url, json=...)`` call works, which is how tests drive the
    client against an in-process app.
    """

    def __init__(self, base_url: str, session: Any = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, default_error: str, **kwargs) -> dict:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.error(f"{method} {url} failed: {exc}")
            raise PortalApiError(str(exc)) from exc

        try:
            body = resp.json()
        except ValueError:
            body = {}

        if resp.status_code >= 400:
            raise PortalApiError(
                body.get("message") or default_error,
                status_code=resp.status_code,
                errors=body.get("errors"),
            )
        return body

    def health(self) -> dict:
        return self._request("GET", "/api/health", "API is unavailable")

    # ---- tickets ----
    def submit_repair_request(self, fields: dict[str, str]) -> str:
        body = self._request(
            "POST", "/api/repair-requests", "Failed to submit repair request", json=fields
        )
        return body["ticketId"]

    def list_tickets(self) -> list[dict]:
        return self._request("GET", "/api/repair-requests", "Failed to fetch tickets")["tickets"]

    def get_ticket(self, ticket_id: str) -> dict:
        return self._request("GET", f"/api/repair-requests/{ticket_id}", "Ticket not found")["ticket"]

    def assign_worker(self, ticket_id: str, worker_id: str) -> tuple[dict, str]:
        body = self._request(
            "PATCH",
            f"/api/repair-requests/{ticket_id}/assign",
            "Failed to assign worker",
            json={"workerId": worker_id},
        )
        return body["ticket"], body.get("message", "")

    # ---- workers ----
    def list_workers(self) -> list[dict]:
        return self._request("GET", "/api/workers", "Failed to fetch workers")["workers"]

    def create_worker(self, fields: dict[str, str]) -> dict:
        body = self._request("POST", "/api/workers", "Failed to add worker", json=fields)
        return body["worker"]

    def delete_worker(self, worker_id: str) -> None:
        self._request("DELETE", f"/api/workers/{worker_id}", "Failed to delete worker")

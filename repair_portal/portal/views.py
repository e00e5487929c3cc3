# repair_portal/portal/views.py
"""Read-only views and the assignment sub-action.

Each view holds a disposable copy of what the API returned and moves
``loading -> (loaded | error)`` on :meth:`load`.
"""
from __future__ import annotations

from enum import Enum

from repair_portal.portal.client import PortalApiError, PortalClient
from repair_portal.portal.forms import WorkerForm


class ViewState(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class TicketListView:
    def __init__(self):
        self.state = ViewState.LOADING
        self.tickets: list[dict] = []
        self.error: str | None = None

    def load(self, client: PortalClient) -> None:
        self.state = ViewState.LOADING
        self.error = None
        try:
            self.tickets = client.list_tickets()
        except PortalApiError as exc:
            self.error = exc.message
            self.state = ViewState.ERROR
            return
        self.state = ViewState.LOADED


class TicketDetailView:
    """One ticket plus the workers it can be assigned to.

    Assignment runs on its own flag, so a failed assignment leaves the page
    loaded and only sets ``assign_message``.
    """

    def __init__(self, ticket_id: str):
        self.ticket_id = ticket_id
        self.state = ViewState.LOADING
        self.ticket: dict | None = None
        self.workers: list[dict] = []
        self.error: str | None = None
        self.assigning = False
        self.assign_message: str | None = None

    def load(self, client: PortalClient) -> None:
        self.state = ViewState.LOADING
        self.error = None
        try:
            self.ticket = client.get_ticket(self.ticket_id)
            self.workers = client.list_workers()
        except PortalApiError as exc:
            self.error = exc.message or "Ticket not found"
            self.state = ViewState.ERROR
            return
        self.state = ViewState.LOADED

    @property
    def can_assign(self) -> bool:
        return self.state is ViewState.LOADED and bool(self.workers) and not self.assigning

    def assign(self, client: PortalClient, worker_id: str) -> bool:
        if not worker_id or not self.can_assign:
            return False

        self.assigning = True
        self.assign_message = None
        try:
            self.ticket, self.assign_message = client.assign_worker(self.ticket_id, worker_id)
            return True
        except PortalApiError as exc:
            self.assign_message = exc.message
            return False
        finally:
            self.assigning = False


class WorkerListView:
    def __init__(self):
        self.state = ViewState.LOADING
        self.workers: list[dict] = []
        self.error: str | None = None
        self.form = WorkerForm()

    def load(self, client: PortalClient) -> None:
        self.state = ViewState.LOADING
        self.error = None
        try:
            self.workers = client.list_workers()
        except PortalApiError as exc:
            self.error = exc.message
            self.state = ViewState.ERROR
            return
        self.state = ViewState.LOADED

    def add_worker(self, client: PortalClient) -> bool:
        if not self.form.submit(client):
            return False
        self.workers.append(self.form.result)
        self.form.reset()
        return True

    def delete_worker(self, client: PortalClient, worker_id: str) -> bool:
        try:
            client.delete_worker(worker_id)
        except PortalApiError as exc:
            self.error = exc.message
            self.state = ViewState.ERROR
            return False
        self.workers = [w for w in self.workers if w["id"] != worker_id]
        return True

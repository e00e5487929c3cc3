# repair_portal/portal/forms.py
"""Form state for the UI.

A form moves ``editing -> submitting -> (success | editing_with_errors)`` and
returns to ``editing`` only through :meth:`SubmissionForm.reset`. Rules are the
same ones the API enforces, checked before any request goes out.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from repair_portal.core.validation import FieldError, validate_repair_request, validate_worker
from repair_portal.portal.client import PortalApiError, PortalClient


class FormState(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    EDITING_WITH_ERRORS = "editing_with_errors"


class SubmissionForm:
    fields: tuple[str, ...] = ()
    validator: Callable[[Mapping[str, Any]], list[FieldError]]

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.values: dict[str, str] = {name: "" for name in self.fields}
        self.errors: dict[str, str] = {}
        self.submit_error: str | None = None
        self.result: Any = None
        self.state = FormState.EDITING

    @property
    def is_submitting(self) -> bool:
        return self.state is FormState.SUBMITTING

    def update(self, field: str, value: str) -> None:
        if field not in self.fields:
            raise KeyError(field)
        if self.state in (FormState.SUBMITTING, FormState.SUCCESS):
            return
        self.values[field] = value
        self.errors.pop(field, None)
        if not self.errors and self.submit_error is None:
            self.state = FormState.EDITING

    def payload(self) -> dict[str, str]:
        return dict(self.values)

    def submit(self, client: PortalClient) -> bool:
        """Validate locally, then send. Returns True once the server accepted it."""
        if self.state in (FormState.SUBMITTING, FormState.SUCCESS):
            return False

        self.submit_error = None
        local = type(self).validator(self.values)
        if local:
            self.errors = {e.field: e.message for e in local}
            self.state = FormState.EDITING_WITH_ERRORS
            return False

        self.state = FormState.SUBMITTING
        try:
            self.result = self._send(client)
        except PortalApiError as exc:
            self.errors = exc.field_errors()
            self.submit_error = exc.message
            self.state = FormState.EDITING_WITH_ERRORS
            return False

        self.errors = {}
        self.state = FormState.SUCCESS
        return True

    def _send(self, client: PortalClient) -> Any:
        raise NotImplementedError


class RepairRequestForm(SubmissionForm):
    fields = ("name", "address", "issueType", "priority", "description")
    validator = staticmethod(validate_repair_request)

    @property
    def ticket_id(self) -> str | None:
        return self.result

    def _send(self, client: PortalClient) -> str:
        return client.submit_repair_request(self.payload())


class WorkerForm(SubmissionForm):
    fields = ("name", "specialization")
    validator = staticmethod(validate_worker)

    def payload(self) -> dict[str, str]:
        return {"name": self.values["name"].strip(), "specialization": self.values["specialization"]}

    def _send(self, client: PortalClient) -> dict:
        return client.create_worker(self.payload())

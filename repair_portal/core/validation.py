# repair_portal/core/validation.py
"""Field rules for repair requests and workers.

Both validators take a mapping keyed by wire names (``issueType``, not
``issue_type``) whose values may be missing or ``None``. Every rule runs, so
the caller always gets the complete list of violations.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from repair_portal.core.constants import ISSUE_TYPES, PRIORITIES, SPECIALIZATIONS


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _not_in(value: Any, allowed: list[str]) -> bool:
    return not value or value not in allowed


def validate_repair_request(data: Mapping[str, Any]) -> list[FieldError]:
    errors: list[FieldError] = []

    if _is_blank(data.get("name")):
        errors.append(FieldError("name", "Name is required"))
    if _is_blank(data.get("address")):
        errors.append(FieldError("address", "Address is required"))
    if _not_in(data.get("issueType"), ISSUE_TYPES):
        errors.append(
            FieldError("issueType", f"Issue type must be one of: {', '.join(ISSUE_TYPES)}")
        )
    if _not_in(data.get("priority"), PRIORITIES):
        errors.append(
            FieldError("priority", f"Priority must be one of: {', '.join(PRIORITIES)}")
        )
    if _is_blank(data.get("description")):
        errors.append(FieldError("description", "Description is required"))

    return errors


def validate_worker(data: Mapping[str, Any]) -> list[FieldError]:
    errors: list[FieldError] = []

    if _is_blank(data.get("name")):
        errors.append(FieldError("name", "Worker name is required"))
    if _not_in(data.get("specialization"), SPECIALIZATIONS):
        errors.append(
            FieldError(
                "specialization",
                f"Specialization must be one of: {', '.join(SPECIALIZATIONS)}",
            )
        )

    return errors

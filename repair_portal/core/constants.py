# repair_portal/core/constants.py
"""Closed sets shared by the API, the validators and the UI."""
from enum import Enum


class IssueType(str, Enum):
    PLUMBING = "Plumbing"
    ELECTRICAL = "Electrical"
    STRUCTURAL = "Structural"
    HEATING = "Heating"
    OTHER = "Other"


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class Specialization(str, Enum):
    PLUMBER = "Plumber"
    ELECTRICIAN = "Electrician"
    CARPENTER = "Carpenter"
    HVAC_TECHNICIAN = "HVAC Technician"
    GENERAL = "General"


class TicketStatus(str, Enum):
    OPEN = "Open"
    ASSIGNED = "Assigned"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"


def values(enum_cls: type[Enum]) -> list[str]:
    return [member.value for member in enum_cls]


ISSUE_TYPES = values(IssueType)
PRIORITIES = values(Priority)
SPECIALIZATIONS = values(Specialization)
TICKET_STATUSES = values(TicketStatus)

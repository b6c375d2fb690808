from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import month_label, parse_iso_date
from .generator import LeaveRecordGenerator
from .model import LeaveEntry


@dataclass(frozen=True)
class LeaveGroup:
    month: str
    leaves: list[LeaveEntry]


def leave_to_dict(leave: LeaveEntry) -> dict:
    return {
        "id": leave.id,
        "date": leave.date,
        "type": leave.type.value,
        "reason": leave.reason,
        "approved": leave.approved,
        "badge": "Approved" if leave.approved else "Pending",
    }


def group_by_month(leaves: list[LeaveEntry]) -> list[LeaveGroup]:
    """Group already sorted leaves under month headings, keeping their order."""
    groups: dict[str, list[LeaveEntry]] = {}
    for leave in leaves:
        groups.setdefault(month_label(parse_iso_date(leave.date)), []).append(leave)
    return [LeaveGroup(month=m, leaves=items) for m, items in groups.items()]


class LeaveService:
    def __init__(self, generator: Optional[LeaveRecordGenerator] = None):
        self._generator = generator or LeaveRecordGenerator()

    def history(self, employee_id: str, *, today: Optional[date] = None) -> list[LeaveGroup]:
        leaves = self._generator.generate(employee_id, today or date.today())
        return group_by_month(leaves)

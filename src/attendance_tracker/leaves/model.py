from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import LeaveType


@dataclass(frozen=True)
class LeaveEntry:
    id: str
    date: str
    type: LeaveType
    reason: str
    approved: bool


LEAVE_REASONS = {
    LeaveType.PL: "Personal leave",
    LeaveType.CL: "Casual leave",
    LeaveType.SL: "Sick leave - Fever",
    LeaveType.OD: "Official duty - Client meeting",
    LeaveType.OTHER: "Family function",
}

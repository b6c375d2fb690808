from datetime import date

from attendance_tracker.core.enums import LeaveType
from attendance_tracker.leaves.generator import LeaveRecordGenerator
from attendance_tracker.leaves.model import LeaveEntry
from attendance_tracker.leaves.service import LeaveService, group_by_month, leave_to_dict


def _leave(day: str, approved: bool = True) -> LeaveEntry:
    return LeaveEntry(id=f"K14050-{day}", date=day, type=LeaveType.PL, reason="Personal leave", approved=approved)


def test_group_by_month_keeps_order():
    leaves = [_leave("2026-07-20"), _leave("2026-07-03"), _leave("2026-05-11"), _leave("2025-12-01")]

    groups = group_by_month(leaves)

    assert [g.month for g in groups] == ["July 2026", "May 2026", "December 2025"]
    assert [leave.date for leave in groups[0].leaves] == ["2026-07-20", "2026-07-03"]


def test_leave_to_dict_badge():
    assert leave_to_dict(_leave("2026-07-20", approved=True))["badge"] == "Approved"
    assert leave_to_dict(_leave("2026-07-20", approved=False))["badge"] == "Pending"
    assert leave_to_dict(_leave("2026-07-20"))["type"] == "PL"


def test_history_groups_generated_leaves(scripted_rng):
    # one leave in July, two in June, none before
    rng = scripted_rng([0.4, 0.0, 0.5, 0.9, 0.7, 0.2, 0.1, 0.5, 0.99, 0.3, 0.0, 0.0, 0.0, 0.0, 0.0])
    service = LeaveService(LeaveRecordGenerator(rng))

    groups = service.history("K14050", today=date(2026, 7, 15))

    assert [g.month for g in groups] == ["July 2026", "June 2026"]
    assert [leave.date for leave in groups[1].leaves] == ["2026-06-09", "2026-06-03"]
    assert groups[0].leaves[0].date == "2026-07-15"
    assert groups[0].leaves[0].type == LeaveType.PL
    assert groups[1].leaves[0].type == LeaveType.OTHER

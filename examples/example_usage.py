"""Example: use the core generators and services directly (no Flask, no database).

Controllers are a thin layer; the attendance and leave logic lives in plain classes.
"""

import random
from datetime import date

from attendance_tracker.attendance.generator import AttendanceRecordGenerator
from attendance_tracker.attendance.summary import calculate_attendance_summary
from attendance_tracker.leaves.generator import LeaveRecordGenerator


def main():
    rng = random.Random(42)
    today = date.today()

    entries = AttendanceRecordGenerator(rng).generate_month(today)
    for entry in entries:
        print(entry.date, entry.status.value, entry.check_in or "–", entry.check_out or "–")
    print(calculate_attendance_summary(entries))

    for leave in LeaveRecordGenerator(rng).generate("K14050", today):
        print(leave.date, leave.type.value, leave.reason, "approved" if leave.approved else "pending")


if __name__ == "__main__":
    main()

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from random import Random

from ...core.constants import LATE_CHECKIN_HOUR, LATE_MAX_MINUTES, LATE_MIN_MINUTES, WORK_HOURS
from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, DayDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in: 15 to 59 minutes past nine, full shift after that."""

    status = AttendanceStatus.LATE

    def decide_day(self, *, day: date, rng: Random) -> DayDecision:
        offset = int(LATE_MIN_MINUTES + rng.random() * (LATE_MAX_MINUTES - LATE_MIN_MINUTES))
        check_in = datetime.combine(day, time(LATE_CHECKIN_HOUR)) + timedelta(minutes=offset)
        check_out = check_in + timedelta(hours=WORK_HOURS)
        return DayDecision(status=self.status, check_in=check_in, check_out=check_out)

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from random import Random

from ...core.constants import (
    PRESENT_CHECKIN_HOUR,
    PRESENT_CHECKIN_MAX_MINUTES,
    PRESENT_CHECKOUT_MAX_EXTRA_MINUTES,
    WORK_HOURS,
)
from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, DayDecision


class PresentStrategy(AttendanceStrategy):
    """On time: in at 08:00-08:14, out eight hours later plus up to half an hour."""

    status = AttendanceStatus.PRESENT

    def decide_day(self, *, day: date, rng: Random) -> DayDecision:
        minute = int(rng.random() * PRESENT_CHECKIN_MAX_MINUTES)
        check_in = datetime.combine(day, time(PRESENT_CHECKIN_HOUR, minute))
        extra = int(rng.random() * PRESENT_CHECKOUT_MAX_EXTRA_MINUTES)
        check_out = check_in + timedelta(hours=WORK_HOURS, minutes=extra)
        return DayDecision(status=self.status, check_in=check_in, check_out=check_out)

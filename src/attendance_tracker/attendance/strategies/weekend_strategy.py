from __future__ import annotations

from datetime import date
from random import Random

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, DayDecision


class WeekendStrategy(AttendanceStrategy):
    """Saturday and Sunday. Consumes no randomness."""

    status = AttendanceStatus.WEEKEND

    def decide_day(self, *, day: date, rng: Random) -> DayDecision:
        return DayDecision(status=self.status)

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.datetime_utils import is_weekend
from ..core.constants import LATE_AFTER, LATE_THRESHOLD, PRESENT_THRESHOLD
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy
from .strategies.weekend_strategy import WeekendStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def is_rest_day(self, day: date) -> bool:
        return is_weekend(day)

    def for_rest_day(self) -> AttendanceStrategy:
        return WeekendStrategy()

    def for_draw(self, draw: float) -> AttendanceStrategy:
        """Map one uniform draw in [0, 1) to a working-day outcome (80/15/5)."""
        if draw < PRESENT_THRESHOLD:
            return PresentStrategy()
        if draw < LATE_THRESHOLD:
            return LateStrategy()
        return AbsentStrategy()

    def for_checkin(self, *, now: datetime) -> AttendanceStrategy:
        if now.time() <= LATE_AFTER:
            return PresentStrategy()
        return LateStrategy()

from __future__ import annotations

import random
from datetime import date
from typing import Optional

from ..common.datetime_utils import days_in_month, format_iso_date, format_time
from ..core.constants import OPEN_DAY_THRESHOLD
from .factory import AttendanceStrategyFactory
from .model import AttendanceEntry


class AttendanceRecordGenerator:
    """Builds a synthetic month of attendance up to a reference day.

    The sequence starts on day 1 of the reference month and stops at the
    reference day, so it never contains future dates and never has gaps.
    All randomness comes from the injected `rng`, which makes runs reproducible.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
    ):
        self._rng = rng or random.Random()
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def generate_month(self, today: date) -> list[AttendanceEntry]:
        entries: list[AttendanceEntry] = []

        for day_num in range(1, days_in_month(today.year, today.month) + 1):
            day = date(today.year, today.month, day_num)
            if day > today:
                break

            if self._factory.is_rest_day(day):
                decision = self._factory.for_rest_day().decide_day(day=day, rng=self._rng)
                entries.append(
                    AttendanceEntry(date=format_iso_date(day), check_in="", check_out=None, status=decision.status)
                )
                continue

            strategy = self._factory.for_draw(self._rng.random())
            decision = strategy.decide_day(day=day, rng=self._rng)

            check_in = format_time(decision.check_in) if decision.check_in else ""
            check_out = format_time(decision.check_out) if decision.check_out else None

            # Still at work on the reference day.
            if day_num == today.day and self._rng.random() > OPEN_DAY_THRESHOLD:
                check_out = None

            entries.append(
                AttendanceEntry(date=format_iso_date(day), check_in=check_in, check_out=check_out, status=decision.status)
            )

        return entries

    def today_entry(self, today: date) -> Optional[AttendanceEntry]:
        key = format_iso_date(today)
        for entry in self.generate_month(today):
            if entry.date == key:
                return entry
        return None

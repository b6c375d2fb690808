from __future__ import annotations

import random
from datetime import date
from typing import Optional

from ..common.datetime_utils import epoch_millis, format_iso_date, shift_month
from ..core.constants import LEAVE_MAX_DAY, LEAVE_REJECT_THRESHOLD, LEAVE_WINDOW_MONTHS, MAX_LEAVES_PER_MONTH
from ..core.enums import LeaveType
from .model import LEAVE_REASONS, LeaveEntry

LEAVE_TYPES = tuple(LeaveType)


class LeaveRecordGenerator:
    """Synthetic leave history for the current month and the five before it.

    Days are drawn from 1..28 so every month can hold them. The identifier only
    namespaces the generated ids; it does not influence the content.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def generate(self, identifier: str, today: date) -> list[LeaveEntry]:
        leaves: list[LeaveEntry] = []

        for back in range(LEAVE_WINDOW_MONTHS):
            year, month = shift_month(today.year, today.month, -back)
            count = int(self._rng.random() * (MAX_LEAVES_PER_MONTH + 1))

            for _ in range(count):
                leave_type = LEAVE_TYPES[int(self._rng.random() * len(LEAVE_TYPES))]
                day = date(year, month, int(self._rng.random() * LEAVE_MAX_DAY) + 1)
                leaves.append(
                    LeaveEntry(
                        id=f"{identifier}-{epoch_millis(day)}",
                        date=format_iso_date(day),
                        type=leave_type,
                        reason=LEAVE_REASONS[leave_type],
                        approved=self._rng.random() > LEAVE_REJECT_THRESHOLD,
                    )
                )

        leaves.sort(key=lambda leave: leave.date, reverse=True)
        return leaves

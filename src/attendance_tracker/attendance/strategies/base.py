from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from random import Random
from typing import Optional

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class DayDecision:
    status: AttendanceStatus
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how one day of attendance is produced."""

    status: AttendanceStatus

    @abstractmethod
    def decide_day(self, *, day: date, rng: Random) -> DayDecision:
        raise NotImplementedError

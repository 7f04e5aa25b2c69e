# apps/stats/domain/entities.py
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Tuple


class DayStatus(str, Enum):
    BELOW = 'below'
    MET = 'met'
    EXCEEDED = 'exceeded'

    @classmethod
    def for_count(cls, count: int, goal: int) -> 'DayStatus':
        if count < goal:
            return cls.BELOW
        if count == goal:
            return cls.MET
        return cls.EXCEEDED


class SummaryPeriod(str, Enum):
    TODAY = 'today'
    WEEK = 'week'    # Niedziela - Sobota
    MONTH = 'month'


@dataclass(frozen=True)
class ClientEvent:
    """Minimalna projekcja klienta: silnik potrzebuje tylko created_at."""
    created_at: datetime
    client_id: Optional[int] = None


@dataclass(frozen=True)
class DailyCount:
    date: date
    count: int


@dataclass(frozen=True)
class DailyBucket:
    date: date
    count: int
    effective_goal: int
    status: DayStatus
    in_current_month: bool = True


@dataclass(frozen=True)
class RangeSummary:
    start: date
    end: date
    count: int
    goal: int  # Suma celów dziennych w zakresie
    status: DayStatus
    days: List[DailyBucket] = field(default_factory=list)


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    weeks: List[List[DailyBucket]]  # Wiersze po 7 dni (Nd..Sb)

    @property
    def cells(self) -> List[DailyBucket]:
        return [cell for week in self.weeks for cell in week]

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def month_total(self) -> int:
        return sum(c.count for c in self.cells if c.in_current_month)

    def previous_month(self) -> Tuple[int, int]:
        if self.month == 1:
            return self.year - 1, 12
        return self.year, self.month - 1

    def next_month(self) -> Tuple[int, int]:
        if self.month == 12:
            return self.year + 1, 1
        return self.year, self.month + 1

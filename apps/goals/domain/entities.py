# apps/goals/domain/entities.py
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

DEFAULT_GOAL = 4
MIN_GOAL = 1
MAX_GOAL = 50


def as_calendar_date(value) -> date:
    """Obcina datetime do daty (porównujemy tylko dni kalendarzowe)."""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class GoalPeriodEntity:
    id: Optional[int]  # ID może być None przed zapisem
    goal: int
    start_date: date
    end_date: date
    is_active: bool = True
    created_at: Optional[datetime] = None  # Tylko klucz sortowania

    @property
    def is_well_formed(self) -> bool:
        return as_calendar_date(self.start_date) <= as_calendar_date(self.end_date)

    def covers(self, day: date) -> bool:
        """Aktywny okres obejmuje dzień (obie granice włącznie)."""
        if not self.is_active or not self.is_well_formed:
            return False
        day = as_calendar_date(day)
        return as_calendar_date(self.start_date) <= day <= as_calendar_date(self.end_date)

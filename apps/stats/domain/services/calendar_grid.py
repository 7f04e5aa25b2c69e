# apps/stats/domain/services/calendar_grid.py
import calendar
import logging
from datetime import date
from typing import Iterable, Tuple

from apps.goals.domain.entities import GoalPeriodEntity
from apps.goals.domain.services import GoalResolver
from apps.stats.domain.entities import MonthGrid
from apps.stats.domain.exceptions import InvalidRangeError
from apps.stats.domain.services.aggregator import DailyAggregator
from apps.stats.domain.services.buckets import build_daily_buckets

logger = logging.getLogger(__name__)


class CalendarGridBuilder:
    """
    Siatka miesiąca dla kalendarza: pełne tygodnie Nd..Sb.

    Zaczyna się w niedzielę w dniu 1. lub przed nim, kończy w sobotę w ostatnim
    dniu miesiąca lub po nim. Dni sąsiednich miesięcy są w pełni policzone,
    mają tylko in_current_month=False.
    """

    def __init__(self, aggregator: DailyAggregator = None, resolver: GoalResolver = None):
        self.aggregator = aggregator or DailyAggregator()
        self.resolver = resolver or GoalResolver()
        self.calendar = calendar.Calendar(firstweekday=calendar.SUNDAY)

    def grid_range(self, year: int, month: int) -> Tuple[date, date]:
        """Pierwsza niedziela i ostatnia sobota siatki."""
        if not 1 <= month <= 12:
            raise InvalidRangeError(f"Month must be between 1 and 12, got {month}")

        try:
            # Macierz dat: [[date, ...7], ...]
            week_dates = self.calendar.monthdatescalendar(year, month)
        except (ValueError, OverflowError):
            # Rok 1 / 9999: dni z sąsiedniego miesiąca wypadają poza zakres date
            raise InvalidRangeError(f"Year {year} is outside the supported calendar range")

        return week_dates[0][0], week_dates[-1][-1]

    def build_month_grid(
        self,
        year: int,
        month: int,
        events: Iterable,
        default_goal: int,
        periods: Iterable[GoalPeriodEntity]
    ) -> MonthGrid:
        grid_start, grid_end = self.grid_range(year, month)

        daily = self.aggregator.aggregate(events, grid_start, grid_end)
        buckets = build_daily_buckets(daily, default_goal, periods, self.resolver, month=(year, month))

        weeks = [buckets[i:i + 7] for i in range(0, len(buckets), 7)]
        logger.debug("Month grid %s-%02d: %s weeks from %s", year, month, len(weeks), grid_start)

        return MonthGrid(year=year, month=month, weeks=weeks)

# apps/stats/domain/services/summary.py
import calendar
from datetime import date, timedelta
from typing import Dict, Iterable, List, Tuple

from apps.goals.domain.entities import GoalPeriodEntity, as_calendar_date
from apps.goals.domain.services import GoalResolver
from apps.stats.domain.entities import DailyCount, DayStatus, RangeSummary, SummaryPeriod
from apps.stats.domain.exceptions import InvalidRangeError
from apps.stats.domain.services.aggregator import DailyAggregator
from apps.stats.domain.services.buckets import build_daily_buckets


def week_start(day: date) -> date:
    """Niedziela otwierająca tydzień, w którym leży `day`."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


class PeriodSummaryService:
    """Sumy 'dziś / ten tydzień / ten miesiąc' i drill-down po dniu. `today` zawsze z zewnątrz."""

    def __init__(self, aggregator: DailyAggregator = None, resolver: GoalResolver = None):
        self.aggregator = aggregator or DailyAggregator()
        self.resolver = resolver or GoalResolver()

    def period_range(self, period, today: date) -> Tuple[date, date]:
        period = SummaryPeriod(period)
        today = as_calendar_date(today)

        if period == SummaryPeriod.TODAY:
            return today, today
        if period == SummaryPeriod.WEEK:
            try:
                start = week_start(today)
                return start, start + timedelta(days=6)
            except OverflowError:
                # Tydzień wychodzi poza date.min / date.max
                raise InvalidRangeError(f"Week containing {today} is outside the supported calendar range")

        last_day = calendar.monthrange(today.year, today.month)[1]
        return today.replace(day=1), today.replace(day=last_day)

    def summarize(self, events: Iterable, period, today: date) -> int:
        start, end = self.period_range(period, today)
        return len(self.aggregator.events_between(events, start, end))

    def by_date(self, events: Iterable, day: date) -> list:
        day = as_calendar_date(day)
        return self.aggregator.events_between(events, day, day)

    def by_period(self, events: Iterable, period, today: date) -> list:
        start, end = self.period_range(period, today)
        return self.aggregator.events_between(events, start, end)

    def summarize_range(
        self,
        events: Iterable,
        start: date,
        end: date,
        default_goal: int,
        periods: Iterable[GoalPeriodEntity]
    ) -> RangeSummary:
        daily = self.aggregator.aggregate(events, start, end)
        buckets = build_daily_buckets(daily, default_goal, periods, self.resolver)

        count = sum(b.count for b in buckets)
        goal = sum(b.effective_goal for b in buckets)

        return RangeSummary(
            start=daily[0].date,
            end=daily[-1].date,
            count=count,
            goal=goal,
            status=DayStatus.for_count(count, goal),
            days=buckets
        )

    def overview(
        self,
        events: Iterable,
        today: date,
        default_goal: int,
        periods: Iterable[GoalPeriodEntity]
    ) -> Dict[SummaryPeriod, RangeSummary]:
        events = list(events or ())
        periods = list(periods or ())
        result = {}
        for period in SummaryPeriod:
            start, end = self.period_range(period, today)
            result[period] = self.summarize_range(events, start, end, default_goal, periods)
        return result

    def history_range(self, today: date, days: int = 30) -> Tuple[date, date]:
        if days < 1:
            raise InvalidRangeError(f"History must cover at least one day, got {days}")
        today = as_calendar_date(today)
        try:
            return today - timedelta(days=days - 1), today
        except OverflowError:
            raise InvalidRangeError(f"{days} days before {today} is outside the supported calendar range")

    def daily_history(self, events: Iterable, today: date, days: int = 30) -> List[DailyCount]:
        """Ostatnie `days` dni kończące się na `today` (włącznie)."""
        start, end = self.history_range(today, days)
        return self.aggregator.aggregate(events, start, end)

# apps/stats/services.py
from apps.core.dates import get_day_timezone
from apps.goals.domain.services import GoalResolver
from .domain.services.aggregator import DailyAggregator
from .domain.services.calendar_grid import CalendarGridBuilder
from .domain.services.summary import PeriodSummaryService


def build_aggregator() -> DailyAggregator:
    """Agregator z granicą dnia z ustawień (TRACKER_DAY_TIME_ZONE)."""
    return DailyAggregator(tz=get_day_timezone())


def build_summary_service() -> PeriodSummaryService:
    return PeriodSummaryService(aggregator=build_aggregator(), resolver=GoalResolver())


def build_grid_builder() -> CalendarGridBuilder:
    return CalendarGridBuilder(aggregator=build_aggregator(), resolver=GoalResolver())

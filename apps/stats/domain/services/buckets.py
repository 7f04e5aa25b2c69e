# apps/stats/domain/services/buckets.py
from typing import Iterable, List, Optional, Tuple

from apps.goals.domain.entities import GoalPeriodEntity
from apps.goals.domain.services import GoalResolver
from apps.stats.domain.entities import DailyBucket, DailyCount, DayStatus


def build_daily_buckets(
    daily_counts: Iterable[DailyCount],
    default_goal: int,
    periods: Iterable[GoalPeriodEntity],
    resolver: GoalResolver = None,
    month: Optional[Tuple[int, int]] = None
) -> List[DailyBucket]:
    """Dokleja do liczników cel dnia i status. `month` oznacza dni bieżącego miesiąca."""
    resolver = resolver or GoalResolver()
    periods = list(periods or ())
    buckets = []

    for item in daily_counts:
        goal = resolver.resolve(item.date, default_goal, periods)
        in_month = month is None or (item.date.year, item.date.month) == month
        buckets.append(DailyBucket(
            date=item.date,
            count=item.count,
            effective_goal=goal,
            status=DayStatus.for_count(item.count, goal),
            in_current_month=in_month
        ))

    return buckets

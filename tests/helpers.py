from datetime import date, datetime, timezone

from apps.goals.domain.entities import GoalPeriodEntity
from apps.stats.domain.entities import ClientEvent


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def period(goal, start, end, is_active=True, id=None) -> GoalPeriodEntity:
    return GoalPeriodEntity(id=id, goal=goal, start_date=start, end_date=end, is_active=is_active)


def events_on(day: date, count: int, hour: int = 12) -> list:
    return [ClientEvent(created_at=utc(day.year, day.month, day.day, hour, i)) for i in range(count)]

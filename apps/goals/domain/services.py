# apps/goals/domain/services.py
import logging
from datetime import date
from typing import Iterable, Optional

from apps.goals.domain.entities import GoalPeriodEntity

logger = logging.getLogger(__name__)


class GoalResolver:
    """
    Ustala cel dzienny obowiązujący w danym dniu.

    Okresy mogą się nakładać. Wygrywa PIERWSZY pasujący okres w kolejności,
    w jakiej zostały przekazane (kolejność dodania, created_at rosnąco).
    Nie najwyższy cel, nie najnowszy okres, nie najkrótszy zakres.
    """

    def find_period(self, day: date, periods: Iterable[GoalPeriodEntity]) -> Optional[GoalPeriodEntity]:
        for period in periods or ():
            if period.covers(day):
                return period
        return None

    def resolve(self, day: date, default_goal: int, periods: Iterable[GoalPeriodEntity]) -> int:
        period = self.find_period(day, periods)
        if period is None:
            return default_goal

        logger.debug("Goal for %s taken from period %s: %s", day, period.id, period.goal)
        return period.goal

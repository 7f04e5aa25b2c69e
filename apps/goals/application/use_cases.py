# apps/goals/application/use_cases.py
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from apps.goals.domain.entities import GoalPeriodEntity, MIN_GOAL, MAX_GOAL
from apps.goals.ports.repositories import IGoalPeriodRepository

logger = logging.getLogger(__name__)


@dataclass
class AddGoalPeriodInput:
    user_id: int
    goal: int
    start_date: date
    end_date: date


class AddGoalPeriodUseCase:
    def __init__(self, repository: IGoalPeriodRepository):
        self.repository = repository

    def execute(self, input_dto: AddGoalPeriodInput) -> GoalPeriodEntity:
        if not MIN_GOAL <= input_dto.goal <= MAX_GOAL:
            raise ValueError(f"Goal must be a number between {MIN_GOAL} and {MAX_GOAL}")
        if input_dto.start_date > input_dto.end_date:
            raise ValueError("Start date must not be after end date")

        # Nakładanie się okresów jest dozwolone, rozstrzyga GoalResolver
        period = GoalPeriodEntity(
            id=None,
            goal=input_dto.goal,
            start_date=input_dto.start_date,
            end_date=input_dto.end_date,
            is_active=True
        )
        saved = self.repository.add(input_dto.user_id, period)
        logger.info("Goal period %s added for user %s", saved.id, input_dto.user_id)
        return saved


class DeactivateGoalPeriodUseCase:
    def __init__(self, repository: IGoalPeriodRepository):
        self.repository = repository

    def execute(self, user_id: int, period_id: int) -> Optional[GoalPeriodEntity]:
        period = self.repository.deactivate(user_id, period_id)
        if period is not None:
            logger.info("Goal period %s deactivated for user %s", period_id, user_id)
        return period

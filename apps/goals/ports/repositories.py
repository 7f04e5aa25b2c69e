# apps/goals/ports/repositories.py
from abc import ABC, abstractmethod
from typing import List, Optional
from apps.goals.domain.entities import GoalPeriodEntity


class IGoalPeriodRepository(ABC):
    @abstractmethod
    def list_for_user(self, user_id: int) -> List[GoalPeriodEntity]:
        """Zwraca okresy użytkownika w kolejności dodania (created_at rosnąco)."""
        pass

    @abstractmethod
    def get_by_id(self, user_id: int, period_id: int) -> Optional[GoalPeriodEntity]:
        pass

    @abstractmethod
    def add(self, user_id: int, period: GoalPeriodEntity) -> GoalPeriodEntity:
        pass

    @abstractmethod
    def deactivate(self, user_id: int, period_id: int) -> Optional[GoalPeriodEntity]:
        """Miękkie usunięcie (is_active=False). Zwraca None, jeśli okres nie istnieje."""
        pass

    @abstractmethod
    def get_default_goal(self, user_id: int) -> int:
        pass

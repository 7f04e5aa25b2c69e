# apps/goals/adapters/orm_repositories.py
from typing import List, Optional
from apps.goals.domain.entities import GoalPeriodEntity
from apps.goals.ports.repositories import IGoalPeriodRepository
from apps.goals.models import GoalPeriod as GoalPeriodModel


class DjangoGoalPeriodRepository(IGoalPeriodRepository):
    def to_entity(self, model: GoalPeriodModel) -> GoalPeriodEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return GoalPeriodEntity(
            id=model.id,
            goal=model.goal,
            start_date=model.start_date,
            end_date=model.end_date,
            is_active=model.is_active,
            created_at=model.created_at
        )

    def list_for_user(self, user_id: int) -> List[GoalPeriodEntity]:
        # Jawne order_by: tie-break resolvera zależy od tej kolejności
        qs = GoalPeriodModel.objects.filter(user_id=user_id).order_by('created_at', 'id')
        return [self.to_entity(p) for p in qs]

    def get_by_id(self, user_id: int, period_id: int) -> Optional[GoalPeriodEntity]:
        try:
            return self.to_entity(GoalPeriodModel.objects.get(id=period_id, user_id=user_id))
        except GoalPeriodModel.DoesNotExist:
            return None

    def add(self, user_id: int, period: GoalPeriodEntity) -> GoalPeriodEntity:
        obj = GoalPeriodModel.objects.create(
            user_id=user_id,
            goal=period.goal,
            start_date=period.start_date,
            end_date=period.end_date,
            is_active=period.is_active
        )
        return self.to_entity(obj)

    def deactivate(self, user_id: int, period_id: int) -> Optional[GoalPeriodEntity]:
        updated = GoalPeriodModel.objects.filter(id=period_id, user_id=user_id).update(is_active=False)
        if not updated:
            return None
        return self.get_by_id(user_id, period_id)

    def get_default_goal(self, user_id: int) -> int:
        from apps.core.models import UserProfile, default_daily_goal

        profile = UserProfile.objects.filter(user_id=user_id).only('daily_goal').first()
        return profile.daily_goal if profile else default_daily_goal()

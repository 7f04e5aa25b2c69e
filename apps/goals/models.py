# apps/goals/models.py
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models

from apps.goals.domain.entities import MIN_GOAL, MAX_GOAL


class GoalPeriod(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='goal_periods')
    goal = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_GOAL), MaxValueValidator(MAX_GOAL)],
        help_text="Daily target for the period (1-50)"
    )
    start_date = models.DateField()
    end_date = models.DateField()

    # Miękkie usuwanie: nieaktywne okresy zostają w historii
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        # Kolejność dodania = kolejność rozstrzygania nakładających się okresów
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.goal}/day {self.start_date} - {self.end_date}"

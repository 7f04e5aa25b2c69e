# apps/core/models.py
from django.conf import settings
from django.contrib.auth.models import User
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.db.models.signals import post_save
from django.dispatch import receiver

from apps.goals.domain.entities import DEFAULT_GOAL, MIN_GOAL, MAX_GOAL


def default_daily_goal():
    return getattr(settings, 'TRACKER_DEFAULT_GOAL', DEFAULT_GOAL)


class UserProfile(models.Model):
    # Login to numer telefonu (User.username)
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')

    # Domyślny cel dzienny (ile nowych klientów), gdy żaden okres celu nie obejmuje dnia
    daily_goal = models.PositiveSmallIntegerField(
        default=default_daily_goal,
        validators=[MinValueValidator(MIN_GOAL), MaxValueValidator(MAX_GOAL)],
        help_text="Daily client-addition target (1-50)"
    )

    created_at = models.DateTimeField(auto_now_add=True)

    @property
    def phone_number(self):
        return self.user.username

    def __str__(self):
        return f"Profile of {self.user.username}"


# Sygnał: Twórz profil automatycznie przy tworzeniu Usera
@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    if created:
        UserProfile.objects.create(user=instance)


@receiver(post_save, sender=User)
def save_user_profile(sender, instance, **kwargs):
    if hasattr(instance, 'profile'):
        instance.profile.save()

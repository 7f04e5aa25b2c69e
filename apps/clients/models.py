# apps/clients/models.py
from django.conf import settings
from django.db import models


class Client(models.Model):
    class StatusChoices(models.TextChoices):
        STARTED = 'started', 'Started'
        ACTIVE = 'active', 'Active'
        ON_ACTION = 'onaction', 'On Action'
        CLOSED = 'closed', 'Closed'
        DEAD = 'dead', 'Dead'

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='clients')

    business_name = models.CharField(max_length=200)
    manager_name = models.CharField(max_length=200)

    # Lista numerów (JSON), główny wskazuje primary_phone_index
    phone_numbers = models.JSONField(default=list)
    primary_phone_index = models.PositiveIntegerField(default=0)

    first_visit = models.DateField()
    next_visit = models.DateField()
    place = models.CharField(max_length=200)

    status = models.CharField(max_length=20, choices=StatusChoices.choices, default=StatusChoices.STARTED)
    deal = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    description = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'created_at'], name='client_user_created_idx'),
            models.Index(fields=['user', 'next_visit'], name='client_user_next_visit_idx'),
        ]

    def __str__(self):
        return self.business_name


class Lead(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='leads')
    name = models.CharField(max_length=200)
    place = models.CharField(max_length=200)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.place})"

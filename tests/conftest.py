from datetime import date, datetime

import pytest
from django.contrib.auth.models import User

from apps.clients.models import Client
from apps.goals.models import GoalPeriod

PHONE = "+48 600 100 200"


@pytest.fixture
def user(db) -> User:
    return User.objects.create_user(username=PHONE, password="secret123")


@pytest.fixture
def other_user(db) -> User:
    return User.objects.create_user(username="+48 600 999 999", password="secret123")


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def make_client(db):
    """Tworzy klienta z zadanym created_at (auto_now_add nadpisujemy update'em)."""
    def _make(owner, created_at: datetime = None, **overrides):
        data = {
            'business_name': 'Cafe Roma',
            'manager_name': 'Anna',
            'place': 'Krakow',
            'phone_numbers': ['+48 600 100 300'],
            'first_visit': date(2024, 1, 1),
            'next_visit': date(2024, 1, 10),
        }
        data.update(overrides)
        obj = Client.objects.create(user=owner, **data)
        if created_at is not None:
            Client.objects.filter(pk=obj.pk).update(created_at=created_at)
            obj.refresh_from_db()
        return obj
    return _make


@pytest.fixture
def make_period(db):
    def _make(owner, goal, start_date, end_date, is_active=True):
        return GoalPeriod.objects.create(
            user=owner, goal=goal, start_date=start_date, end_date=end_date, is_active=is_active
        )
    return _make

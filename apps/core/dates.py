# apps/core/dates.py
from datetime import date, datetime

import pytz
from django.conf import settings


def get_day_timezone():
    """Strefa, w której liczymy granice dni (jedna dla całej aplikacji)."""
    name = getattr(settings, 'TRACKER_DAY_TIME_ZONE', None) or settings.TIME_ZONE
    return pytz.timezone(name)


def local_today() -> date:
    return datetime.now(get_day_timezone()).date()

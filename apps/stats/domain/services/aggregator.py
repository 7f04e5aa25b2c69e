# apps/stats/domain/services/aggregator.py
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Iterable, List

import pytz

from apps.goals.domain.entities import as_calendar_date
from apps.stats.domain.entities import DailyCount
from apps.stats.domain.exceptions import InvalidRangeError


def iter_days(start: date, end: date):
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


class DailyAggregator:
    """
    Zlicza zdarzenia (klientów) per dzień kalendarzowy.

    Każde zdarzenie trafia do dokładnie jednego dnia: created_at przeliczone
    na strefę `tz` i obcięte do daty. Naiwne datetime traktujemy jako czas
    już wyrażony w tej strefie.
    """

    def __init__(self, tz=None):
        self.tz = tz or pytz.UTC

    def event_day(self, event) -> date:
        ts = event.created_at
        if isinstance(ts, datetime):
            if ts.tzinfo is not None:
                ts = ts.astimezone(self.tz)
            return ts.date()
        return ts

    def count_by_day(self, events: Iterable) -> Counter:
        return Counter(self.event_day(e) for e in events or ())

    def aggregate(self, events: Iterable, range_start: date, range_end: date) -> List[DailyCount]:
        """Gęsta lista (data, liczba) dla każdego dnia zakresu, włącznie z końcami."""
        range_start = as_calendar_date(range_start)
        range_end = as_calendar_date(range_end)
        if range_end < range_start:
            raise InvalidRangeError(f"Range end {range_end} is before range start {range_start}")

        counts = self.count_by_day(events)
        return [DailyCount(date=day, count=counts.get(day, 0)) for day in iter_days(range_start, range_end)]

    def events_between(self, events: Iterable, start: date, end: date) -> list:
        return [e for e in events or () if start <= self.event_day(e) <= end]

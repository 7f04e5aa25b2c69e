from datetime import date, datetime

import pytest
import pytz

from apps.stats.domain.entities import ClientEvent, DailyCount
from apps.stats.domain.exceptions import InvalidRangeError
from apps.stats.domain.services.aggregator import DailyAggregator
from tests.helpers import events_on, utc


class TestAggregateDensity:
    def test_zero_events_gives_one_entry_per_day(self):
        result = DailyAggregator().aggregate([], date(2024, 1, 1), date(2024, 1, 3))

        assert len(result) == 3
        assert [r.count for r in result] == [0, 0, 0]
        assert [r.date for r in result] == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]

    def test_single_day_range(self):
        result = DailyAggregator().aggregate(None, date(2024, 1, 1), date(2024, 1, 1))
        assert result == [DailyCount(date=date(2024, 1, 1), count=0)]

    def test_reversed_range_raises(self):
        with pytest.raises(InvalidRangeError):
            DailyAggregator().aggregate([], date(2024, 1, 3), date(2024, 1, 1))


class TestAggregateCounts:
    def test_counts_per_day(self):
        events = events_on(date(2024, 1, 2), 3) + events_on(date(2024, 1, 3), 1)
        result = DailyAggregator().aggregate(events, date(2024, 1, 1), date(2024, 1, 3))

        assert [r.count for r in result] == [0, 3, 1]

    def test_events_outside_range_are_ignored(self):
        events = events_on(date(2023, 12, 31), 2) + events_on(date(2024, 1, 2), 1) + events_on(date(2024, 1, 4), 5)
        result = DailyAggregator().aggregate(events, date(2024, 1, 1), date(2024, 1, 3))

        assert [r.count for r in result] == [0, 1, 0]

    def test_input_is_not_mutated(self):
        events = events_on(date(2024, 1, 2), 2)
        snapshot = list(events)

        DailyAggregator().aggregate(events, date(2024, 1, 1), date(2024, 1, 3))
        assert events == snapshot

    def test_repeated_calls_give_same_result(self):
        events = events_on(date(2024, 1, 2), 2)
        aggregator = DailyAggregator()

        first = aggregator.aggregate(events, date(2024, 1, 1), date(2024, 1, 3))
        second = aggregator.aggregate(events, date(2024, 1, 1), date(2024, 1, 3))
        assert first == second


class TestDayBoundary:
    def test_aware_timestamp_converted_to_configured_zone(self):
        # 23:30 UTC to już następny dzień w Warszawie
        event = ClientEvent(created_at=utc(2024, 1, 1, 23, 30))

        assert DailyAggregator().event_day(event) == date(2024, 1, 1)
        assert DailyAggregator(pytz.timezone('Europe/Warsaw')).event_day(event) == date(2024, 1, 2)

    def test_naive_timestamp_read_as_local(self):
        event = ClientEvent(created_at=datetime(2024, 1, 1, 23, 30))
        assert DailyAggregator(pytz.timezone('Europe/Warsaw')).event_day(event) == date(2024, 1, 1)

    def test_plain_date_used_as_is(self):
        event = ClientEvent(created_at=date(2024, 1, 5))
        assert DailyAggregator().event_day(event) == date(2024, 1, 5)

    def test_each_event_lands_in_exactly_one_day(self):
        tz = pytz.timezone('America/New_York')
        events = [ClientEvent(created_at=utc(2024, 3, 10, h, 0)) for h in range(24)]
        result = DailyAggregator(tz).aggregate(events, date(2024, 3, 8), date(2024, 3, 12))

        assert sum(r.count for r in result) == 24

    def test_duck_typed_events(self):
        class Record:
            def __init__(self, created_at):
                self.created_at = created_at
                self.phone = "+48 600 100 200"

        result = DailyAggregator().aggregate([Record(utc(2024, 1, 2, 9, 0))], date(2024, 1, 1), date(2024, 1, 2))
        assert [r.count for r in result] == [0, 1]

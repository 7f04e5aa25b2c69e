from datetime import date

import pytest
import pytz

from apps.stats.domain.entities import DayStatus
from apps.stats.domain.exceptions import InvalidRangeError
from apps.stats.domain.services.aggregator import DailyAggregator
from apps.stats.domain.services.calendar_grid import CalendarGridBuilder
from tests.helpers import events_on, period, utc


@pytest.fixture
def builder():
    return CalendarGridBuilder()


class TestGridShape:
    def test_leap_february_2024(self, builder):
        grid = builder.build_month_grid(2024, 2, [], 4, [])
        cells = grid.cells

        assert cells[0].date == date(2024, 1, 28)
        assert cells[-1].date == date(2024, 3, 2)
        assert len(cells) == 35
        assert all(len(week) == 7 for week in grid.weeks)
        assert sum(1 for c in cells if c.in_current_month) == 29

    def test_rows_start_on_sunday(self, builder):
        grid = builder.build_month_grid(2024, 2, [], 4, [])
        # weekday(): poniedziałek = 0, niedziela = 6
        assert all(week[0].date.weekday() == 6 for week in grid.weeks)
        assert all(week[-1].date.weekday() == 5 for week in grid.weeks)

    def test_month_starting_on_sunday(self, builder):
        grid = builder.build_month_grid(2024, 9, [], 4, [])

        assert grid.cells[0].date == date(2024, 9, 1)
        assert grid.cells[0].in_current_month
        assert grid.cells[-1].date == date(2024, 10, 5)

    def test_six_week_month(self, builder):
        # Marzec 2024 zaczyna się w piątek, 31 dni
        grid = builder.build_month_grid(2024, 3, [], 4, [])
        assert len(grid.weeks) == 6

    def test_dates_are_consecutive(self, builder):
        cells = builder.build_month_grid(2023, 12, [], 4, []).cells
        for prev, cur in zip(cells, cells[1:]):
            assert (cur.date - prev.date).days == 1


class TestGridContent:
    def test_adjacent_month_cells_are_computed(self, builder):
        events = events_on(date(2024, 1, 28), 5) + events_on(date(2024, 3, 2), 1)
        grid = builder.build_month_grid(2024, 2, events, 4, [])

        first, last = grid.cells[0], grid.cells[-1]
        assert not first.in_current_month
        assert first.count == 5
        assert first.effective_goal == 4
        assert first.status == DayStatus.EXCEEDED
        assert last.count == 1
        assert last.status == DayStatus.BELOW

    def test_month_total_counts_only_current_month(self, builder):
        events = events_on(date(2024, 1, 28), 5) + events_on(date(2024, 2, 10), 2)
        grid = builder.build_month_grid(2024, 2, events, 4, [])

        assert grid.month_total == 2

    def test_status_boundaries(self, builder):
        events = events_on(date(2024, 2, 5), 3) + events_on(date(2024, 2, 6), 4) + events_on(date(2024, 2, 7), 5)
        cells = {c.date: c for c in builder.build_month_grid(2024, 2, events, 4, []).cells}

        assert cells[date(2024, 2, 5)].status == DayStatus.BELOW
        assert cells[date(2024, 2, 6)].status == DayStatus.MET
        assert cells[date(2024, 2, 7)].status == DayStatus.EXCEEDED
        assert cells[date(2024, 2, 8)].status == DayStatus.BELOW

    def test_goal_periods_applied_per_cell(self, builder):
        periods = [period(10, date(2024, 2, 10), date(2024, 2, 12))]
        cells = {c.date: c for c in builder.build_month_grid(2024, 2, [], 4, periods).cells}

        assert cells[date(2024, 2, 9)].effective_goal == 4
        assert cells[date(2024, 2, 10)].effective_goal == 10
        assert cells[date(2024, 2, 12)].effective_goal == 10
        assert cells[date(2024, 2, 13)].effective_goal == 4

    def test_uses_aggregator_time_zone(self):
        builder = CalendarGridBuilder(aggregator=DailyAggregator(pytz.timezone('Europe/Warsaw')))
        events = [type('E', (), {'created_at': utc(2024, 2, 9, 23, 30)})()]
        cells = {c.date: c for c in builder.build_month_grid(2024, 2, events, 4, []).cells}

        assert cells[date(2024, 2, 9)].count == 0
        assert cells[date(2024, 2, 10)].count == 1


class TestGridErrors:
    @pytest.mark.parametrize('month', [0, 13, -1])
    def test_invalid_month(self, builder, month):
        with pytest.raises(InvalidRangeError):
            builder.build_month_grid(2024, month, [], 4, [])

    def test_invalid_range_is_value_error(self, builder):
        with pytest.raises(ValueError):
            builder.grid_range(2024, 13)


class TestNavigation:
    def test_previous_wraps_year(self, builder):
        grid = builder.build_month_grid(2024, 1, [], 4, [])
        assert grid.previous_month() == (2023, 12)
        assert grid.next_month() == (2024, 2)

    def test_next_wraps_year(self, builder):
        grid = builder.build_month_grid(2024, 12, [], 4, [])
        assert grid.next_month() == (2025, 1)
        assert grid.previous_month() == (2024, 11)

"""Month grid partitioning: complete Sunday-to-Saturday weeks around a month."""

import pendulum
import pytest

from tourneycal.errors import InvalidArgumentError
from tourneycal.layout.partition import build_month_grid, sunday_offset


def _flatten(grid):
    return [day for week in grid["weeks"] for day in week]


def test_february_2024_leap_year_grid():
    """Feb 1st 2024 is a Thursday: 5 weeks, 29 in-month days, 4 leading and 2 trailing."""
    grid = build_month_grid(2024, 1)
    days = _flatten(grid)

    assert len(grid["weeks"]) == 5
    assert sum(1 for day in days if day["in_current_month"]) == 29

    leading = [day for day in days if day["date"] < pendulum.date(2024, 2, 1)]
    trailing = [day for day in days if day["date"] > pendulum.date(2024, 2, 29)]
    assert [day["date"].day for day in leading] == [28, 29, 30, 31]
    assert [day["date"].day for day in trailing] == [1, 2]
    assert not any(day["in_current_month"] for day in leading + trailing)


def test_four_week_month():
    """Feb 2015 starts on a Sunday and has 28 days."""
    grid = build_month_grid(2015, 1)
    assert len(grid["weeks"]) == 4
    assert all(day["in_current_month"] for day in _flatten(grid))


def test_six_week_month():
    """May 2026 starts on a Friday and has 31 days."""
    grid = build_month_grid(2026, 4)
    assert len(grid["weeks"]) == 6
    assert grid["weeks"][0][5]["date"] == pendulum.date(2026, 5, 1)


def test_century_leap_rules():
    """1900 is not a leap year, 2000 is."""
    feb_1900 = [d for d in _flatten(build_month_grid(1900, 1)) if d["in_current_month"]]
    feb_2000 = [d for d in _flatten(build_month_grid(2000, 1)) if d["in_current_month"]]
    assert len(feb_1900) == 28
    assert len(feb_2000) == 29


@pytest.mark.parametrize("year", [1999, 2023, 2024, 2025])
@pytest.mark.parametrize("month", range(12))
def test_grid_is_contiguous_and_complete(year, month):
    grid = build_month_grid(year, month)
    days = _flatten(grid)
    dates = [day["date"] for day in days]

    assert grid["year"] == year
    assert grid["month"] == month
    assert 4 <= len(grid["weeks"]) <= 6
    assert all(len(week) == 7 for week in grid["weeks"])
    assert sunday_offset(dates[0]) == 0
    assert sunday_offset(dates[-1]) == 6
    for previous, current in zip(dates, dates[1:]):
        assert current.toordinal() - previous.toordinal() == 1

    first_day = pendulum.date(year, month + 1, 1)
    in_month = [day["date"] for day in days if day["in_current_month"]]
    assert in_month[0] == first_day
    assert len(in_month) == first_day.days_in_month
    assert all(d.month == month + 1 for d in in_month)


def test_grid_is_deterministic():
    assert build_month_grid(2024, 8) == build_month_grid(2024, 8)


@pytest.mark.parametrize("month", [-1, 12, 1.0, True, "1"])
def test_invalid_month_is_rejected(month):
    with pytest.raises(InvalidArgumentError):
        build_month_grid(2024, month)


def test_grid_outside_date_range_is_rejected():
    # Jan 1st of year 1 is a Monday; the leading Sunday does not exist
    with pytest.raises(InvalidArgumentError):
        build_month_grid(1, 0)
    # Dec 31st 9999 is a Friday; the trailing Saturday does not exist
    with pytest.raises(InvalidArgumentError):
        build_month_grid(9999, 11)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        build_month_grid(2024, 13)

"""Date parsing and display helpers."""

import datetime

import pendulum
import pytest

from tourneycal.slug import slugify
from tourneycal.time import date_from_value, format_date_range


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ((2024, 2, 3), None, "Feb 3, 2024"),
        ((2024, 2, 3), (2024, 2, 3), "Feb 3, 2024"),
        ((2024, 2, 3), (2024, 2, 5), "Feb 3-5, 2024"),
        ((2024, 1, 30), (2024, 2, 2), "Jan 30 - Feb 2, 2024"),
        ((2024, 12, 30), (2025, 1, 2), "Dec 30, 2024 - Jan 2, 2025"),
    ],
)
def test_format_date_range(start, end, expected):
    assert (
        format_date_range(
            pendulum.date(*start), pendulum.date(*end) if end is not None else None
        )
        == expected
    )


def test_date_from_value_accepts_strings_and_dates():
    assert date_from_value("2024-02-29") == pendulum.date(2024, 2, 29)
    assert date_from_value(datetime.date(2024, 2, 29)) == pendulum.date(2024, 2, 29)
    assert isinstance(date_from_value(datetime.date(2024, 2, 29)), pendulum.Date)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Orlando Winter Open", "orlando-winter-open"),
        ("Seniors (50+) Classic", "seniors-50-classic"),
        ("  Gulf -- Coast  Cup ", "gulf-coast-cup"),
        ("!!!", ""),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected

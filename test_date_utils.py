from datetime import date, datetime

import pytest

from constants import Scope
from date_utils import (
    create,
    create_in_month,
    day_of_week,
    is_after,
    is_before,
    is_included,
    is_same_date,
    is_same_month,
    is_same_year,
)
from locale_names import LANGUAGES, get_short_day_name, get_short_month_name


def test_create_normalises_date_like_values():
    assert create(date(2024, 3, 15)) == date(2024, 3, 15)
    assert create(datetime(2024, 3, 15, 23, 59)) == date(2024, 3, 15)
    assert type(create(datetime(2024, 3, 15, 1))) is date
    assert create("2024-03-15") == date(2024, 3, 15)
    assert create(" 2024-03-15 ") == date(2024, 3, 15)
    assert create(1_700_000_000) == date.fromtimestamp(1_700_000_000)


@pytest.mark.parametrize("value", [None, [2024, 3, 15], True])
def test_create_rejects_unsupported_types(value):
    with pytest.raises(TypeError):
        create(value)


def test_create_rejects_malformed_strings():
    with pytest.raises(ValueError):
        create("not a date")


@pytest.mark.parametrize(
    "year, month, day, expected",
    [
        (2024, 3, 15, date(2024, 3, 15)),
        (2024, 13, 1, date(2025, 1, 1)),
        (2024, 0, 1, date(2023, 12, 1)),
        (2024, -11, 1, date(2023, 1, 1)),
        (2024, 3, 0, date(2024, 2, 29)),
        (2023, 2, 30, date(2023, 3, 2)),
        (2024, 1, -1, date(2023, 12, 30)),
        (2024, 12, 32, date(2025, 1, 1)),
    ],
)
def test_create_in_month_overflow(year, month, day, expected):
    assert create_in_month(year, month, day) == expected


def test_day_of_week_is_sunday_based():
    assert day_of_week(date(2024, 3, 3)) == 0
    assert day_of_week(date(2024, 3, 1)) == 5
    assert day_of_week(date(2024, 3, 2)) == 6


def test_same_period_checks():
    a = date(2024, 3, 15)
    assert is_same_date(a, date(2024, 3, 15))
    assert not is_same_date(a, date(2024, 3, 16))
    assert is_same_month(a, date(2024, 3, 1))
    assert not is_same_month(a, date(2023, 3, 15))
    assert is_same_year(a, date(2024, 12, 31))


def test_before_after_truncate_to_scope():
    a, b = date(2024, 3, 1), date(2024, 3, 31)
    assert is_before(a, b)
    assert not is_before(a, b, Scope.MONTHS)
    assert is_after(date(2024, 4, 1), b, Scope.MONTHS)
    assert not is_after(date(2024, 12, 31), b, Scope.YEARS)
    assert is_after(date(2025, 1, 1), b, Scope.YEARS)


def test_is_included():
    dates = [date(2024, 3, 15)]
    assert is_included([0, 6], 6)
    assert not is_included([0, 6], 5)
    assert is_included(dates, datetime(2024, 3, 15, 12), is_same_date)
    assert not is_included(dates, date(2024, 3, 16), is_same_date)
    assert not is_included([], date(2024, 3, 16), is_same_date)


@pytest.mark.parametrize("language", LANGUAGES)
def test_name_tables_are_complete_and_distinct(language):
    days = [get_short_day_name(language, i) for i in range(7)]
    months = [get_short_month_name(language, m) for m in range(1, 13)]
    assert len(set(days)) == 7
    assert len(set(months)) == 12


def test_name_lookup_errors():
    assert get_short_day_name("en", 0) == "Sun"
    assert get_short_month_name("en", 12) == "Dec"
    with pytest.raises(ValueError):
        get_short_day_name("xx", 0)
    with pytest.raises(IndexError):
        get_short_day_name("en", 7)
    with pytest.raises(IndexError):
        get_short_month_name("en", 0)

"""Date construction and comparison helpers — no grid knowledge."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Callable, Iterable

from constants import MONTHS_IN_YEAR, Scope


def create(value: Any) -> date:
    """Normalise a date-like value to a ``date``.

    Accepts a ``date``, a ``datetime`` (time part dropped), an ISO-8601
    string or a POSIX timestamp in seconds (read in local time).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip()).date()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return date.fromtimestamp(value)
    raise TypeError(f"Cannot create a date from {type(value).__name__}")


def create_in_month(year: int, month: int, day: int) -> date:
    """Build a date, rolling month and day overflow into adjacent periods.

    ``create_in_month(2024, 13, 1)`` is 2025-01-01, day 0 is the last day
    of the previous month and 2023-02-30 becomes 2023-03-02.
    """
    year_carry, month_index = divmod(month - 1, MONTHS_IN_YEAR)
    first = date(year + year_carry, month_index + 1, 1)
    return first + timedelta(days=day - 1)


def day_of_week(d: date) -> int:
    """Return the Sunday-based weekday (0 = Sunday ... 6 = Saturday)."""
    return d.isoweekday() % 7


# ------------------------------------------------------------------
# Comparisons
# ------------------------------------------------------------------
def _key(d: date, scope: Scope) -> tuple[int, ...]:
    if scope == Scope.YEARS:
        return (d.year,)
    if scope == Scope.MONTHS:
        return (d.year, d.month)
    return (d.year, d.month, d.day)


def is_same_year(one: date, two: date) -> bool:
    return one.year == two.year


def is_same_month(one: date, two: date) -> bool:
    return one.year == two.year and one.month == two.month


def is_same_date(one: date, two: date) -> bool:
    return one.year == two.year and one.month == two.month and one.day == two.day


def is_before(one: date, two: date, scope: Scope = Scope.DAYS) -> bool:
    """True if ``one`` is before ``two`` at the granularity of ``scope``."""
    return _key(one, scope) < _key(two, scope)


def is_after(one: date, two: date, scope: Scope = Scope.DAYS) -> bool:
    """True if ``one`` is after ``two`` at the granularity of ``scope``."""
    return _key(one, scope) > _key(two, scope)


def is_included(
    collection: Iterable[Any],
    item: Any,
    equals: Callable[[Any, Any], bool] | None = None,
) -> bool:
    """Membership test, optionally with a custom equality function."""
    if equals is None:
        return item in collection
    return any(equals(entry, item) for entry in collection)

"""Pure calendar calculations — no UI dependencies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable

from constants import DAYS_IN_WEEK, GRID_SHAPES, YEARS_IN_DECADE, Scope
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
from locale_names import get_short_day_name, get_short_month_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisabledSpec:
    """Dates and Sunday-based weekdays to disable; exceptions always win."""

    dates: tuple[date, ...] = ()
    days: tuple[int, ...] = ()
    exceptions: tuple[date, ...] = ()


@dataclass(frozen=True)
class ViewContext:
    """Per-render inputs supplied by the caller."""

    view: date
    scope: Scope = Scope.DAYS
    first_day: int = 0
    selected: date | None = None
    today: date | None = None
    minimum: date | None = None
    maximum: date | None = None
    disabled: DisabledSpec = field(default_factory=DisabledSpec)


def _unknown_scope(scope: Any) -> None:
    logger.debug("Unknown scope %r, falling back to %s", scope, Scope.DAYS.value)


# --- weekdays ---------------------------------------------------------------

def weekdays_for_display(first_day: int = 0) -> list[int]:
    """Return the 7 Sunday-based weekday numbers, rotated to start at first_day."""
    return [(i + first_day) % DAYS_IN_WEEK for i in range(DAYS_IN_WEEK)]


def weekday_names(language: str, first_day: int = 0) -> list[str]:
    return [get_short_day_name(language, d) for d in weekdays_for_display(first_day)]


# --- date collections -------------------------------------------------------

def dates_for_rows(view: Any, scope: Scope, first_day: int = 0) -> list[list[date]]:
    """Return the grid of dates to render for a view and scope."""
    view = create(view)
    if scope == Scope.YEARS:
        return dates_for_rows_of_years(view.year, view.month)
    if scope == Scope.MONTHS:
        return dates_for_rows_of_months(view.year)
    if scope != Scope.DAYS:
        _unknown_scope(scope)
    return dates_for_rows_of_weeks(view.year, view.month, first_day)


def dates_for_rows_of_years(year: int, month: int) -> list[list[date]]:
    """Return one decade of years, each on day 1 of ``month``.

    The grid always starts at the decade boundary (2023 -> 2020).
    """
    year -= year % YEARS_IN_DECADE
    shape = GRID_SHAPES[Scope.YEARS]
    return [
        [date(year + col + row * shape.columns, month, 1) for col in range(shape.columns)]
        for row in range(shape.rows)
    ]


def dates_for_rows_of_months(year: int) -> list[list[date]]:
    """Return the months of a year, each on day 1."""
    shape = GRID_SHAPES[Scope.MONTHS]
    return [
        [date(year, 1 + col + row * shape.columns, 1) for col in range(shape.columns)]
        for row in range(shape.rows)
    ]


def dates_for_rows_of_weeks(year: int, month: int, first_day: int = 0) -> list[list[date]]:
    """Return the week rows for a month display.

    Leading and trailing cells hold dates of the adjacent months. An extra
    row is added when the last day of the first week is outside the month.
    """
    shift = 0 if _month_of_last_day_in_first_week(year, month) == month else 1
    rows = GRID_SHAPES[Scope.DAYS].rows + shift
    return [dates_for_week(year, month, week, first_day) for week in range(rows)]


def dates_for_week(year: int, month: int, week_index: int, first_day: int = 0) -> list[date]:
    """Return the 7 dates of one week row of a month display.

    Day numbers below 1 or past the month's end roll into the previous or
    next month.
    """
    start_day = _start_day_of_month(year, month)
    offset = week_index * DAYS_IN_WEEK - start_day + first_day
    return [
        create_in_month(year, month, column + offset)
        for column in range(1, DAYS_IN_WEEK + 1)
    ]


def _month_of_last_day_in_first_week(year: int, month: int) -> int:
    start_day = _start_day_of_month(year, month)
    return create_in_month(year, month, DAYS_IN_WEEK - start_day).month


def _start_day_of_month(year: int, month: int) -> int:
    return day_of_week(date(year, month, 1))


# --- relative dates ---------------------------------------------------------

def add_months(d: Any, change: int) -> date:
    """Shift by whole months, keeping the day number (no clamping).

    2023-01-31 plus one month is 2023-03-03.
    """
    d = create(d)
    return create_in_month(d.year, d.month + change, d.day)


def add_years(d: Any, change: int) -> date:
    d = create(d)
    return create_in_month(d.year + change, d.month, d.day)


def add_decades(d: Any, change: int) -> date:
    return add_years(d, change * YEARS_IN_DECADE)


def next_decade(d: Any) -> date:
    return add_decades(d, 1)


def next_year(d: Any) -> date:
    return add_years(d, 1)


def next_month(d: Any) -> date:
    return add_months(d, 1)


def previous_decade(d: Any) -> date:
    return add_decades(d, -1)


def previous_year(d: Any) -> date:
    return add_years(d, -1)


def previous_month(d: Any) -> date:
    return add_months(d, -1)


_NEXT_IN_SCOPE: dict[Scope, Callable[[Any], date]] = {
    Scope.YEARS: next_decade,
    Scope.MONTHS: next_year,
    Scope.DAYS: next_month,
}

_PREVIOUS_IN_SCOPE: dict[Scope, Callable[[Any], date]] = {
    Scope.YEARS: previous_decade,
    Scope.MONTHS: previous_year,
    Scope.DAYS: previous_month,
}


def next_in_scope(d: Any, scope: Scope) -> date:
    """Page forward one decade, year or month depending on the scope."""
    getter = _NEXT_IN_SCOPE.get(scope)
    if getter is None:
        _unknown_scope(scope)
        getter = next_month
    return getter(d)


def previous_in_scope(d: Any, scope: Scope) -> date:
    """Page back one decade, year or month depending on the scope."""
    getter = _PREVIOUS_IN_SCOPE.get(scope)
    if getter is None:
        _unknown_scope(scope)
        getter = previous_month
    return getter(d)


# --- start dates ------------------------------------------------------------

def start_of_month(d: Any) -> date:
    return create(d).replace(day=1)


def start_of_month_in_next_scope(d: Any, scope: Scope) -> date:
    return start_of_month(next_in_scope(d, scope))


def start_of_month_in_previous_scope(d: Any, scope: Scope) -> date:
    return start_of_month(previous_in_scope(d, scope))


# --- labels -----------------------------------------------------------------

def label_for(d: date, scope: Scope, language: str = "en") -> str:
    """Return the cell text: year, short month name or day number."""
    if scope == Scope.YEARS:
        return str(d.year)
    if scope == Scope.MONTHS:
        return get_short_month_name(language, d.month)
    return str(d.day)


# --- checkers ---------------------------------------------------------------

def is_disabled(d: date, context: ViewContext) -> bool:
    """True if the cell can't be picked.

    An exception date is always enabled. Otherwise a date is disabled by
    its weekday, by an explicit date, or by falling outside the min/max
    bounds compared at the scope's granularity.
    """
    disabled = context.disabled
    if is_included(disabled.exceptions, d, is_same_date):
        return False
    return (
        is_included(disabled.days, day_of_week(d))
        or is_included(disabled.dates, d, is_same_date)
        or (context.minimum is not None and is_before(d, context.minimum, context.scope))
        or (context.maximum is not None and is_after(d, context.maximum, context.scope))
    )


def is_selected(d: date, context: ViewContext) -> bool:
    if context.selected is None:
        return False
    if context.scope == Scope.YEARS:
        checker = is_same_year
    elif context.scope == Scope.MONTHS:
        checker = is_same_month
    else:
        checker = is_same_date
    return checker(context.selected, d)


def is_today(d: date, context: ViewContext) -> bool:
    if context.scope != Scope.DAYS or context.today is None:
        return False
    return is_same_date(context.today, d)


def is_out_of_view(d: date, context: ViewContext) -> bool:
    """True for leading/trailing cells of a day grid that belong to another month."""
    return context.scope == Scope.DAYS and not is_same_month(context.view, d)

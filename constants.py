"""Scopes and fixed grid shapes shared by the calendar modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DAYS_IN_WEEK = 7
MONTHS_IN_YEAR = 12
YEARS_IN_DECADE = 10


class Scope(str, Enum):
    YEARS = "years"
    MONTHS = "months"
    DAYS = "days"


@dataclass(frozen=True)
class GridShape:
    rows: int
    columns: int


GRID_SHAPES: dict[Scope, GridShape] = {
    Scope.YEARS: GridShape(rows=5, columns=2),
    Scope.MONTHS: GridShape(rows=4, columns=3),
    # 6 week rows fit any month, whatever its leading/trailing days
    Scope.DAYS: GridShape(rows=6, columns=DAYS_IN_WEEK),
}

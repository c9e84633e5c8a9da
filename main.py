"""Entry point — prints a calendar grid as plain text."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from calendar_logic import (
    ViewContext,
    dates_for_rows,
    is_disabled,
    is_out_of_view,
    is_selected,
    is_today,
    label_for,
    start_of_month_in_next_scope,
    start_of_month_in_previous_scope,
    weekday_names,
)
from constants import YEARS_IN_DECADE, Scope
from date_utils import create
from locale_names import LANGUAGES, get_short_month_name
from settings import context_from_settings, load_settings

_CELL_WIDTH = {Scope.YEARS: 8, Scope.MONTHS: 9, Scope.DAYS: 6}


def _title(context: ViewContext, language: str) -> str:
    view = context.view
    if context.scope == Scope.YEARS:
        start = view.year - view.year % YEARS_IN_DECADE
        return f"{start}-{start + YEARS_IN_DECADE - 1}"
    if context.scope == Scope.MONTHS:
        return str(view.year)
    return f"{get_short_month_name(language, view.month)} {view.year}"


def _cell_text(d: date, context: ViewContext, language: str) -> str:
    if is_disabled(d, context):
        return "-"
    text = label_for(d, context.scope, language)
    if is_today(d, context):
        text += "*"
    if is_selected(d, context):
        text = f"[{text}]"
    if is_out_of_view(d, context):
        text = f"({text})"
    return text


def render(context: ViewContext, language: str = "en") -> list[str]:
    """Return the text lines for one calendar view."""
    width = _CELL_WIDTH.get(context.scope, _CELL_WIDTH[Scope.DAYS])
    lines = [_title(context, language)]
    if context.scope == Scope.DAYS:
        names = weekday_names(language, context.first_day)
        lines.append("".join(name.rjust(width) for name in names))
    for row in dates_for_rows(context.view, context.scope, context.first_day):
        lines.append("".join(_cell_text(d, context, language).rjust(width) for d in row))
    return lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a calendar grid.")
    parser.add_argument("--date", type=create, default=None,
                        help="view date, YYYY-MM-DD (default: today)")
    parser.add_argument("--scope", choices=[s.value for s in Scope], default=Scope.DAYS.value)
    parser.add_argument("--first-day", type=int, choices=range(7), default=None,
                        help="leftmost weekday, 0 = Sunday")
    parser.add_argument("--language", choices=LANGUAGES, default=None)
    parser.add_argument("--select", type=create, default=None, help="selected date")
    parser.add_argument("--min", dest="minimum", type=create, default=None)
    parser.add_argument("--max", dest="maximum", type=create, default=None)
    parser.add_argument("--page", type=int, default=0,
                        help="pages to move forward (negative: backward)")
    parser.add_argument("--settings", default=None, help="settings file path")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    settings = load_settings(args.settings)
    scope = Scope(args.scope)
    today = date.today()
    view = args.date or today
    for _ in range(abs(args.page)):
        if args.page > 0:
            view = start_of_month_in_next_scope(view, scope)
        else:
            view = start_of_month_in_previous_scope(view, scope)

    overrides = {"today": today, "selected": args.select,
                 "minimum": args.minimum, "maximum": args.maximum}
    if args.first_day is not None:
        overrides["first_day"] = args.first_day
    context = context_from_settings(settings, view, scope, **overrides)

    language = args.language or settings["language"]
    sys.stdout.write("\n".join(render(context, language)) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

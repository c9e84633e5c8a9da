"""Short weekday and month names for the supported languages."""

from __future__ import annotations

# Weekdays are Sunday-based (index 0 = Sunday).
_DAY_ABBR: dict[str, list[str]] = {
    "en": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
    "de": ["So", "Mo", "Di", "Mi", "Do", "Fr", "Sa"],
    "fr": ["dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."],
    "es": ["dom", "lun", "mar", "mié", "jue", "vie", "sáb"],
}

_MONTH_ABBR: dict[str, list[str]] = {
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
    "de": ["Jan", "Feb", "Mär", "Apr", "Mai", "Jun",
           "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"],
    "fr": ["janv.", "févr.", "mars", "avr.", "mai", "juin",
           "juil.", "août", "sept.", "oct.", "nov.", "déc."],
    "es": ["ene", "feb", "mar", "abr", "may", "jun",
           "jul", "ago", "sep", "oct", "nov", "dic"],
}

LANGUAGES: tuple[str, ...] = tuple(_DAY_ABBR)


def _table(tables: dict[str, list[str]], language: str) -> list[str]:
    try:
        return tables[language]
    except KeyError:
        raise ValueError(f"Unknown language: {language}") from None


def get_short_day_name(language: str, day_index: int) -> str:
    """Return the short name of a Sunday-based weekday (0-6)."""
    if not 0 <= day_index < 7:
        raise IndexError(f"weekday index out of range: {day_index}")
    return _table(_DAY_ABBR, language)[day_index]


def get_short_month_name(language: str, month: int) -> str:
    """Return the short name of a month (1-12)."""
    if not 1 <= month <= 12:
        raise IndexError(f"month out of range: {month}")
    return _table(_MONTH_ABBR, language)[month - 1]

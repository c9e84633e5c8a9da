"""JSON-based settings persistence for the calendar grid."""

from __future__ import annotations

import json
import logging
import os
from datetime import date
from typing import Any

from calendar_logic import DisabledSpec, ViewContext
from constants import DAYS_IN_WEEK, Scope
from locale_names import LANGUAGES

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".calendar-grid-settings.json")

_DEFAULTS = {
    "first_day": 0,
    "language": "en",
    "disabled_days": [],
}


def _is_weekday(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < DAYS_IN_WEEK


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing or invalid keys."""
    settings = dict(_DEFAULTS)
    settings["disabled_days"] = list(_DEFAULTS["disabled_days"])
    path = path or _SETTINGS_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.debug("Ignoring unreadable settings file %s: %s", path, exc)
        return settings
    if not isinstance(stored, dict):
        logger.debug("Ignoring settings file %s: not a JSON object", path)
        return settings

    if "first_day" in stored:
        if _is_weekday(stored["first_day"]):
            settings["first_day"] = stored["first_day"]
        else:
            logger.debug("Ignoring first_day=%r", stored["first_day"])
    if "language" in stored:
        if stored["language"] in LANGUAGES:
            settings["language"] = stored["language"]
        else:
            logger.debug("Ignoring language=%r", stored["language"])
    if "disabled_days" in stored and isinstance(stored["disabled_days"], list):
        settings["disabled_days"] = sorted({d for d in stored["disabled_days"] if _is_weekday(d)})
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def context_from_settings(
    settings: dict, view: date, scope: Scope = Scope.DAYS, **overrides: Any,
) -> ViewContext:
    """Build a per-render ViewContext from loaded settings.

    Keyword overrides (``selected``, ``today``, ``minimum`` ...) are passed
    through to the context unchanged.
    """
    overrides.setdefault("first_day", settings["first_day"])
    overrides.setdefault("disabled", DisabledSpec(days=tuple(settings["disabled_days"])))
    return ViewContext(view=view, scope=scope, **overrides)

import json
import logging
from datetime import date

from calendar_logic import DisabledSpec
from constants import Scope
from settings import context_from_settings, load_settings, save_settings


def test_missing_file_returns_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "missing.json"))
    assert settings == {"first_day": 0, "language": "en", "disabled_days": []}


def test_save_then_load(tmp_path):
    path = str(tmp_path / "settings.json")
    save_settings({"first_day": 1, "language": "de", "disabled_days": [0, 6]}, path)
    assert load_settings(path) == {"first_day": 1, "language": "de", "disabled_days": [0, 6]}


def test_invalid_values_are_ignored(tmp_path, caplog):
    caplog.set_level(logging.DEBUG, logger="settings")
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "first_day": 9,
        "language": "xx",
        "disabled_days": [6, "a", 7, True, 1, 6],
    }), encoding="utf-8")
    settings = load_settings(str(path))
    assert settings == {"first_day": 0, "language": "en", "disabled_days": [1, 6]}
    assert "first_day" in caplog.text


def test_corrupt_or_non_object_file_returns_defaults(tmp_path):
    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{not json", encoding="utf-8")
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(str(corrupt))["first_day"] == 0
    assert load_settings(str(listing))["language"] == "en"


def test_defaults_are_not_shared(tmp_path):
    first = load_settings(str(tmp_path / "missing.json"))
    first["disabled_days"].append(3)
    assert load_settings(str(tmp_path / "missing.json"))["disabled_days"] == []


def test_context_from_settings():
    settings = {"first_day": 1, "language": "en", "disabled_days": [0]}
    view = date(2024, 3, 15)
    context = context_from_settings(settings, view, Scope.MONTHS, today=view)
    assert context.view == view
    assert context.scope == Scope.MONTHS
    assert context.first_day == 1
    assert context.today == view
    assert context.disabled == DisabledSpec(days=(0,))

    overridden = context_from_settings(settings, view, first_day=3)
    assert overridden.first_day == 3
    assert overridden.scope == Scope.DAYS

"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from hoursheet.core.config import AppSettings, TimesheetConfig
from hoursheet.models.timesheet import TimesheetLayout


def test_default_settings():
    settings = AppSettings()
    assert settings.output_dir == "."
    assert settings.encoding == "utf-8"
    assert settings.log_level == "INFO"


def test_timesheet_layout_defaults():
    layout = TimesheetLayout()
    assert layout.lunch == "0:30"
    assert layout.conditioned_hours == "37"
    assert layout.week_end_weekday == 6


def test_timesheet_config_defaults():
    config = TimesheetConfig()
    assert config.lunch == "0:30"
    assert config.balance_label == "Balance brought forward"
    assert config.to_layout() == TimesheetLayout()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("HOURSHEET_OUTPUT_DIR", "/tmp/timesheets")
    monkeypatch.setenv("HOURSHEET_TIMESHEET_LUNCH", "0:45")
    settings = AppSettings()
    assert settings.output_dir == "/tmp/timesheets"
    assert settings.timesheet.lunch == "0:45"
    assert settings.timesheet.conditioned_hours == "37"
    assert settings.timesheet.to_layout().lunch == "0:45"


def test_timesheet_prefix_is_separate_from_root(monkeypatch):
    monkeypatch.setenv("HOURSHEET_LUNCH", "1:00")
    monkeypatch.setenv("HOURSHEET_TIMESHEET_WEEK_END_WEEKDAY", "4")
    config = TimesheetConfig()
    assert config.lunch == "0:30"
    assert config.week_end_weekday == 4

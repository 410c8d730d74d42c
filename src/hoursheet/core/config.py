"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from hoursheet.models.timesheet import TimesheetLayout


class TimesheetConfig(BaseSettings):
    """Timesheet layout values, e.g. ``HOURSHEET_TIMESHEET_LUNCH=0:45``."""

    model_config = {"env_prefix": "HOURSHEET_TIMESHEET_"}

    lunch: str = "0:30"
    conditioned_hours: str = "37"
    opening_balance: str = "0"
    balance_label: str = "Balance brought forward"
    week_end_weekday: int = Field(default=6, ge=0, le=6)

    def to_layout(self) -> TimesheetLayout:
        return TimesheetLayout(**self.model_dump())


class AppSettings(BaseSettings):
    """Root application settings.

    Only the CLI builds these; the converter receives explicit values.
    """

    model_config = {"env_prefix": "HOURSHEET_"}

    output_dir: str = "."
    encoding: str = "utf-8"
    log_level: str = "INFO"

    # Built per instance so env overrides set after import still apply
    timesheet: TimesheetConfig = Field(default_factory=TimesheetConfig)

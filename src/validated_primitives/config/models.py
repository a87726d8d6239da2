"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator

DEFAULT_DAY_FIRST_DATE_FORMATS = [
    "%d/%m/%Y",
    "%d.%m.%Y",
    "%d-%m-%Y",
    "%d/%m/%y",
    "%d.%m.%y",
]

DEFAULT_MONTH_FIRST_DATE_FORMATS = [
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%m/%d/%y",
]

DEFAULT_UNAMBIGUOUS_DATE_FORMATS = [
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%Y/%m/%d",
]

DEFAULT_TIME_SUFFIXES = [
    " %H:%M",
    " %H:%M:%S",
    " %I:%M %p",
    " %I:%M:%S %p",
]

# Every configured pattern must read back what it writes for this moment
_SAMPLE_MOMENT = datetime(2001, 2, 3, 16, 5, 6)


def _date_format_round_trips(pattern: str) -> bool:
    try:
        text = _SAMPLE_MOMENT.strftime(pattern)
        parsed = datetime.strptime(text, pattern)
    except ValueError:
        return False
    return parsed.date() == _SAMPLE_MOMENT.date()


def _time_suffix_round_trips(suffix: str) -> bool:
    pattern = "%Y-%m-%d" + suffix
    try:
        text = _SAMPLE_MOMENT.strftime(pattern)
        parsed = datetime.strptime(text, pattern)
    except ValueError:
        return False
    return (parsed.hour, parsed.minute) == (
        _SAMPLE_MOMENT.hour,
        _SAMPLE_MOMENT.minute,
    )


class ParsingConfig(BaseModel):
    """Settings for the string-to-date and string-to-number parse rules."""

    day_first: bool = Field(
        default=False,
        description="Try day-first regional formats before month-first ones",
    )
    day_first_formats: List[str] = Field(
        default_factory=lambda: list(DEFAULT_DAY_FIRST_DATE_FORMATS)
    )
    month_first_formats: List[str] = Field(
        default_factory=lambda: list(DEFAULT_MONTH_FIRST_DATE_FORMATS)
    )
    unambiguous_formats: List[str] = Field(
        default_factory=lambda: list(DEFAULT_UNAMBIGUOUS_DATE_FORMATS)
    )
    time_suffixes: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TIME_SUFFIXES)
    )
    decimal_comma: bool = Field(
        default=True,
        description="Accept a lone comma as decimal separator (e.g. '12,5')",
    )

    model_config = {"frozen": True}

    @field_validator(
        "day_first_formats", "month_first_formats", "unambiguous_formats"
    )
    @classmethod
    def check_date_formats(cls, formats: List[str]) -> List[str]:
        broken = [p for p in formats if not _date_format_round_trips(p)]
        if broken:
            raise ValueError(
                f"Date formats must contain day, month and year directives: {broken}"
            )
        return formats

    @field_validator("time_suffixes")
    @classmethod
    def check_time_suffixes(cls, suffixes: List[str]) -> List[str]:
        broken = [s for s in suffixes if not _time_suffix_round_trips(s)]
        if broken:
            raise ValueError(
                f"Time suffixes must contain hour and minute directives: {broken}"
            )
        return suffixes

    @property
    def date_formats(self) -> List[str]:
        """Regional date-only formats in the order they are attempted."""
        if self.day_first:
            regional = self.day_first_formats + self.month_first_formats
        else:
            regional = self.month_first_formats + self.day_first_formats
        return regional + self.unambiguous_formats

    @property
    def datetime_formats(self) -> List[str]:
        """Date formats combined with every accepted time-of-day suffix."""
        return [
            date_format + suffix
            for date_format in self.date_formats
            for suffix in self.time_suffixes
        ]


class LoggingConfig(BaseModel):
    """Logging settings applied by configure_logging()."""

    level: str = Field(default="WARNING")
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    )

    @field_validator("level")
    @classmethod
    def check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {value}")
        return level

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


class PrimitivesConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

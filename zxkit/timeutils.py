"""Conversion of Unix timestamps into calendar fields and display strings.

Only dates from 1970 up to the end of 2368 are supported.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from itertools import accumulate

__all__ = [
    "TimeData",
    "extract_time",
    "print_time",
    "print_time_special_format",
]

_EPOCH_YEAR = 1970
_SUPPORTED_YEARS = 400
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# Days from the epoch to the first day of each supported year.
_YEAR_STARTS = tuple(
    accumulate(
        (366 if _is_leap(year) else 365
         for year in range(_EPOCH_YEAR, _EPOCH_YEAR + _SUPPORTED_YEARS - 1)),
        initial=0,
    )
)


@dataclass(frozen=True)
class TimeData:
    """Calendar fields of a UTC timestamp; ``month`` and ``day`` start at 1."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    month_name: str


def extract_time(timestamp: int) -> TimeData:
    """Split a Unix timestamp in seconds into UTC calendar fields.

    Raises ValueError when the timestamp is negative or lies beyond the
    supported range of years.
    """
    if timestamp < 0:
        raise ValueError(f"timestamp must not be negative: {timestamp}")
    minutes, second = divmod(timestamp, 60)
    hours, minute = divmod(minutes, 60)
    days, hour = divmod(hours, 24)

    index = bisect_right(_YEAR_STARTS, days)
    if index == 0 or index == len(_YEAR_STARTS):
        raise ValueError(f"timestamp out of supported range: {timestamp}")
    index -= 1

    day = days - _YEAR_STARTS[index] + 1
    year = _EPOCH_YEAR + index
    leap = _is_leap(year)

    month = 0
    for month, month_days in enumerate(_MONTH_DAYS):
        if month == 1 and leap:
            month_days += 1
        if day <= month_days:
            break
        day -= month_days

    return TimeData(
        year=year,
        month=month + 1,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        month_name=_MONTH_NAMES[month],
    )


def print_time(timestamp: int) -> str:
    """Format a timestamp as ``DDMonYYYY HH:MM:SSUTC``."""
    date = extract_time(timestamp)
    return (
        f"{date.day:02d}{date.month_name}{date.year:04d} "
        f"{date.hour:02d}:{date.minute:02d}:{date.second:02d}UTC"
    )


def print_time_special_format(timestamp: int) -> str:
    """Format a timestamp as ``YYYY-MM-DDTHH:MM:SSZ``."""
    date = extract_time(timestamp)
    return (
        f"{date.year}-{date.month:02d}-{date.day:02d}"
        f"T{date.hour:02d}:{date.minute:02d}:{date.second:02d}Z"
    )
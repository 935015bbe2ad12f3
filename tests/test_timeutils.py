from datetime import datetime, timezone

import pytest

from zxkit.timeutils import (
    TimeData,
    extract_time,
    print_time,
    print_time_special_format,
)

# Days from 1970-01-01 to the first unsupported year start.
_LIMIT_DAYS = 145732

SAMPLES = [
    0,
    59,
    3600,
    86399,
    86400,
    68169600,  # around a leap day
    951782400,
    951868800,
    1234567890,
    1700000000,
    4102444800,
    4107542400,
    _LIMIT_DAYS * 86400 - 1,
]


def _reference(timestamp):
    return datetime.fromtimestamp(timestamp, timezone.utc)


@pytest.mark.parametrize("timestamp", SAMPLES)
def test_extract_time_matches_datetime(timestamp):
    expected = _reference(timestamp)
    result = extract_time(timestamp)
    assert (result.year, result.month, result.day) == (
        expected.year, expected.month, expected.day
    )
    assert (result.hour, result.minute, result.second) == (
        expected.hour, expected.minute, expected.second
    )


@pytest.mark.parametrize("timestamp", SAMPLES)
def test_special_format_matches_datetime(timestamp):
    expected = _reference(timestamp).strftime("%Y-%m-%dT%H:%M:%SZ")
    assert print_time_special_format(timestamp) == expected


@pytest.mark.parametrize("timestamp", SAMPLES)
def test_print_time_matches_datetime(timestamp):
    expected = _reference(timestamp).strftime("%d%b%Y %H:%M:%SUTC")
    assert print_time(timestamp) == expected


def test_epoch_fields():
    assert extract_time(0) == TimeData(1970, 1, 1, 0, 0, 0, extract_time(0).month_name)
    assert extract_time(0).year == 1970


def test_month_names_follow_months():
    names = {extract_time(d * 86400 * 31).month: extract_time(d * 86400 * 31).month_name
             for d in range(12)}
    assert len(set(names.values())) == len(names)


def test_last_supported_second_is_end_of_year():
    result = extract_time(_LIMIT_DAYS * 86400 - 1)
    assert (result.month, result.day) == (12, 31)
    assert (result.hour, result.minute, result.second) == (23, 59, 59)


def test_out_of_range_raises():
    with pytest.raises(ValueError):
        extract_time(_LIMIT_DAYS * 86400)


def test_negative_raises():
    with pytest.raises(ValueError):
        extract_time(-1)


def test_print_functions_propagate_range_error():
    with pytest.raises(ValueError):
        print_time(_LIMIT_DAYS * 86400)
    with pytest.raises(ValueError):
        print_time_special_format(_LIMIT_DAYS * 86400)
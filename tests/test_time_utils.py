"""
Tests for "HH:MM" <-> minutes conversion.
"""

from __future__ import annotations

import pytest

from salon_booking.application.exceptions import InvalidTimeFormat
from salon_booking.application.scheduling.time_utils import add_minutes, minutes_to_time, time_to_minutes


def test_time_to_minutes():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("9:05") == 545
    assert time_to_minutes("14:30") == 870
    assert time_to_minutes("20:00") == 1200


def test_minutes_to_time_keeps_hours_unpadded():
    assert minutes_to_time(545) == "9:05"
    assert minutes_to_time(600) == "10:00"
    assert minutes_to_time(545, pad_hours=True) == "09:05"


def test_add_minutes_crosses_hour():
    assert add_minutes("11:00", 45) == "11:45"
    assert add_minutes("11:45", 30) == "12:15"
    assert add_minutes("9:50", 15) == "10:05"


@pytest.mark.parametrize("value", ["", "10", "10:5", "ab:cd", "10:60", "10-30", "123:00"])
def test_malformed_time_is_rejected(value):
    with pytest.raises(InvalidTimeFormat):
        time_to_minutes(value)


def test_invalid_time_format_is_value_error():
    with pytest.raises(ValueError):
        add_minutes("noon", 30)

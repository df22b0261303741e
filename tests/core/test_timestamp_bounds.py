"""Timestamp Bounds — calendar-derived limits and the negative-remainder borrow.

Tests cover:
    - MIN_SECONDS / MAX_SECONDS match 0001-01-01 and 9999-12-31T23:59:59 exactly
    - check_timestamp_bounds accepts the closed ranges and rejects one past them
    - split_epoch_nanoseconds truncates then borrows, never leaving a negative remainder
"""

import pytest

from wirestamp.core.errors import TimestampRangeError
from wirestamp.core.timestamp_bounds import (
    MAX_NANOSECONDS,
    MAX_SECONDS,
    MIN_SECONDS,
    NANOS_PER_SECOND,
    check_timestamp_bounds,
    normalize_fraction,
    split_epoch_nanoseconds,
)


def test_min_seconds_is_year_one():
    assert MIN_SECONDS == -62135596800


def test_max_seconds_is_last_second_of_year_9999():
    assert MAX_SECONDS == 253402300799


def test_max_nanoseconds_is_one_below_a_second():
    assert MAX_NANOSECONDS == 999_999_999
    assert NANOS_PER_SECOND == MAX_NANOSECONDS + 1


def test_check_accepts_closed_range_edges():
    check_timestamp_bounds(MIN_SECONDS, 0)
    check_timestamp_bounds(MAX_SECONDS, MAX_NANOSECONDS)


@pytest.mark.parametrize("seconds,nanoseconds,field", [
    (MIN_SECONDS - 1, 0, "seconds"),
    (MAX_SECONDS + 1, 0, "seconds"),
    (0, -1, "nanoseconds"),
    (0, NANOS_PER_SECOND, "nanoseconds"),
])
def test_check_rejects_one_past_each_edge(seconds, nanoseconds, field):
    with pytest.raises(TimestampRangeError) as exc_info:
        check_timestamp_bounds(seconds, nanoseconds)
    assert exc_info.value.field == field


def test_seconds_checked_before_nanoseconds():
    with pytest.raises(TimestampRangeError) as exc_info:
        check_timestamp_bounds(MAX_SECONDS + 1, -1)
    assert exc_info.value.field == "seconds"


def test_normalize_fraction_borrows_for_negative_remainder():
    assert normalize_fraction(0, -250_000_000) == (-1, 750_000_000)


def test_normalize_fraction_leaves_forward_remainder_alone():
    assert normalize_fraction(-1, 750_000_000) == (-1, 750_000_000)
    assert normalize_fraction(3, 0) == (3, 0)


@pytest.mark.parametrize("total,expected", [
    (0, (0, 0)),
    (1, (0, 1)),
    (1_500_000_000, (1, 500_000_000)),
    (-1, (-1, 999_999_999)),
    (-250_000_000, (-1, 750_000_000)),
    (-1_000_000_000, (-1, 0)),
    (-1_500_000_000, (-2, 500_000_000)),
])
def test_split_epoch_nanoseconds(total, expected):
    assert split_epoch_nanoseconds(total) == expected


def test_split_is_one_second_below_naive_truncation_before_epoch():
    seconds, nanoseconds = split_epoch_nanoseconds(-250_000_000)
    naive_truncated_seconds = int(-250_000_000 / NANOS_PER_SECOND)
    assert seconds == naive_truncated_seconds - 1
    assert 0 <= nanoseconds <= MAX_NANOSECONDS

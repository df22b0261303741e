"""Timestamp — an immutable instant at nanosecond resolution, independent of time zone.

A Timestamp is a count of seconds since the Unix epoch plus a non-negative
nanosecond offset that always counts forward. Leap seconds are smeared, so
every minute is 60 seconds long. The range is 0001-01-01T00:00:00Z to
9999-12-31T23:59:59.999999999Z on the Proleptic Gregorian calendar.

Invariants:
    - seconds in [MIN_SECONDS, MAX_SECONDS], nanoseconds in [0, 999_999_999]
    - Every construction path goes through __init__ and check_timestamp_bounds
    - Instances are frozen; there is no invalid-but-alive state
    - Exactly one of a < b, a == b, a > b holds for any two instances
    - a == b implies hash(a) == hash(b)

Design Decisions:
    - frozen dataclass with eq=False: comparisons and hash are hand-written so
      every relational operator derives from the single __lt__ primitive
    - Out-of-range input raises TimestampRangeError; treat it as a caller bug,
      not a branch to handle (ADR: no silent clamping)
    - Inputs coerced with operator.index: numpy ints pass, floats never truncate
"""

import operator
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from wirestamp.core.clock_protocols import WallClock
from wirestamp.core.errors import TimestampTypeError
from wirestamp.core.timestamp_bounds import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    UNIX_EPOCH,
    check_timestamp_bounds,
    split_epoch_nanoseconds,
)

_HASH_MULTIPLIER = 37


def _as_integral(field: str, value: object) -> int:
    if isinstance(value, bool):
        raise TimestampTypeError(field, value, "must be an integer, not a bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TimestampTypeError(field, value, "must be an integer") from None


def _wrap_int32(value: int) -> int:
    """Reduce to a signed 32-bit integer with two's-complement wraparound."""
    return ((value & 0xFFFFFFFF) ^ 0x80000000) - 0x80000000


@dataclass(frozen=True, eq=False)
class Timestamp:
    """A validated point in time: whole seconds since the epoch plus forward nanoseconds.

    Timestamp() is the epoch itself. Negative seconds with a fraction still
    carry non-negative nanoseconds, so (-1, 500_000_000) is half a second
    before the epoch.
    """
    seconds: int = 0
    nanoseconds: int = 0

    def __post_init__(self) -> None:
        seconds = _as_integral("seconds", self.seconds)
        nanoseconds = _as_integral("nanoseconds", self.nanoseconds)
        check_timestamp_bounds(seconds, nanoseconds)
        object.__setattr__(self, "seconds", seconds)
        object.__setattr__(self, "nanoseconds", nanoseconds)

    def __reduce__(self):
        # unpickle and copy rebuild through __init__ so the bounds check runs
        return (Timestamp, (self.seconds, self.nanoseconds))

    # ─── Factories ───────────────────────────────────────────────

    @classmethod
    def now(cls, clock: WallClock | None = None) -> "Timestamp":
        """Current wall-clock time. Precision depends on the host clock."""
        reading = clock.time_ns() if clock is not None else time.time_ns()
        return cls.from_epoch_nanoseconds(reading)

    @classmethod
    def from_time(cls, seconds_since_unix_epoch: int) -> "Timestamp":
        """Timestamp from whole seconds since the epoch, with zero nanoseconds.

        The input is assumed to be counted from the Unix epoch. A value taken
        from a platform clock with a different epoch gives a wrong result.
        """
        return cls(seconds_since_unix_epoch, 0)

    @classmethod
    def from_epoch_nanoseconds(cls, total_nanoseconds: int) -> "Timestamp":
        """Timestamp from signed nanoseconds since the epoch (as time.time_ns returns)."""
        total = _as_integral("total_nanoseconds", total_nanoseconds)
        return cls(*split_epoch_nanoseconds(total))

    @classmethod
    def from_datetime(cls, moment: datetime) -> "Timestamp":
        """Timestamp from a timezone-aware datetime.

        Naive datetimes are rejected: their offset from the epoch is unknown.
        """
        if not isinstance(moment, datetime):
            raise TimestampTypeError("moment", moment, "must be a datetime")
        if moment.tzinfo is None or moment.utcoffset() is None:
            raise TimestampTypeError("moment", moment, "must be timezone-aware")
        delta = moment - UNIX_EPOCH
        total_micros = (delta.days * SECONDS_PER_DAY + delta.seconds) * 1_000_000 + delta.microseconds
        return cls.from_epoch_nanoseconds(total_micros * NANOS_PER_MICROSECOND)

    # ─── Conversions ─────────────────────────────────────────────

    def to_time(self) -> int:
        """Whole seconds since the epoch; the fraction is dropped."""
        return self.seconds

    def to_epoch_nanoseconds(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanoseconds

    def to_datetime(self) -> datetime:
        """UTC datetime for this instant. Sub-microsecond digits are dropped."""
        return UNIX_EPOCH + timedelta(
            seconds=self.seconds,
            microseconds=self.nanoseconds // NANOS_PER_MICROSECOND,
        )

    # ─── Ordering ────────────────────────────────────────────────

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.seconds < other.seconds or (
            self.seconds == other.seconds and self.nanoseconds < other.nanoseconds
        )

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return other < self

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return not self > other

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return not self < other

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self < other or self > other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return not self != other

    def __hash__(self) -> int:
        result = 1
        for part in (self.seconds, self.seconds >> 32, self.nanoseconds):
            result = _wrap_int32(_HASH_MULTIPLIER * result + _wrap_int32(part))
        return result

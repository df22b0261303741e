"""Timestamp Bounds — calendar-derived limits and the single bounds check.

Invariants:
    - MIN_SECONDS is 0001-01-01T00:00:00Z, MAX_SECONDS is 9999-12-31T23:59:59Z,
      both counted from the Unix epoch 1970-01-01T00:00:00Z
    - nanoseconds are in [0, 999_999_999] and always count forward in time
    - check_timestamp_bounds never clamps: out-of-range input raises

Design Decisions:
    - Limits computed from datetime arithmetic at import, not hardcoded literals
      (tests pin them to -62135596800 and 253402300799)
    - split_epoch_nanoseconds truncates then normalizes, so a pre-epoch remainder
      borrows one second instead of going negative
"""

from datetime import datetime, timezone

from wirestamp.core.errors import TimestampRangeError

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

SECONDS_PER_DAY = 86_400
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MICROSECOND = 1_000
MAX_NANOSECONDS = NANOS_PER_SECOND - 1


def seconds_since_epoch(moment: datetime) -> int:
    """Whole seconds from the Unix epoch to an aware datetime, ignoring microseconds."""
    delta = moment - UNIX_EPOCH
    return delta.days * SECONDS_PER_DAY + delta.seconds


MIN_SECONDS = seconds_since_epoch(datetime(1, 1, 1, tzinfo=timezone.utc))
MAX_SECONDS = seconds_since_epoch(datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc))


def check_timestamp_bounds(seconds: int, nanoseconds: int) -> None:
    """Raise TimestampRangeError if either field falls outside its range."""
    if not MIN_SECONDS <= seconds <= MAX_SECONDS:
        raise TimestampRangeError("seconds", seconds, MIN_SECONDS, MAX_SECONDS)
    if not 0 <= nanoseconds <= MAX_NANOSECONDS:
        raise TimestampRangeError("nanoseconds", nanoseconds, 0, MAX_NANOSECONDS)


def normalize_fraction(seconds: int, nanoseconds: int) -> tuple[int, int]:
    """Borrow one second when a truncated remainder is negative.

    Truncation toward zero leaves pre-epoch remainders negative, e.g.
    -0.25s splits into (0, -250_000_000). Nanoseconds must count forward
    from `seconds`, so that becomes (-1, 750_000_000).
    """
    if nanoseconds < 0:
        return seconds - 1, nanoseconds + NANOS_PER_SECOND
    return seconds, nanoseconds


def split_epoch_nanoseconds(total_nanoseconds: int) -> tuple[int, int]:
    """Decompose signed nanoseconds since the epoch into (seconds, nanoseconds)."""
    magnitude_seconds, magnitude_nanos = divmod(abs(total_nanoseconds), NANOS_PER_SECOND)
    if total_nanoseconds < 0:
        # truncate toward zero: both parts carry the sign
        return normalize_fraction(-magnitude_seconds, -magnitude_nanos)
    return normalize_fraction(magnitude_seconds, magnitude_nanos)

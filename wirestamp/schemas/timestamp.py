"""Timestamp Payload — Pydantic model for the {seconds, nanos} wire field pair.

Invariants:
    - seconds fits a signed 64-bit integer, nanos a signed 32-bit integer
    - Only true integers pass: bool and float are rejected like the core constructor does
    - to_timestamp() goes through the validated Timestamp constructor
    - from_timestamp() copies the accessors verbatim

Design Decisions:
    - Field names follow google.protobuf.Timestamp (`nanos`, not `nanoseconds`)
    - seconds also accepts a decimal string: proto3 JSON renders int64 as a string,
      while int32 nanos is always a JSON number
    - extra="forbid": unknown keys mean the payload is not a timestamp
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wirestamp.core.timestamp import Timestamp

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_DECIMAL_INTEGER = re.compile(r"-?[0-9]+")


def _require_integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"must be an integer, got {type(value).__name__}")
    return value


class TimestampPayload(BaseModel):
    """Wire representation of a Timestamp."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seconds: int = Field(0, ge=INT64_MIN, le=INT64_MAX)
    nanos: int = Field(0, ge=INT32_MIN, le=INT32_MAX)

    @field_validator("seconds", mode="before")
    @classmethod
    def seconds_integer_or_decimal_string(cls, v: Any) -> int:
        if isinstance(v, str) and _DECIMAL_INTEGER.fullmatch(v):
            return int(v)
        return _require_integer(v)

    @field_validator("nanos", mode="before")
    @classmethod
    def nanos_integer(cls, v: Any) -> int:
        return _require_integer(v)

    @classmethod
    def from_timestamp(cls, timestamp: Timestamp) -> "TimestampPayload":
        return cls(seconds=timestamp.seconds, nanos=timestamp.nanoseconds)

    def to_timestamp(self) -> Timestamp:
        """Build the domain value. Raises TimestampRangeError on out-of-range fields."""
        return Timestamp(self.seconds, self.nanos)

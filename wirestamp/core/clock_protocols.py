"""Boundary Protocols — the host wall clock contract consumed by Timestamp.now.

Invariants:
    - The core never manages the clock; it only reads one reading per call
    - time_ns() returns signed integer nanoseconds since the Unix epoch

Design Decisions:
    - Protocol over ABC: structural subtyping, the stdlib `time` module itself
      satisfies WallClock (ADR: no inheritance hierarchy for collaborators)
"""

from typing import Protocol


class WallClock(Protocol):
    """Structural contract for a host clock provider."""
    def time_ns(self) -> int: ...

"""Core Layer — the Timestamp value type and its bounds, no logging, no config.

Invariants:
    - No module in core/ imports from services/, schemas/, or infrastructure/
    - All functions are pure and deterministic, except Timestamp.now which reads
      the host wall clock (injectable through the WallClock protocol)

Design Decisions:
    - Functional core separated from the boundary codec (ADR: impureim sandwich)
"""

"""Wirestamp Package — validated time points for the seconds/nanos wire contract.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
      (callers import from wirestamp.core.timestamp directly)
"""

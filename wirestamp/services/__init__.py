"""Services Layer — boundary codec between wire payloads and Timestamp values.

Invariants:
    - Malformed wire data is rejected here, never stored invalid
    - Every rejection is logged with a structured error code

Design Decisions:
    - Thin codec delegates validation to schemas/ and core/ (ADR: impureim sandwich)
"""

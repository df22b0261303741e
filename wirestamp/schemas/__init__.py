"""Pydantic Schemas — wire payload validation for Timestamp exchange.

Invariants:
    - Schemas validate wire integer widths at the system boundary
    - Domain bounds are enforced by core/, never duplicated here

Design Decisions:
    - Separate from core: schemas are wire contracts, core is the value type (ADR: DDD boundary)
"""

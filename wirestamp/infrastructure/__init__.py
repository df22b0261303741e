"""Infrastructure Layer — cross-cutting concerns (logging setup).

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Opt-in setup: importing wirestamp never touches the root logger
"""

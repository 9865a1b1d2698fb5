"""Core Layer — pure domain logic, no IO, no async, no framework.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell
"""

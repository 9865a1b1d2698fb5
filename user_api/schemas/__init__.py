"""Pydantic Schemas — user record and creation payload.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain types from core/ used for identifier fields
"""

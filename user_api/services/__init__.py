"""Services Layer — request pipelines that compose core steps with the store.

Invariants:
    - Pipelines return explicit outcomes (Ok | Failure), never raise for bad input
"""

"""Infrastructure Layer — process-local state and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - The user store is the only mutable shared state in the process
"""

"""API Layer — FastAPI routes, middleware and error translation.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; every failure body is {"error": message}

Design Decisions:
    - Thin routes delegate to services (functional core, imperative shell)
"""

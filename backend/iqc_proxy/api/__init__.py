"""API Layer — FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; failures use the {success: false, ...} envelope
"""

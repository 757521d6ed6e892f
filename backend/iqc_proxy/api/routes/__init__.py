"""Route Modules — one file per concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain relay logic (delegate to services/)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""

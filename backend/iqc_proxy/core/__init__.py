"""Core Domain — pure types and errors, no I/O.

Invariants:
    - Nothing in core/ imports FastAPI, httpx, or settings
"""

"""IQC Proxy Package — CORS-enabled JSON relay in front of the IQC script service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

"""API Layer — FastAPI routes, response writers, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Validation outcomes reach responses.py as ValidationResult, not exceptions
"""

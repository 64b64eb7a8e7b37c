"""Core Layer — pure validation logic, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the HTTP shell: rules return data,
      the api/ layer decides what a response looks like
"""

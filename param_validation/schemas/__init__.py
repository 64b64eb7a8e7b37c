"""Pydantic Schemas — wire-level shape of request bodies.

Invariants:
    - Schemas check types and presence only; value rules live in core/constraints

Design Decisions:
    - Separate from core records: schemas are the JSON contract, records are
      the validated domain values
"""

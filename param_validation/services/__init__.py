"""Services — glue between the HTTP layer and the pure core.

Invariants:
    - Services never build HTTP responses (that is api/responses.py)
"""

"""Infrastructure Layer — process-level resources and cross-cutting concerns.

Invariants:
    - Resources are created in the FastAPI lifespan, never at import time
"""

"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health/ returns 200 if the process is up
    - worker_pool reports "stopped" outside the lifespan
"""

from fastapi import APIRouter, status

from param_validation.infrastructure import worker_pool as pool_module

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    pool = pool_module.worker_pool
    return {
        "status": "healthy",
        "service": "param-validation-demo",
        "version": "0.1.0",
        "checks": {
            "worker_pool": "running" if pool and not pool.closed else "stopped",
        },
    }

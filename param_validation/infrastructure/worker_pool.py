"""Worker Pool — thread-pool offload for request handlers.

Invariants:
    - run() suspends the calling coroutine; the event loop is never blocked
    - run() after close(), or after the executor stopped, raises WorkerPoolUnavailableError
    - get_worker_pool() raises WorkerPoolUnavailableError before init

Design Decisions:
    - Singleton worker_pool initialized on startup, closed on shutdown:
      FastAPI lifespan owns the lifecycle (no import side effects)
    - ThreadPoolExecutor over a process pool: offloaded work is tiny and
      must not pay pickling costs
"""

import asyncio
import functools
import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

from param_validation.core.errors import WorkerPoolUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WorkerPool:
    """Background executor with an explicit start/close lifecycle."""

    def __init__(self, max_workers: int = 4):
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="worker-pool",
        )
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def run(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run fn on a pool thread and await its result."""
        if self._closed:
            raise WorkerPoolUnavailableError()
        loop = asyncio.get_running_loop()
        try:
            future = loop.run_in_executor(
                self._executor, functools.partial(fn, *args, **kwargs),
            )
        except RuntimeError as exc:
            # Executor shut down between the _closed check and submission
            raise WorkerPoolUnavailableError() from exc
        return await future

    def close(self, wait: bool = True) -> None:
        """Stop accepting work and release pool threads."""
        if self._closed:
            return
        self._closed = True
        self._executor.shutdown(wait=wait)


# Singleton (initialized on startup)
worker_pool: WorkerPool | None = None


def init_worker_pool(max_workers: int = 4) -> WorkerPool:
    global worker_pool
    worker_pool = WorkerPool(max_workers)
    logger.info(
        "Worker pool started", extra={"worker_pool_size": max_workers},
    )
    return worker_pool


def close_worker_pool() -> None:
    global worker_pool
    if worker_pool is not None:
        worker_pool.close()
        worker_pool = None


def get_worker_pool() -> WorkerPool:
    """FastAPI dependency for the background worker pool."""
    if worker_pool is None or worker_pool.closed:
        raise WorkerPoolUnavailableError()
    return worker_pool

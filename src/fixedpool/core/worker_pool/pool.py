"""
Fixed-size thread pool fed by a single shared queue.

• N worker threads created up front, never resized.
• submit(job)   – enqueue a zero-argument callable; returns immediately.
• shutdown()    – one Terminate per worker, then join each worker in id order.
• Shutdown also runs on ``with`` exit, on garbage collection and at
  interpreter exit, so worker threads are never leaked.
"""

from __future__ import annotations

import logging
import queue
import threading
import weakref
from typing import List, Sequence

from fixedpool.core.worker_pool.exceptions import PoolClosedError, PoolSizeError
from fixedpool.core.worker_pool.messages import TERMINATE, Job, Message, NewJob
from fixedpool.core.worker_pool.worker import Worker

logger = logging.getLogger(__name__)


def _shutdown_workers(sender: "queue.Queue[Message]", workers: Sequence[Worker]) -> None:
    # Module-level so the finalizer holds no reference back to the pool.
    logger.info("Sending terminate message to all workers.")
    for _ in workers:
        sender.put(TERMINATE)

    logger.info("Shutting down all workers.")
    for worker in workers:
        logger.debug(f"Shutting down worker {worker.id}")
        worker.join()
        if worker.failed:
            logger.warning(f"Worker {worker.id} had already stopped after a job raised")


class Pool:
    """A fixed number of worker threads sharing one unbounded job queue."""

    def __init__(self, size: int, thread_name_prefix: str = "worker") -> None:
        """
        Start ``size`` worker threads.

        Args:
            size: Number of workers, must be at least 1
            thread_name_prefix: Prefix for worker thread names

        Raises:
            PoolSizeError: If size is not a positive integer
        """
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise PoolSizeError(size)

        self._sender: "queue.Queue[Message]" = queue.Queue()
        self._closed = False
        self._shutdown_lock = threading.Lock()
        self._workers: List[Worker] = [
            Worker(worker_id, self._sender, thread_name_prefix)
            for worker_id in range(size)
        ]
        self._finalizer = weakref.finalize(self, _shutdown_workers, self._sender, self._workers)
        logger.info(f"Started pool with {size} workers")

    # ---- public API ------------------------------------------------------- #

    @property
    def size(self) -> int:
        return len(self._workers)

    @property
    def workers(self) -> Sequence[Worker]:
        return tuple(self._workers)

    @property
    def is_shutdown(self) -> bool:
        return self._closed

    def submit(self, job: Job) -> None:
        """
        Queue ``job`` for execution by whichever worker claims it first.

        Raises:
            TypeError: If job is not callable
            PoolClosedError: If shutdown has already begun
        """
        if not callable(job):
            raise TypeError(f"Job must be callable, got {type(job).__name__}")
        if self._closed:
            raise PoolClosedError()
        self._sender.put(NewJob(job))

    def shutdown(self) -> None:
        """
        Stop every worker and wait for their threads to exit.

        Jobs already claimed run to completion. Only the first call does any
        work; a concurrent call blocks until that work is done.
        """
        self._closed = True
        if any(worker.is_current() for worker in self._workers):
            # A job cannot wait on a caller that is waiting for its own worker.
            self._finalizer()
            return
        with self._shutdown_lock:
            self._finalizer()

    # ---- context manager -------------------------------------------------- #

    def __enter__(self) -> "Pool":
        return self

    def __exit__(self, *_exc) -> None:
        self.shutdown()

    def __repr__(self) -> str:
        state = "shutdown" if self._closed else "running"
        return f"<Pool size={self.size} {state}>"

"""
fixedpool.

A fixed-size pool of worker threads that pull zero-argument jobs from one
shared queue.
"""

from fixedpool.core.worker_pool import (
    Pool,
    PoolClosedError,
    PoolSizeError,
    Worker,
    WorkerState,
)

__version__ = "0.1.0"

__all__ = [
    'Pool',
    'Worker',
    'WorkerState',
    'PoolSizeError',
    'PoolClosedError',
]

"""Fixed-size worker pool with a single shared job queue."""

from fixedpool.core.worker_pool.exceptions import PoolClosedError, PoolSizeError
from fixedpool.core.worker_pool.messages import TERMINATE, Job, Message, NewJob, Terminate
from fixedpool.core.worker_pool.pool import Pool
from fixedpool.core.worker_pool.worker import Worker, WorkerState

__all__ = [
    'Pool',
    'Worker',
    'WorkerState',
    'Job',
    'Message',
    'NewJob',
    'Terminate',
    'TERMINATE',
    'PoolSizeError',
    'PoolClosedError',
]

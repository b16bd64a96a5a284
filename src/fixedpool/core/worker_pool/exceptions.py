"""Errors raised by the worker pool."""


class PoolSizeError(ValueError):
    """Raised when a pool is built with fewer than one worker."""

    def __init__(self, size):
        super().__init__(f"Pool size must be a positive integer, got {size!r}")
        self.size = size


class PoolClosedError(RuntimeError):
    """Raised when work is submitted to a pool that is shutting down."""

    def __init__(self):
        super().__init__("Cannot submit jobs after the pool has been shut down")

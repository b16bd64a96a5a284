"""Worker threads that drain the shared job queue."""
import logging
import queue
import threading
from enum import Enum
from typing import Optional

from fixedpool.core.worker_pool.messages import Message, NewJob, Terminate

logger = logging.getLogger(__name__)


class WorkerState(str, Enum):
    IDLE = "idle"
    BUSY = "busy"
    TERMINATED = "terminated"


class Worker:
    """
    A single long-lived thread bound to the pool's shared queue.

    The thread loops on the queue: every ``NewJob`` is run to completion and
    every ``Terminate`` ends the loop. Exceptions raised by a job are not
    caught; they escape the thread (and are reported by ``threading.excepthook``),
    which leaves the worker terminated for the rest of the pool's life.
    """

    def __init__(self, worker_id: int, receiver: "queue.Queue[Message]",
                 name_prefix: str = "worker"):
        self.id = worker_id
        self.name = f"{name_prefix}-{worker_id}"
        self.state = WorkerState.IDLE
        self.failed = False
        self._receiver = receiver
        self._thread: Optional[threading.Thread] = threading.Thread(
            target=self._run,
            name=self.name,
            daemon=True,
        )
        self._thread.start()

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def is_current(self) -> bool:
        """True when called from this worker's own thread."""
        return self._thread is threading.current_thread()

    def join(self) -> None:
        """
        Wait for the thread to exit. The handle is consumed on first call.

        Called from the worker's own thread (a job shutting down its pool)
        this returns without waiting; the worker exits once the job returns
        and it reads its Terminate message.
        """
        if self._thread is None or self.is_current():
            return
        thread, self._thread = self._thread, None
        thread.join()

    def _run(self) -> None:
        try:
            while True:
                # Queue.get holds the queue's mutex only for the dequeue itself.
                message = self._receiver.get()

                if isinstance(message, Terminate):
                    logger.debug(f"Worker {self.id} was told to terminate.")
                    break

                if not isinstance(message, NewJob):
                    raise TypeError(f"Worker {self.id} received unexpected message {message!r}")

                self.state = WorkerState.BUSY
                logger.debug(f"Worker {self.id} got a job; executing.")
                job = message.job
                del message
                job()
                del job
                logger.debug(f"Worker {self.id} done.")
                self.state = WorkerState.IDLE
        except BaseException:
            self.failed = True
            raise
        finally:
            self.state = WorkerState.TERMINATED

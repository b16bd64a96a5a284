import queue
import threading
import time
from unittest import mock

import pytest

from fixedpool.core.worker_pool import TERMINATE, NewJob, Worker, WorkerState


def wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


@pytest.fixture
def receiver():
    return queue.Queue()


class TestWorker:
    """Tests for a single worker bound to a queue."""

    def test_state_transitions(self, receiver):
        """Test idle -> busy -> idle -> terminated."""
        release = threading.Event()
        worker = Worker(0, receiver)
        assert worker.state is WorkerState.IDLE

        receiver.put(NewJob(release.wait))
        assert wait_for(lambda: worker.state is WorkerState.BUSY)

        release.set()
        assert wait_for(lambda: worker.state is WorkerState.IDLE)

        receiver.put(TERMINATE)
        worker.join()

        assert worker.state is WorkerState.TERMINATED
        assert not worker.is_alive()
        assert not worker.failed

    def test_job_invoked_once(self, receiver):
        """Test that a claimed job is called exactly once."""
        job = mock.Mock()
        worker = Worker(3, receiver)

        receiver.put(NewJob(job))
        receiver.put(TERMINATE)
        worker.join()

        job.assert_called_once_with()

    def test_terminate_stops_before_later_messages(self, receiver):
        """Test that nothing queued after Terminate is consumed."""
        later = mock.Mock()
        worker = Worker(0, receiver)

        receiver.put(TERMINATE)
        receiver.put(NewJob(later))
        worker.join()

        later.assert_not_called()
        assert receiver.qsize() == 1

    def test_join_consumes_handle(self, receiver):
        """Test that joining twice is harmless."""
        worker = Worker(0, receiver)
        receiver.put(TERMINATE)
        worker.join()
        worker.join()

        assert not worker.is_alive()

    def test_name(self, receiver):
        """Test the thread name combines prefix and id."""
        worker = Worker(7, receiver, name_prefix="io")
        try:
            assert worker.name == "io-7"
        finally:
            receiver.put(TERMINATE)
            worker.join()

    def test_raising_job_escapes_thread(self, receiver):
        """Test that a job's exception is not caught by the worker."""
        def bad_job():
            raise ValueError("nope")

        with mock.patch("threading.excepthook") as mock_hook:
            worker = Worker(0, receiver)
            receiver.put(NewJob(bad_job))
            assert wait_for(lambda: not worker.is_alive())

        assert worker.failed
        assert worker.state is WorkerState.TERMINATED
        assert isinstance(mock_hook.call_args[0][0].exc_value, ValueError)

    def test_unknown_message_is_fatal(self, receiver):
        """Test that a message that is neither a job nor Terminate kills the worker."""
        with mock.patch("threading.excepthook") as mock_hook:
            worker = Worker(0, receiver)
            receiver.put("garbage")
            assert wait_for(lambda: not worker.is_alive())

        assert worker.failed
        assert isinstance(mock_hook.call_args[0][0].exc_value, TypeError)

    def test_join_from_own_thread_returns(self, receiver):
        """Test that a job joining its own worker neither raises nor drops the handle."""
        holder = {}
        outcome = []

        def join_self():
            worker = holder["worker"]
            worker.join()
            outcome.append(worker.is_alive())

        worker = Worker(0, receiver)
        holder["worker"] = worker
        receiver.put(NewJob(join_self))
        receiver.put(TERMINATE)
        assert wait_for(lambda: outcome)
        worker.join()

        assert outcome == [True]
        assert not worker.failed
        assert not worker.is_alive()

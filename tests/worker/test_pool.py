"""Tests for the worker pool."""

import threading
from collections import Counter

import pytest

from file_processor.partition import partition_lines
from file_processor.sink import ResultSink
from file_processor.worker import WorkerPool


def make_lines(count: int) -> tuple[str, ...]:
    return tuple(f"line {i}" for i in range(count))


class TestWorkerPool:
    """Test cases for WorkerPool."""

    def test_processes_more_chunks_than_workers(self) -> None:
        """Excess chunks queue and still all run."""
        lines = make_lines(95)
        sink = ResultSink()
        pool = WorkerPool(pool_size=2)

        for chunk in partition_lines(len(lines), 10):
            pool.submit(lines, chunk, sink)
        pool.shutdown()

        assert pool.submitted == 10
        assert pool.await_completion(timeout=10) is True
        assert pool.pending == 0
        assert sink.counts() == Counter(line.upper() for line in lines)

    def test_each_chunk_runs_on_pool_threads(self) -> None:
        lines = make_lines(20)
        sink = ResultSink()
        thread_names: set[str] = set()
        lock = threading.Lock()

        def record_thread(line: str) -> str:
            with lock:
                thread_names.add(threading.current_thread().name)
            return line.upper()

        with WorkerPool(pool_size=3, transform=record_thread) as pool:
            for chunk in partition_lines(len(lines), 10):
                pool.submit(lines, chunk, sink)

        assert pool.await_completion(timeout=10) is True
        assert len(sink) == 20
        assert 1 <= len(thread_names) <= 3
        assert all(name.startswith("file-processor") for name in thread_names)

    def test_submit_after_shutdown_raises(self) -> None:
        pool = WorkerPool(pool_size=1)
        pool.shutdown()

        with pytest.raises(RuntimeError):
            pool.submit(("a",), partition_lines(1, 1)[0], ResultSink())

    def test_await_with_nothing_submitted(self) -> None:
        pool = WorkerPool(pool_size=5)
        pool.shutdown()

        assert pool.await_completion(timeout=1) is True

    def test_rejects_empty_pool(self) -> None:
        with pytest.raises(ValueError):
            WorkerPool(pool_size=0)

    def test_reraises_worker_exception(self) -> None:
        def explode(line: str) -> str:
            raise RuntimeError(f"bad line {line}")

        pool = WorkerPool(pool_size=2, transform=explode)
        pool.submit(("x",), partition_lines(1, 1)[0], ResultSink())
        pool.shutdown()

        with pytest.raises(RuntimeError, match="bad line x"):
            pool.await_completion(timeout=10)

    def test_reraises_failure_while_other_chunk_still_running(self) -> None:
        gate = threading.Event()

        def fail_or_stall(line: str) -> str:
            if line == "bad":
                raise RuntimeError("bad chunk")
            gate.wait(timeout=10)
            return line.upper()

        pool = WorkerPool(pool_size=2, transform=fail_or_stall)
        lines = ("slow", "bad")
        for chunk in partition_lines(len(lines), 2):
            pool.submit(lines, chunk, ResultSink())
        pool.shutdown()

        try:
            with pytest.raises(RuntimeError, match="bad chunk"):
                pool.await_completion(timeout=5)
            assert pool.pending == 1
        finally:
            gate.set()


class TestCancellation:
    """Test cases for forced cancellation."""

    def test_timeout_then_cancel_drops_queued_chunks(self) -> None:
        gate = threading.Event()
        started = threading.Semaphore(0)
        lines = make_lines(10)
        sink = ResultSink()

        def blocked(line: str) -> str:
            started.release()
            gate.wait(timeout=10)
            return line.upper()

        pool = WorkerPool(pool_size=1, transform=blocked)
        for chunk in partition_lines(len(lines), 10):
            pool.submit(lines, chunk, sink)
        pool.shutdown()

        try:
            assert started.acquire(timeout=10)
            assert pool.await_completion(timeout=0.05) is False

            dropped = pool.cancel_all()

            # One chunk is running on the single thread; the other nine were queued.
            assert dropped == 9
            assert pool.cancelled is True
        finally:
            gate.set()

        pool.await_completion(timeout=10)
        # The in-flight line finishes; nothing else was processed.
        assert len(sink) == 1

    def test_cancel_is_idempotent(self) -> None:
        pool = WorkerPool(pool_size=1)
        pool.submit(("a",), partition_lines(1, 1)[0], ResultSink())
        pool.cancel_all()

        assert pool.cancel_all() == 0

    def test_submit_after_cancel_raises(self) -> None:
        pool = WorkerPool(pool_size=1)
        pool.cancel_all()

        with pytest.raises(RuntimeError):
            pool.submit(("a",), partition_lines(1, 1)[0], ResultSink())

    def test_context_manager_cancels_on_error(self) -> None:
        with pytest.raises(KeyboardInterrupt):
            with WorkerPool(pool_size=1) as pool:
                raise KeyboardInterrupt

        assert pool.cancelled is True

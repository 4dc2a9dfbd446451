"""Fixed-size thread pool that processes chunks."""

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait

from file_processor.partition.types import Chunk
from file_processor.sink.result_sink import ResultSink
from file_processor.worker.process_chunk import process_chunk
from file_processor.worker.transform import Transform, uppercase

logger = logging.getLogger(__name__)

THREAD_NAME_PREFIX = "file-processor"


class WorkerPool:
    """
    Bounded set of worker threads, one chunk per task.

    Chunks beyond the number of threads queue inside the executor. The pool
    supports a graceful shutdown (no new submissions, queued work still runs)
    and a forced cancellation (queued work dropped, running chunks told to
    stop at the next line).
    """

    def __init__(self, pool_size: int, transform: Transform = uppercase):
        if pool_size < 1:
            raise ValueError(f"pool_size must be at least 1, got {pool_size}")

        self._pool_size = pool_size
        self._transform = transform
        self._executor = ThreadPoolExecutor(
            max_workers=pool_size,
            thread_name_prefix=THREAD_NAME_PREFIX,
        )
        self._cancel_event = threading.Event()
        self._futures: list[Future[int]] = []
        self._accepting = True

    @property
    def pool_size(self) -> int:
        return self._pool_size

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    @property
    def submitted(self) -> int:
        return len(self._futures)

    @property
    def pending(self) -> int:
        """Number of submitted chunks that have not finished yet."""
        return sum(1 for future in self._futures if not future.done())

    def submit(self, lines: Sequence[str], chunk: Chunk, sink: ResultSink) -> Future[int]:
        """Queue one chunk for processing."""
        if not self._accepting:
            raise RuntimeError("cannot submit chunks after the pool was shut down")

        future = self._executor.submit(
            process_chunk,
            lines,
            chunk,
            sink,
            self._transform,
            self._cancel_event,
        )
        self._futures.append(future)
        return future

    def shutdown(self) -> None:
        """Stop accepting new chunks; already submitted chunks keep running."""
        self._accepting = False
        self._executor.shutdown(wait=False)

    def await_completion(self, timeout: float | None) -> bool:
        """
        Block until every submitted chunk finished, one failed, or the timeout elapsed.

        A failed chunk is raised even when other chunks are still running.

        Returns:
            True if all chunks finished, False on timeout.

        Raises:
            Exception: The first exception raised by a chunk, in submission order.
        """
        done, not_done = wait(self._futures, timeout=timeout, return_when=FIRST_EXCEPTION)

        for future in self._futures:
            if future not in done or future.cancelled():
                continue
            exc = future.exception()
            if exc is not None:
                raise exc

        return not not_done

    def cancel_all(self) -> int:
        """
        Force cancellation of queued and running chunks.

        Does not wait for running chunks to reach a line boundary.

        Returns:
            Number of chunks cancelled before they started.
        """
        if self._cancel_event.is_set():
            return 0

        self._accepting = False
        self._cancel_event.set()
        cancelled = sum(1 for future in self._futures if future.cancel())
        self._executor.shutdown(wait=False, cancel_futures=True)

        logger.debug(
            "Pool cancelled: %d queued chunks dropped, %d still running",
            cancelled,
            self.pending,
        )
        return cancelled

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.cancel_all()
        else:
            self.shutdown()

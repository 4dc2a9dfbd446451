"""End-to-end orchestration: read, partition, dispatch, wait, report."""

import logging
import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO, TypeAlias

from file_processor.config import ProcessorConfig, is_gil_enabled
from file_processor.coordinator.state import RunResult, RunState
from file_processor.errors import SourceNotFoundError
from file_processor.partition import partition_lines
from file_processor.sink import ResultSink
from file_processor.source import read_all_lines
from file_processor.worker import Transform, WorkerPool, uppercase

logger = logging.getLogger(__name__)

LineReader: TypeAlias = Callable[[str, str], Sequence[str]]

NOT_FOUND_MESSAGE = "File not found: {path}"
TIMEOUT_MESSAGE = "Tasks did not finish in time"
RESULT_MESSAGE = "Lines processed: {count}"

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_TIMED_OUT = 2


class Coordinator:
    """
    State machine driving a single run.

    IDLE -> VALIDATING -> READING -> DISPATCHING -> AWAITING_COMPLETION
    -> {COMPLETED, TIMED_OUT, INTERRUPTED} -> REPORTED

    A missing input goes straight from VALIDATING to REPORTED, with NOT_FOUND
    as the returned outcome. An interrupted run
    cancels the pool and re-raises without reporting.
    """

    def __init__(
        self,
        config: ProcessorConfig | None = None,
        *,
        reader: LineReader = read_all_lines,
        transform: Transform = uppercase,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ):
        self.config = config or ProcessorConfig()
        self._reader = reader
        self._transform = transform
        self._out = out
        self._err = err
        self.state = RunState.IDLE
        self.history: list[RunState] = [RunState.IDLE]

    def _transition(self, new_state: RunState) -> None:
        logger.debug("State: %s -> %s", self.state.value, new_state.value)
        self.state = new_state
        self.history.append(new_state)

    def _write(self, stream: TextIO | None, fallback: TextIO, message: str) -> None:
        # Resolved at write time so redirected sys.stdout/sys.stderr are honoured.
        print(message, file=stream or fallback, flush=True)

    def _report_not_found(self, resolved: str, started: float) -> RunResult:
        self._write(self._err, sys.stderr, NOT_FOUND_MESSAGE.format(path=resolved))
        self._transition(RunState.REPORTED)
        logger.info("Result: input missing (total %.2fs)", time.perf_counter() - started)
        return RunResult(
            state=RunState.NOT_FOUND,
            input_path=resolved,
            elapsed=time.perf_counter() - started,
            timeout_seconds=self.config.timeout_seconds,
        )

    def run(self, input_path: str | Path) -> RunResult:
        """
        Process one file end to end.

        Returns:
            The run outcome. Missing input and timeouts are reported on the
            error stream and returned, not raised.

        Raises:
            SourceReadError: If the file exists but cannot be read.
            KeyboardInterrupt: If the wait is interrupted; the pool is
                cancelled first.
        """
        if self.state is not RunState.IDLE:
            raise RuntimeError("a Coordinator runs exactly once")

        total_start = time.perf_counter()
        config = self.config
        input_file = Path(input_path)
        resolved = str(input_file.resolve())

        gil_status = "enabled" if is_gil_enabled() else "disabled"
        logger.info(
            "Starting: file=%s, workers=%d, chunks=%d, timeout=%.1fs, GIL=%s",
            input_file.name,
            config.pool_size,
            config.num_chunks,
            config.timeout_seconds,
            gil_status,
        )

        # Validate.
        self._transition(RunState.VALIDATING)
        if not input_file.is_file():
            return self._report_not_found(resolved, total_start)

        # Read once; every worker shares this tuple read-only.
        self._transition(RunState.READING)
        t_read = time.perf_counter()
        try:
            lines = tuple(self._reader(resolved, config.encoding))
        except SourceNotFoundError:
            return self._report_not_found(resolved, total_start)
        logger.info("Read %d lines in %.2fs", len(lines), time.perf_counter() - t_read)

        # Dispatch.
        self._transition(RunState.DISPATCHING)
        t_dispatch = time.perf_counter()
        chunks = partition_lines(len(lines), config.num_chunks)
        sink = ResultSink()
        pool = WorkerPool(config.pool_size, transform=self._transform)

        try:
            for chunk in chunks:
                pool.submit(lines, chunk, sink)
            pool.shutdown()
            logger.info(
                "Dispatched %d chunks of up to %d lines to %d workers",
                len(chunks),
                len(chunks[0]) if chunks else 0,
                config.pool_size,
            )

            self._transition(RunState.AWAITING_COMPLETION)
            finished = pool.await_completion(config.timeout_seconds)
        except KeyboardInterrupt:
            pool.cancel_all()
            self._transition(RunState.INTERRUPTED)
            logger.warning("Interrupted: pool cancelled with %d chunks unfinished", pool.pending)
            raise
        except BaseException:
            pool.cancel_all()
            raise

        if finished:
            self._transition(RunState.COMPLETED)
        else:
            self._transition(RunState.TIMED_OUT)
            self._write(self._err, sys.stderr, TIMEOUT_MESSAGE)
            dropped = pool.cancel_all()
            logger.warning(
                "Timed out after %.1fs: %d queued chunks dropped",
                config.timeout_seconds,
                dropped,
            )

        logger.info("Workers done in %.2fs", time.perf_counter() - t_dispatch)

        # Report, read only after drain or cancellation.
        results = sink.snapshot()
        outcome = self.state
        self._write(self._out, sys.stdout, RESULT_MESSAGE.format(count=len(results)))
        self._transition(RunState.REPORTED)

        total_time = time.perf_counter() - total_start
        logger.info("Result: %d lines processed (total %.2fs)", len(results), total_time)
        return RunResult(
            state=outcome,
            input_path=resolved,
            lines_processed=len(results),
            results=results,
            elapsed=total_time,
            timeout_seconds=config.timeout_seconds,
        )


def process_file(
    input_path: str | Path,
    config: ProcessorConfig | None = None,
    *,
    reader: LineReader = read_all_lines,
    transform: Transform = uppercase,
) -> RunResult:
    """Run a fresh Coordinator over one file."""
    coordinator = Coordinator(config, reader=reader, transform=transform)
    return coordinator.run(input_path)


def exit_code_for(result: RunResult, strict: bool = False) -> int:
    """
    Map a run outcome to a process exit status.

    Without strict mode every handled outcome exits 0, as the reference
    tool does; strict mode distinguishes a missing file and a timeout.
    """
    if not strict or result.state is RunState.COMPLETED:
        return EXIT_OK
    if result.state is RunState.NOT_FOUND:
        return EXIT_NOT_FOUND
    if result.state is RunState.TIMED_OUT:
        return EXIT_TIMED_OUT
    return EXIT_OK


def main_process(
    input_path: str | Path,
    config: ProcessorConfig | None = None,
    strict: bool = False,
) -> int:
    """Main entry point: run, print the report, return an exit status."""
    result = process_file(input_path, config)
    return exit_code_for(result, strict=strict)

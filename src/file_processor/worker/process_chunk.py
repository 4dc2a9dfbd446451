"""Processing of a single chunk inside a worker thread."""

import threading
from collections.abc import Sequence

from file_processor.partition.types import Chunk
from file_processor.sink.result_sink import ResultSink
from file_processor.worker.transform import Transform, uppercase


def process_chunk(
    lines: Sequence[str],
    chunk: Chunk,
    sink: ResultSink,
    transform: Transform = uppercase,
    cancel_event: threading.Event | None = None,
) -> int:
    """
    Transform the lines of one chunk in index order and insert them into the sink.

    The cancel event is checked before each line, so a cancelled chunk stops
    at the next line boundary and never inserts a partial or repeated result.

    Returns:
        Number of lines inserted.
    """
    processed = 0
    for j in chunk.indices():
        if cancel_event is not None and cancel_event.is_set():
            break
        sink.add(transform(lines[j]))
        processed += 1

    return processed

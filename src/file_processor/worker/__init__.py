"""Worker pool and per-chunk processing."""

from file_processor.worker.pool import WorkerPool
from file_processor.worker.process_chunk import process_chunk
from file_processor.worker.transform import Transform, uppercase

__all__ = ["Transform", "WorkerPool", "process_chunk", "uppercase"]

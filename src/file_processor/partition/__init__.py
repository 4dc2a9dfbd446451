"""Partitioning of input lines into worker chunks."""

from file_processor.partition.partition import compute_chunk_size, partition_lines
from file_processor.partition.types import Chunk

__all__ = ["Chunk", "compute_chunk_size", "partition_lines"]

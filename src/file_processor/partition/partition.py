"""Deterministic partitioning of a line sequence into contiguous chunks."""

from file_processor.partition.types import Chunk


def compute_chunk_size(total_lines: int, num_chunks: int) -> int:
    """Return ceil(total_lines / num_chunks), never less than 1."""
    if num_chunks < 1:
        raise ValueError(f"num_chunks must be at least 1, got {num_chunks}")
    if total_lines < 0:
        raise ValueError(f"total_lines must be non-negative, got {total_lines}")

    return max(1, -(-total_lines // num_chunks))


def partition_lines(total_lines: int, num_chunks: int) -> list[Chunk]:
    """
    Split [0, total_lines) into at most num_chunks contiguous chunks.

    Trailing chunks that would start past the end are not emitted, so fewer
    than num_chunks chunks come back when total_lines < num_chunks, and none
    for an empty input. The chunks cover every index exactly once.
    """
    chunk_size = compute_chunk_size(total_lines, num_chunks)

    chunks: list[Chunk] = []
    for i in range(num_chunks):
        start = i * chunk_size
        if start >= total_lines:
            break
        end = min(start + chunk_size, total_lines)
        chunks.append(Chunk(index=i, start=start, end=end))

    return chunks

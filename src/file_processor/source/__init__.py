"""Line source: single-pass file ingestion."""

from file_processor.source.reader import DEFAULT_ENCODING, read_all_lines

__all__ = ["DEFAULT_ENCODING", "read_all_lines"]

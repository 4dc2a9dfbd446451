"""Result sink shared by all workers."""

from file_processor.sink.result_sink import ResultSink

__all__ = ["ResultSink"]

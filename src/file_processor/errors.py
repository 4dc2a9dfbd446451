"""Exception hierarchy for file processing runs."""


class FileProcessorError(Exception):
    """Base class for all file processor errors."""


class SourceNotFoundError(FileProcessorError, FileNotFoundError):
    """The input path does not refer to an existing file."""

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path


class SourceReadError(FileProcessorError, OSError):
    """The input file exists but could not be read or decoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path


class ProcessingTimeoutError(FileProcessorError, TimeoutError):
    """Workers did not drain within the configured bound."""

    def __init__(self, timeout_seconds: float, lines_processed: int):
        super().__init__(
            f"Tasks did not finish in {timeout_seconds:g}s "
            f"({lines_processed} lines processed)"
        )
        self.timeout_seconds = timeout_seconds
        self.lines_processed = lines_processed

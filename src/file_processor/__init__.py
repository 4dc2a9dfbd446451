"""File Processor - Uppercase a text file's lines on a fixed thread pool."""

from file_processor.config import ProcessorConfig
from file_processor.coordinator import Coordinator, RunResult, RunState, main_process, process_file

__all__ = [
    "Coordinator",
    "ProcessorConfig",
    "RunResult",
    "RunState",
    "main_process",
    "process_file",
]

"""Coordinator state machine for a processing run."""

from file_processor.coordinator.run import (
    Coordinator,
    exit_code_for,
    main_process,
    process_file,
)
from file_processor.coordinator.state import RunResult, RunState

__all__ = [
    "Coordinator",
    "RunResult",
    "RunState",
    "exit_code_for",
    "main_process",
    "process_file",
]

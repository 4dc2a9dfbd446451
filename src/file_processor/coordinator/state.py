"""Run states and the result of a coordinated run."""

from dataclasses import dataclass
from enum import Enum

from file_processor.errors import ProcessingTimeoutError, SourceNotFoundError


class RunState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    NOT_FOUND = "not_found"
    READING = "reading"
    DISPATCHING = "dispatching"
    AWAITING_COMPLETION = "awaiting_completion"
    COMPLETED = "completed"
    TIMED_OUT = "timed_out"
    INTERRUPTED = "interrupted"
    REPORTED = "reported"


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcome of a single run: how it ended and what was collected."""

    state: RunState
    input_path: str
    lines_processed: int = 0
    results: tuple[str, ...] = ()
    elapsed: float = 0.0
    timeout_seconds: float | None = None

    @property
    def ok(self) -> bool:
        return self.state is RunState.COMPLETED

    def raise_for_state(self) -> None:
        """Raise the error matching a failed outcome; no-op for a completed run."""
        if self.state is RunState.NOT_FOUND:
            raise SourceNotFoundError(self.input_path)
        if self.state is RunState.TIMED_OUT:
            raise ProcessingTimeoutError(self.timeout_seconds or 0.0, self.lines_processed)

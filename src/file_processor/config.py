"""Run configuration and environment overrides."""

import os
import sys
from dataclasses import dataclass, replace

from file_processor.source.reader import DEFAULT_ENCODING

DEFAULT_INPUT_FILE = "data.txt"
DEFAULT_POOL_SIZE = 5
DEFAULT_NUM_CHUNKS = 10
DEFAULT_TIMEOUT_SECONDS = 60.0

# Environment variables that override the defaults.
FP_POOL_SIZE_ENV = "FP_POOL_SIZE"
FP_NUM_CHUNKS_ENV = "FP_NUM_CHUNKS"
FP_TIMEOUT_ENV = "FP_TIMEOUT_SECONDS"
FP_ENCODING_ENV = "FP_ENCODING"


def is_gil_enabled() -> bool:
    """Check if GIL is enabled."""
    try:
        return sys._is_gil_enabled()
    except AttributeError:
        return True


@dataclass(frozen=True, slots=True)
class ProcessorConfig:
    """Pool size, chunk count and wait bound for one run."""

    pool_size: int = DEFAULT_POOL_SIZE
    num_chunks: int = DEFAULT_NUM_CHUNKS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if self.pool_size < 1:
            raise ValueError(f"pool_size must be at least 1, got {self.pool_size}")
        if self.num_chunks < 1:
            raise ValueError(f"num_chunks must be at least 1, got {self.num_chunks}")
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")

    @classmethod
    def from_env(cls) -> "ProcessorConfig":
        """
        Build a config from the defaults and any FP_* overrides.

        Priority:
        1. FP_POOL_SIZE / FP_NUM_CHUNKS / FP_TIMEOUT_SECONDS / FP_ENCODING
        2. Module defaults
        """
        return cls(
            pool_size=_env_int(FP_POOL_SIZE_ENV, DEFAULT_POOL_SIZE),
            num_chunks=_env_int(FP_NUM_CHUNKS_ENV, DEFAULT_NUM_CHUNKS),
            timeout_seconds=_env_float(FP_TIMEOUT_ENV, DEFAULT_TIMEOUT_SECONDS),
            encoding=os.environ.get(FP_ENCODING_ENV, "") or DEFAULT_ENCODING,
        )

    def with_overrides(self, **overrides) -> "ProcessorConfig":
        """Return a copy with the non-None overrides applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None

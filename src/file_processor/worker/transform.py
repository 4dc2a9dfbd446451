"""Per-line transformation applied by workers."""

from collections.abc import Callable
from typing import TypeAlias

Transform: TypeAlias = Callable[[str], str]


def uppercase(line: str) -> str:
    return line.upper()

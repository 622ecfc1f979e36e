"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TaskResult:
    """Outcome of one conversion task."""

    success: bool
    output_path: Path | None = None
    byte_size: int | None = None
    error: str | None = None

    @classmethod
    def failed(cls, error: str, output_path: Path | None = None) -> TaskResult:
        return cls(success=False, output_path=output_path, error=error)


@dataclass
class RunStatistics:
    """Counters mutated as task results arrive."""

    total: int
    start_time: float
    successful: int = 0
    failed: int = 0
    total_bytes: int = 0


@dataclass(frozen=True)
class RunSummary:
    """Structured run outcome exposed to callers."""

    total: int
    successful: int
    failed: int
    total_bytes: int
    elapsed_millis: int

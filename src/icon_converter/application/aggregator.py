"""Run-level success/failure accounting."""

from __future__ import annotations

import time
from collections.abc import Callable

from icon_converter.application.results import RunStatistics, RunSummary, TaskResult


class ResultAggregator:
    """Accumulate task outcomes into run statistics."""

    def __init__(
        self, total: int = 0, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self._clock = clock
        self.statistics = RunStatistics(total=total, start_time=clock())

    def record(self, result: TaskResult) -> None:
        """Count one result; successful results add their byte size."""
        if result.success:
            self.statistics.successful += 1
            self.statistics.total_bytes += result.byte_size or 0
        else:
            self.statistics.failed += 1

    def summarize(self) -> RunSummary:
        """Snapshot the counters with wall time elapsed since construction."""
        stats = self.statistics
        elapsed = self._clock() - stats.start_time
        return RunSummary(
            total=stats.total,
            successful=stats.successful,
            failed=stats.failed,
            total_bytes=stats.total_bytes,
            elapsed_millis=int(round(elapsed * 1000)),
        )

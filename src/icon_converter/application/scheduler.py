"""Sequential and batched-concurrent task execution."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from icon_converter.application.planner import ConversionTask
from icon_converter.application.results import TaskResult
from icon_converter.types import ExecutionMode

BATCH_SIZE = 4

type TaskRunner = Callable[[ConversionTask], Awaitable[TaskResult]]
type ResultCallback = Callable[[TaskResult], None]


def partition_batches(
    tasks: Sequence[ConversionTask], batch_size: int = BATCH_SIZE
) -> list[list[ConversionTask]]:
    """Split tasks into contiguous groups; the last group may be smaller."""
    if batch_size < 1:
        raise ValueError("batch_size must be a positive integer.")
    return [
        list(tasks[start : start + batch_size])
        for start in range(0, len(tasks), batch_size)
    ]


class TaskScheduler:
    """Run conversion tasks without letting one failure abort the run.

    Parameters
    ----------
    runner : TaskRunner
        Coroutine function executing a single task.
    batch_size : int, default=4
        Number of tasks in flight at once in ``"batched"`` mode.
    on_result : ResultCallback | None, default=None
        Called with each result as soon as it settles.
    logger : logging.Logger | None, default=None
        Progress sink; the module logger when omitted.
    """

    def __init__(
        self,
        runner: TaskRunner,
        *,
        batch_size: int = BATCH_SIZE,
        on_result: ResultCallback | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._runner = runner
        self._batch_size = batch_size
        self._on_result = on_result
        self._logger = logger or logging.getLogger(__name__)

    async def execute(
        self,
        tasks: Sequence[ConversionTask],
        mode: ExecutionMode = "sequential",
    ) -> list[TaskResult]:
        """Execute every task and return one result per task, in task order."""
        if mode == "sequential":
            return await self._run_sequential(tasks)
        if mode == "batched":
            return await self._run_batched(tasks)
        raise ValueError(f"unsupported execution mode: {mode}")

    async def _run_sequential(
        self, tasks: Sequence[ConversionTask]
    ) -> list[TaskResult]:
        results: list[TaskResult] = []
        for index, task in enumerate(tasks, start=1):
            self._logger.info("[%d/%d] Processing %s...", index, len(tasks), task.label)
            try:
                result = await self._runner(task)
            except Exception as exc:
                result = self._unexpected_failure(task, exc)
            self._emit(result)
            results.append(result)
        return results

    async def _run_batched(self, tasks: Sequence[ConversionTask]) -> list[TaskResult]:
        self._logger.info("Running in parallel mode...")
        batches = partition_batches(tasks, self._batch_size)
        results: list[TaskResult] = []
        for number, batch in enumerate(batches, start=1):
            self._logger.info("Processing batch %d/%d", number, len(batches))
            outcomes = await asyncio.gather(
                *(self._runner(task) for task in batch), return_exceptions=True
            )
            for task, outcome in zip(batch, outcomes):
                if isinstance(outcome, TaskResult):
                    result = outcome
                elif isinstance(outcome, Exception):
                    result = self._unexpected_failure(task, outcome)
                else:
                    raise outcome
                self._emit(result)
                results.append(result)
        return results

    def _unexpected_failure(self, task: ConversionTask, exc: Exception) -> TaskResult:
        self._logger.error(
            "Task failed: %s -> %s: %r", task.source_location, task.output_path, exc
        )
        return TaskResult.failed(f"{type(exc).__name__}: {exc}")

    def _emit(self, result: TaskResult) -> None:
        if self._on_result is not None:
            self._on_result(result)

"""Application use-cases orchestrating conversion runs."""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack

from icon_converter.adapters.fetchers import CachingContentFetcher
from icon_converter.adapters.rasterizers import CairoRasterizer
from icon_converter.adapters.styling import SvgStyleTransformer
from icon_converter.application.aggregator import ResultAggregator
from icon_converter.application.options import SquareOptions
from icon_converter.application.planner import ConversionTask, plan_tasks
from icon_converter.application.ports import (
    ContentFetcher,
    OutputWriter,
    Rasterizer,
    StyleTransformer,
)
from icon_converter.application.results import RunSummary, TaskResult
from icon_converter.application.scheduler import TaskScheduler
from icon_converter.errors import IconConverterError
from icon_converter.infrastructure.output import FileOutputWriter
from icon_converter.reporting import format_bytes, log_run_banner, log_run_summary
from icon_converter.schemas import ConversionConfig
from icon_converter.types import ExecutionMode


async def execute_task(
    task: ConversionTask,
    *,
    fetcher: ContentFetcher,
    transformer: StyleTransformer,
    rasterizer: Rasterizer,
    writer: OutputWriter,
    logger: logging.Logger | None = None,
) -> TaskResult:
    """Use-case: fetch, restyle, rasterize and write one task's PNG.

    Conversion errors are returned as a failed result; anything else
    propagates to the scheduler.
    """
    logger = logger or logging.getLogger(__name__)
    logger.debug(
        "Converting %s PNG: %s -> %s", task.kind, task.source_location, task.output_path
    )
    params = task.parameters
    try:
        markup = await fetcher.fetch(task.source_location)
        if isinstance(params, SquareOptions):
            styled = transformer.transform(
                markup, color=params.color, width=params.size, height=params.size
            )
            image = rasterizer.render_square(styled, params.size)
        else:
            styled = transformer.transform(
                markup,
                color=params.color,
                width=params.icon_size,
                height=params.icon_size,
            )
            image = rasterizer.render_wide(
                styled, params.icon_size, params.width, params.height
            )
        payload = rasterizer.encode_png(image)
        await writer.write(task.output_path, payload)
    except IconConverterError as exc:
        logger.error(
            "%s conversion failed for %s: %s",
            task.kind.capitalize(),
            task.source_location,
            exc,
        )
        return TaskResult.failed(str(exc), output_path=task.output_path)

    logger.debug(
        "%s PNG saved: %s (%s)",
        task.kind.capitalize(),
        task.output_path,
        format_bytes(len(payload)),
    )
    return TaskResult(success=True, output_path=task.output_path, byte_size=len(payload))


async def run_conversion(
    config: ConversionConfig,
    mode: ExecutionMode = "sequential",
    *,
    fetcher: ContentFetcher | None = None,
    transformer: StyleTransformer | None = None,
    rasterizer: Rasterizer | None = None,
    writer: OutputWriter | None = None,
    logger: logging.Logger | None = None,
) -> RunSummary:
    """Use-case: convert every icon of every source and summarize the run.

    Parameters
    ----------
    config : ConversionConfig
        Validated configuration; never re-validated here.
    mode : {"sequential", "batched"}, default="sequential"
        Scheduling model.
    fetcher, transformer, rasterizer, writer : optional
        Port implementations; defaults are created when omitted.
    logger : logging.Logger | None, default=None
        Sink for progress and summary messages.

    Returns
    -------
    RunSummary
        Counts, output bytes and elapsed wall time.

    Raises
    ------
    WriteError
        If the output directory cannot be created; no task runs then.
    """
    logger = logger or logging.getLogger(__name__)
    transformer = transformer or SvgStyleTransformer(logger=logger)
    rasterizer = rasterizer or CairoRasterizer()
    writer = writer or FileOutputWriter(logger=logger)

    aggregator = ResultAggregator()

    async with AsyncExitStack() as stack:
        if fetcher is None:
            fetcher = await stack.enter_async_context(
                CachingContentFetcher(logger=logger)
            )
        active_fetcher = fetcher

        writer.ensure_directory(config.settings.output_directory)
        log_run_banner(logger, config, mode)

        tasks = plan_tasks(config.icons, config.sources, config.settings)
        aggregator.statistics.total = len(tasks)

        async def _run(task: ConversionTask) -> TaskResult:
            return await execute_task(
                task,
                fetcher=active_fetcher,
                transformer=transformer,
                rasterizer=rasterizer,
                writer=writer,
                logger=logger,
            )

        scheduler = TaskScheduler(_run, on_result=aggregator.record, logger=logger)
        await scheduler.execute(tasks, mode)

    summary = aggregator.summarize()
    log_run_summary(logger, summary)
    return summary

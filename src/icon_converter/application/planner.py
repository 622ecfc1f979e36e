"""Expansion of a configuration into ordered conversion tasks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from icon_converter.application.options import SquareOptions, WideOptions
from icon_converter.schemas import ConversionSettings, SourceConfig
from icon_converter.sources import join_source
from icon_converter.types import TaskKind

SVG_EXTENSION = ".svg"


@dataclass(frozen=True)
class ConversionTask:
    """One PNG to produce from one icon of one source."""

    kind: TaskKind
    source_location: str
    output_path: Path
    icon_name: str
    suffix: str
    parameters: SquareOptions | WideOptions

    @property
    def label(self) -> str:
        return f"{self.icon_name} ({self.kind})"


def icon_basename(icon_name: str) -> str:
    """Strip one trailing ``.svg`` extension, if present."""
    if icon_name.endswith(SVG_EXTENSION):
        return icon_name[: -len(SVG_EXTENSION)]
    return icon_name


def plan_tasks(
    icons: Sequence[str],
    sources: Sequence[SourceConfig],
    settings: ConversionSettings,
) -> list[ConversionTask]:
    """Emit a square and a wide task per icon per source.

    Tasks are grouped by icon, then by source, then by kind (square first).
    Planning performs no I/O.

    Parameters
    ----------
    icons : Sequence[str]
        Icon filenames in configured order.
    sources : Sequence[SourceConfig]
        Sources in configured order.
    settings : ConversionSettings
        Shared size, colour, wide layout and output directory.

    Returns
    -------
    list[ConversionTask]
        ``2 * len(icons) * len(sources)`` tasks.
    """
    wide = settings.resolved_wide()
    square_options = SquareOptions(size=settings.size, color=settings.color)
    wide_options = WideOptions(
        width=wide.width,
        height=wide.height,
        icon_size=wide.icon_size,
        color=settings.color,
    )
    output_dir = settings.output_directory

    tasks: list[ConversionTask] = []
    for icon_name in icons:
        base_name = icon_basename(icon_name)
        for source in sources:
            location = join_source(source.location, icon_name)
            tasks.append(
                ConversionTask(
                    kind="square",
                    source_location=location,
                    output_path=output_dir / f"{base_name}{source.suffix}.png",
                    icon_name=icon_name,
                    suffix=source.suffix,
                    parameters=square_options,
                )
            )
            tasks.append(
                ConversionTask(
                    kind="wide",
                    source_location=location,
                    output_path=output_dir
                    / f"{base_name}{source.suffix}{wide.wide_suffix}.png",
                    icon_name=icon_name,
                    suffix=source.suffix,
                    parameters=wide_options,
                )
            )
    return tasks

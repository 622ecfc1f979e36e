"""Unit tests for application use-case contracts."""

from __future__ import annotations

import time
from pathlib import Path

import pytest
from PIL import Image

from icon_converter.application.options import SquareOptions, WideOptions
from icon_converter.application.planner import ConversionTask
from icon_converter.application.use_cases import execute_task, run_conversion
from icon_converter.errors import FetchError, RasterError, WriteError
from icon_converter.schemas import ConversionConfig

MARKUP = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0h1"/></svg>'
PAYLOAD = b"\x89PNG fake"


class _Fetcher:
    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.calls: list[str] = []

    async def fetch(self, source: str, use_cache: bool = True) -> str:
        self.calls.append(source)
        if any(source.startswith(prefix) for prefix in self.failing):
            raise FetchError(f"Failed to fetch SVG from {source}: File not found")
        return MARKUP


class _Transformer:
    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []

    def transform(
        self,
        markup: str,
        *,
        color: str | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> str:
        self.calls.append({"color": color, "width": width, "height": height})
        return markup


class _Rasterizer:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.square_calls: list[int] = []
        self.wide_calls: list[tuple[int, int, int]] = []

    def render_square(self, markup: str, size: int) -> Image.Image:
        if self.error is not None:
            raise self.error
        self.square_calls.append(size)
        return Image.new("RGBA", (size, size))

    def render_wide(
        self, markup: str, icon_size: int, width: int, height: int
    ) -> Image.Image:
        if self.error is not None:
            raise self.error
        self.wide_calls.append((icon_size, width, height))
        return Image.new("RGBA", (width, height))

    def encode_png(self, image: Image.Image) -> bytes:
        return PAYLOAD


class _Writer:
    def __init__(self) -> None:
        self.events: list[tuple[str, Path]] = []
        self.written: dict[Path, bytes] = {}

    def ensure_directory(self, path: Path) -> None:
        self.events.append(("mkdir", path))

    async def write(self, path: Path, data: bytes) -> int:
        self.events.append(("write", path))
        self.written[path] = data
        return len(data)


def _square_task() -> ConversionTask:
    return ConversionTask(
        kind="square",
        source_location="./x/a.svg",
        output_path=Path("out/a_s.png"),
        icon_name="a.svg",
        suffix="_s",
        parameters=SquareOptions(size=10, color="#ff0000"),
    )


def _wide_task() -> ConversionTask:
    return ConversionTask(
        kind="wide",
        source_location="./x/a.svg",
        output_path=Path("out/a_s_wide.png"),
        icon_name="a.svg",
        suffix="_s",
        parameters=WideOptions(width=320, height=180, icon_size=160),
    )


def _ports(**overrides: object) -> dict[str, object]:
    ports: dict[str, object] = {
        "fetcher": _Fetcher(),
        "transformer": _Transformer(),
        "rasterizer": _Rasterizer(),
        "writer": _Writer(),
    }
    ports.update(overrides)
    return ports


def _config(*sources: str) -> ConversionConfig:
    return ConversionConfig.model_validate(
        {
            "icons": ["a.svg"],
            "sources": [
                {"source": source, "suffix": f"_{index}"}
                for index, source in enumerate(sources)
            ],
            "settings": {"size": 10, "outputDirectory": "out"},
        }
    )


@pytest.mark.asyncio
async def test_square_task_sizes_markup_and_writes_png() -> None:
    """Render square tasks at ``size`` and write the encoded payload."""
    ports = _ports()

    result = await execute_task(_square_task(), **ports)  # type: ignore[arg-type]

    assert result.success is True
    assert result.output_path == Path("out/a_s.png")
    assert result.byte_size == len(PAYLOAD)
    assert ports["transformer"].calls == [  # type: ignore[attr-defined]
        {"color": "#ff0000", "width": 10, "height": 10}
    ]
    assert ports["rasterizer"].square_calls == [10]  # type: ignore[attr-defined]
    assert ports["writer"].written == {Path("out/a_s.png"): PAYLOAD}  # type: ignore[attr-defined]


@pytest.mark.asyncio
async def test_wide_task_sizes_markup_to_icon_size() -> None:
    """Render wide tasks with the icon sized to ``icon_size``."""
    ports = _ports()

    result = await execute_task(_wide_task(), **ports)  # type: ignore[arg-type]

    assert result.success is True
    assert ports["transformer"].calls == [  # type: ignore[attr-defined]
        {"color": None, "width": 160, "height": 160}
    ]
    assert ports["rasterizer"].wide_calls == [(160, 320, 180)]  # type: ignore[attr-defined]


@pytest.mark.asyncio
async def test_conversion_errors_become_failed_results() -> None:
    """Return a failed result instead of raising on conversion errors."""
    writer = _Writer()
    ports = _ports(fetcher=_Fetcher(failing={"./x"}), writer=writer)

    result = await execute_task(_square_task(), **ports)  # type: ignore[arg-type]

    assert result.success is False
    assert result.output_path == Path("out/a_s.png")
    assert result.error is not None
    assert "File not found" in result.error
    assert writer.events == []


@pytest.mark.asyncio
async def test_raster_errors_become_failed_results() -> None:
    """Treat rasterization errors like any other conversion error."""
    ports = _ports(rasterizer=_Rasterizer(error=RasterError("empty image")))

    result = await execute_task(_wide_task(), **ports)  # type: ignore[arg-type]

    assert result.success is False
    assert result.error == "empty image"


@pytest.mark.asyncio
async def test_unexpected_errors_propagate() -> None:
    """Leave non-conversion exceptions to the scheduler."""
    ports = _ports(rasterizer=_Rasterizer(error=ZeroDivisionError("bug")))

    with pytest.raises(ZeroDivisionError):
        await execute_task(_square_task(), **ports)  # type: ignore[arg-type]


@pytest.mark.asyncio
@pytest.mark.parametrize("mode", ["sequential", "batched"])
async def test_run_conversion_prepares_directory_then_writes_every_task(
    mode: str,
) -> None:
    """Create the output directory once before any write."""
    ports = _ports()
    writer: _Writer = ports["writer"]  # type: ignore[assignment]

    summary = await run_conversion(
        _config("./x", "https://cdn.example.com/icons/"), mode, **ports  # type: ignore[arg-type]
    )

    assert (summary.total, summary.successful, summary.failed) == (4, 4, 0)
    assert summary.total_bytes == 4 * len(PAYLOAD)
    assert writer.events[0] == ("mkdir", Path("out"))
    assert [kind for kind, _ in writer.events[1:]] == ["write"] * 4
    assert sorted(path.name for path in writer.written) == [
        "a_0.png",
        "a_0_wide.png",
        "a_1.png",
        "a_1_wide.png",
    ]
    assert ports["fetcher"].calls.count("https://cdn.example.com/icons/a.svg") == 2  # type: ignore[attr-defined]


@pytest.mark.asyncio
async def test_run_conversion_counts_failed_sources() -> None:
    """Count failures per task while other sources still convert."""
    ports = _ports(fetcher=_Fetcher(failing={"missing"}))

    summary = await run_conversion(_config("./x", "missing"), **ports)  # type: ignore[arg-type]

    assert (summary.total, summary.successful, summary.failed) == (4, 2, 2)


@pytest.mark.asyncio
async def test_run_conversion_aborts_when_directory_cannot_be_created() -> None:
    """Raise before scheduling any task when the output directory fails."""

    class _BrokenWriter(_Writer):
        def ensure_directory(self, path: Path) -> None:
            raise WriteError(f"Could not create directory {path}")

    fetcher = _Fetcher()
    ports = _ports(fetcher=fetcher, writer=_BrokenWriter())

    with pytest.raises(WriteError):
        await run_conversion(_config("./x"), **ports)  # type: ignore[arg-type]
    assert fetcher.calls == []


@pytest.mark.asyncio
async def test_run_duration_includes_output_directory_setup() -> None:
    """Start the run clock before preparing the output directory."""

    class _SlowWriter(_Writer):
        def ensure_directory(self, path: Path) -> None:
            time.sleep(0.05)
            super().ensure_directory(path)

    ports = _ports(writer=_SlowWriter())

    summary = await run_conversion(_config("./x"), **ports)  # type: ignore[arg-type]

    assert summary.total == 2
    assert summary.elapsed_millis >= 50

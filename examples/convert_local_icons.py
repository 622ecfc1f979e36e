#!/usr/bin/env python3
"""Convert the bundled sample icons and report what was written."""

from __future__ import annotations

from pathlib import Path

from icon_converter import convert_icons, load_config
from icon_converter.logging_config import LogConfig
from icon_converter.reporting import format_bytes

ROOT = Path(__file__).resolve().parent


def main() -> None:
    """Convert examples/icons into examples/dist in batched mode."""
    LogConfig(verbose=False).configure()
    config = load_config(ROOT / "config-local-sample.yml")
    config = config.model_copy(
        update={
            "sources": [
                source.model_copy(update={"location": str(ROOT / "icons" / style)})
                for source, style in zip(config.sources, ("outline", "solid"))
            ],
            "settings": config.settings.model_copy(
                update={"output_directory": ROOT / "dist"}
            ),
        }
    )

    summary = convert_icons(config, parallel=True)
    print(
        f"{summary.successful}/{summary.total} written "
        f"({format_bytes(summary.total_bytes)}) in {summary.elapsed_millis} ms"
    )
    if summary.failed:
        raise SystemExit(f"FAIL: {summary.failed} conversions failed.")


if __name__ == "__main__":
    main()

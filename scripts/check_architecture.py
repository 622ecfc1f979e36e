#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/icon_converter"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    _assert_no_imports(
        PACKAGE / "cli/cli.py",
        [
            "import cairosvg",
            "from PIL",
            "import httpx",
        ],
    )

    # Planning, scheduling and aggregation stay free of I/O libraries.
    for name in ("planner.py", "scheduler.py", "aggregator.py", "results.py", "options.py"):
        _assert_no_imports(
            PACKAGE / "application" / name,
            [
                "import typer",
                "from typer",
                "import cairosvg",
                "import httpx",
                "from PIL",
                "icon_converter.adapters",
            ],
        )

    for path in (PACKAGE / "adapters").glob("*.py"):
        _assert_no_imports(path, ["import typer", "icon_converter.application"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()

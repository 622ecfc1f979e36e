"""Typed per-task rendering options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SquareOptions:
    """Square rendering configuration."""

    size: int
    color: str | None = None


@dataclass(frozen=True)
class WideOptions:
    """Letterboxed rendering configuration."""

    width: int
    height: int
    icon_size: int
    color: str | None = None

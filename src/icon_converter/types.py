"""Shared type aliases for converter modules."""

from __future__ import annotations

from typing import Literal

type TaskKind = Literal["square", "wide"]
type ExecutionMode = Literal["sequential", "batched"]
type IconStyle = Literal["outline", "solid"]

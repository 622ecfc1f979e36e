"""YAML configuration loading and validation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from icon_converter.errors import ConfigValidationError
from icon_converter.schemas import ConversionConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.yml")


def _format_location(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as ``sources[0].suffix``."""
    rendered = ""
    for part in loc:
        if isinstance(part, int):
            rendered += f"[{part}]"
        else:
            rendered += f".{part}" if rendered else str(part)
    return rendered or "configuration"


def format_validation_errors(exc: ValidationError) -> list[str]:
    """Flatten a pydantic ``ValidationError`` into ``path: message`` lines."""
    messages: list[str] = []
    for error in exc.errors():
        message = error["msg"]
        ctx = error.get("ctx") or {}
        if error["type"] == "value_error" and "error" in ctx:
            message = str(ctx["error"])
        messages.append(f"{_format_location(tuple(error['loc']))}: {message}")
    return messages


def parse_config(data: object) -> ConversionConfig:
    """Validate an already-parsed configuration document.

    Parameters
    ----------
    data : object
        Result of parsing the YAML document.

    Returns
    -------
    ConversionConfig
        Typed, immutable configuration.

    Raises
    ------
    ConfigValidationError
        Carrying every schema violation at once.
    """
    if not isinstance(data, Mapping):
        raise ConfigValidationError(["configuration: must be a mapping"])
    try:
        return ConversionConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigValidationError(format_validation_errors(exc)) from exc


def load_config(path: Path | str = DEFAULT_CONFIG_PATH) -> ConversionConfig:
    """Read, parse and validate a YAML configuration file."""
    resolved = Path(path).expanduser().resolve()
    logger.info("Loading configuration from: %s", resolved)
    try:
        text = resolved.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigValidationError([f"{path}: cannot read file ({exc.strerror or exc})"]) from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigValidationError([f"{path}: invalid YAML ({exc})"]) from exc

    config = parse_config(data)
    logger.info("Configuration loaded and validated successfully")
    return config

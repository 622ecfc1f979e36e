"""Exception hierarchy for icon conversion."""

from __future__ import annotations

from collections.abc import Iterable


class IconConverterError(Exception):
    """Base error for all conversion failures."""

    exit_code = 1


class ConfigValidationError(IconConverterError):
    """Configuration could not be loaded or violates the schema.

    Parameters
    ----------
    errors : Iterable[str]
        One human-readable message per violation, each prefixed by the
        dotted path of the offending field.
    """

    exit_code = 2

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = tuple(errors)
        lines = "\n".join(self.errors)
        super().__init__(f"Configuration validation failed:\n{lines}")


class FetchError(IconConverterError):
    """SVG markup could not be retrieved from a URL or local path."""


class MalformedMarkupError(IconConverterError):
    """Markup has no recognizable ``<svg>`` element."""


class RasterError(IconConverterError):
    """Rasterization, composition or PNG encoding failed."""


class WriteError(IconConverterError):
    """Output file or directory could not be written."""

"""Pydantic schemas for runtime validation of conversion configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

DEFAULT_WIDE_WIDTH = 320
DEFAULT_WIDE_HEIGHT = 180
DEFAULT_WIDE_SUFFIX = "_wide"
MAX_SQUARE_SIZE = 2048


class SourceConfig(BaseModel):
    """One configured icon origin: a URL prefix or a local directory."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    location: str = Field(alias="source", min_length=1)
    suffix: str = Field(min_length=1)


class WideSettings(BaseModel):
    """Letterboxed output layout."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    width: int = Field(gt=0, strict=True)
    height: int = Field(gt=0, strict=True)
    icon_size: int = Field(alias="iconSize", gt=0, strict=True)
    wide_suffix: str = Field(default=DEFAULT_WIDE_SUFFIX, alias="wideSuffix")

    @field_validator("icon_size")
    @classmethod
    def _validate_fits_canvas(cls, value: int, info: ValidationInfo) -> int:
        width = info.data.get("width")
        height = info.data.get("height")
        if width is not None and height is not None and value > min(width, height):
            raise ValueError("must be <= min(width, height)")
        return value

    @field_validator("wide_suffix", mode="before")
    @classmethod
    def _default_suffix(cls, value: object) -> object:
        return value or DEFAULT_WIDE_SUFFIX


class ConversionSettings(BaseModel):
    """Output size, colour and destination shared by every task."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    size: int = Field(ge=1, le=MAX_SQUARE_SIZE, strict=True)
    color: str | None = None
    output_directory: Path = Field(alias="outputDirectory")
    wide: WideSettings | None = None

    @field_validator("color", mode="before")
    @classmethod
    def _empty_color_is_none(cls, value: object) -> object:
        return value or None

    @field_validator("output_directory", mode="before")
    @classmethod
    def _validate_output_directory(cls, value: object) -> object:
        if not isinstance(value, (str, Path)) or not str(value).strip():
            raise ValueError("must be a non-empty string")
        return value

    def resolved_wide(self) -> WideSettings:
        """Return the wide layout, filling in defaults when it is omitted.

        The defaulted layout is not re-validated: an icon size larger than
        the default canvas surfaces later as a raster error for that task.
        """
        if self.wide is not None:
            return self.wide
        return WideSettings.model_construct(
            width=DEFAULT_WIDE_WIDTH,
            height=DEFAULT_WIDE_HEIGHT,
            icon_size=self.size,
            wide_suffix=DEFAULT_WIDE_SUFFIX,
        )


class ConversionConfig(BaseModel):
    """Validated configuration for one conversion run."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    icons: list[str] = Field(min_length=1)
    sources: list[SourceConfig] = Field(min_length=1)
    settings: ConversionSettings

    @field_validator("icons")
    @classmethod
    def _validate_icon_names(cls, value: list[str]) -> list[str]:
        if any(not item.strip() for item in value):
            raise ValueError("icon names cannot contain empty entries")
        return value

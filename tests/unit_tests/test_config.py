"""Unit tests for configuration schema validation and YAML loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from icon_converter.config import load_config, parse_config
from icon_converter.errors import ConfigValidationError


def _raw_config(**settings_overrides: object) -> dict[str, object]:
    settings: dict[str, object] = {
        "size": 80,
        "color": "#075db3",
        "outputDirectory": "dist",
    }
    settings.update(settings_overrides)
    return {
        "icons": ["user.svg", "key.svg"],
        "sources": [{"source": "./icons/outline", "suffix": "_outline"}],
        "settings": settings,
    }


def test_parse_config_maps_yaml_keys() -> None:
    """Map camelCase YAML keys onto typed fields."""
    config = parse_config(
        _raw_config(wide={"width": 320, "height": 180, "iconSize": 160})
    )

    assert config.icons == ["user.svg", "key.svg"]
    assert config.sources[0].location == "./icons/outline"
    assert config.sources[0].suffix == "_outline"
    assert config.settings.output_directory == Path("dist")
    assert config.settings.color == "#075db3"
    assert config.settings.wide is not None
    assert config.settings.wide.icon_size == 160
    assert config.settings.wide.wide_suffix == "_wide"


def test_wide_defaults_apply_when_section_is_omitted() -> None:
    """Use 320x180, the square size and ``_wide`` when wide is absent."""
    settings = parse_config(_raw_config(size=64)).settings

    wide = settings.resolved_wide()

    assert settings.wide is None
    assert (wide.width, wide.height, wide.icon_size, wide.wide_suffix) == (
        320,
        180,
        64,
        "_wide",
    )


def test_missing_or_empty_color_means_original_styling() -> None:
    """Treat an absent, null or empty colour as 'keep original paint'."""
    raw = _raw_config()
    del raw["settings"]["color"]  # type: ignore[attr-defined]
    assert parse_config(raw).settings.color is None
    assert parse_config(_raw_config(color=None)).settings.color is None
    assert parse_config(_raw_config(color="")).settings.color is None


def test_icon_size_larger_than_canvas_names_the_field() -> None:
    """Reject iconSize above min(width, height) with the offending path."""
    with pytest.raises(ConfigValidationError) as excinfo:
        parse_config(_raw_config(wide={"width": 180, "height": 320, "iconSize": 200}))

    assert any(
        line.startswith("settings.wide.iconSize:") for line in excinfo.value.errors
    )
    assert "settings.wide.iconSize" in str(excinfo.value)


def test_all_violations_are_reported_together() -> None:
    """Aggregate every schema violation into one error."""
    with pytest.raises(ConfigValidationError) as excinfo:
        parse_config(
            {
                "icons": [],
                "sources": [{"source": "", "suffix": "_x"}],
                "settings": {"size": 4096, "outputDirectory": ""},
            }
        )

    fields = {line.split(":", 1)[0] for line in excinfo.value.errors}
    assert {
        "icons",
        "sources[0].source",
        "settings.size",
        "settings.outputDirectory",
    } <= fields
    assert str(excinfo.value).startswith("Configuration validation failed:")


def test_size_bounds_are_inclusive() -> None:
    """Accept sizes 1 and 2048, reject 0."""
    assert parse_config(_raw_config(size=1)).settings.size == 1
    assert parse_config(_raw_config(size=2048)).settings.size == 2048
    with pytest.raises(ConfigValidationError):
        parse_config(_raw_config(size=0))


def test_missing_sections_are_reported() -> None:
    """Report required top-level sections that are absent."""
    with pytest.raises(ConfigValidationError) as excinfo:
        parse_config({"icons": ["a.svg"]})

    fields = {line.split(":", 1)[0] for line in excinfo.value.errors}
    assert {"sources", "settings"} <= fields


def test_non_mapping_document_is_rejected() -> None:
    """Reject empty or scalar YAML documents."""
    with pytest.raises(ConfigValidationError) as excinfo:
        parse_config(None)

    assert excinfo.value.errors == ("configuration: must be a mapping",)
    assert excinfo.value.exit_code == 2


def test_load_config_reads_yaml(tmp_path: Path) -> None:
    """Load and validate a YAML file from disk."""
    path = tmp_path / "config.yml"
    path.write_text(
        "icons:\n"
        "  - a.svg\n"
        "sources:\n"
        "  - source: ./x\n"
        "    suffix: _s\n"
        "settings:\n"
        "  size: 10\n"
        "  outputDirectory: out\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.icons == ["a.svg"]
    assert config.settings.size == 10
    assert config.settings.color is None


def test_load_config_wraps_yaml_syntax_errors(tmp_path: Path) -> None:
    """Surface YAML syntax errors as configuration errors."""
    path = tmp_path / "broken.yml"
    path.write_text("icons: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigValidationError, match="invalid YAML"):
        load_config(path)


def test_load_config_wraps_missing_file(tmp_path: Path) -> None:
    """Surface unreadable paths as configuration errors."""
    with pytest.raises(ConfigValidationError, match="cannot read file"):
        load_config(tmp_path / "missing.yml")


@pytest.mark.parametrize("value", [True, "80", 80.5])
def test_non_integer_size_is_rejected(value: object) -> None:
    """Refuse booleans, numeric strings and fractions for the square size."""
    with pytest.raises(ConfigValidationError) as excinfo:
        parse_config(_raw_config(size=value))

    assert any(line.startswith("settings.size:") for line in excinfo.value.errors)


def test_non_integer_wide_dimensions_are_rejected() -> None:
    """Refuse coercible strings and booleans in the wide layout."""
    with pytest.raises(ConfigValidationError) as excinfo:
        parse_config(_raw_config(wide={"width": "320", "height": True, "iconSize": "160"}))

    fields = {line.split(":", 1)[0] for line in excinfo.value.errors}
    assert {
        "settings.wide.width",
        "settings.wide.height",
        "settings.wide.iconSize",
    } <= fields

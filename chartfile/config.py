"""
Configuration models and YAML I/O for chartfile.

This module defines the Pydantic models that map 1:1 to chartconfig.yaml,
plus helper functions for loading, saving, and auto-generating the config.

Key models:
- ChartConfig: Top-level config (source + output + sections).
- SourceConfig: Input chart path and optional forced encoding.
- OutputConfig: Output directory and table format.

Key functions:
- load_config(path) -> ChartConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- generate_default_config(...) -> ChartConfig: Build config from a parsed chart.
- validate_sections_against_chart(config, available): Cross-check config vs chart.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from chartfile.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class SourceConfig(BaseModel):
    """Source chart file."""

    input_path: str = Field(..., description="Path to the .chart file")
    encoding: str | None = Field(
        None,
        description="Force a text encoding; sniffed from the file when unset",
    )


class OutputConfig(BaseModel):
    """Output settings."""

    output_dir: str = Field("outputs/", description="Directory for output files")
    output_format: Literal["csv", "parquet"] = Field(
        "parquet", description="Output format"
    )


class ChartConfig(BaseModel):
    """Top-level configuration for chartfile exports.

    Maps 1:1 to chartconfig.yaml.
    """

    source: SourceConfig
    output: OutputConfig = Field(default_factory=OutputConfig)
    sections: list[str] = Field(
        default_factory=list,
        description=(
            "Section names to export (e.g. 'Song', 'ExpertSingle'). "
            "If empty, every section is exported."
        ),
    )

    @model_validator(mode="after")
    def _check_section_names_not_blank(self) -> ChartConfig:
        """Validate that no listed section name is blank."""
        for name in self.sections:
            if not name.strip():
                raise ValueError(
                    "Section names in 'sections' must not be blank."
                )
        return self


def load_config(path: str | Path) -> ChartConfig:
    """Load and validate chartconfig.yaml into a ChartConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return ChartConfig.model_validate(raw)


def save_config(config: ChartConfig, path: str | Path) -> None:
    """Serialize a ChartConfig to YAML with a short header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# chartfile configuration\n")
        f.write("# List section names under 'sections' to export only those.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def generate_default_config(
    input_path: str,
    section_names: list[str],
    output_dir: str = "outputs/",
    encoding: str | None = None,
) -> ChartConfig:
    """Build a ChartConfig from a parsed chart (used on first run).

    Args:
        input_path: Path to the source chart.
        section_names: Section names found in the chart, in file order.
            Repeated names are listed once.
        output_dir: Where output files should be written.
        encoding: Encoding override to record, if any.

    Returns:
        A ChartConfig listing every section.
    """
    return ChartConfig(
        source=SourceConfig(input_path=input_path, encoding=encoding),
        output=OutputConfig(output_dir=output_dir),
        sections=list(dict.fromkeys(section_names)),
    )


def validate_sections_against_chart(
    config: ChartConfig, available_sections: set[str]
) -> None:
    """Check that every section named in config exists in the parsed chart.

    Raises:
        ConfigValidationError: If any referenced section is missing.
    """
    missing = [name for name in config.sections if name not in available_sections]
    if missing:
        raise ConfigValidationError(
            f"The following sections in chartconfig.yaml do not exist in the chart: "
            f"{missing}\n"
            f"Available sections: {sorted(available_sections)}"
        )
    logger.info(
        "Config validation passed: %d section(s) selected",
        len(config.sections),
    )

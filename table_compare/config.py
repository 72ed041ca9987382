"""
Configuration models and YAML I/O for table-compare.

This module defines the Pydantic models that map 1:1 to a
``tablecompare.yaml`` file, plus helpers for loading and saving it.

Key models:
- CompareConfig: Top-level config (table1 + table2 + output).
- TableSource: One input table file and its optional header flag.
- OutputConfig: Where the summary is written (``None`` -> stdout).

Key functions:
- load_config(path) -> CompareConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- describe_config(config) -> str: The "Arguments:" listing shown by the CLI.

Example::

    table1:
      path: data/before.csv
      header: true
    table2:
      path: data/after.txt      # header guessed from the rows
    output:
      path: report.txt
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from table_compare.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class TableSource(BaseModel):
    """One input table."""

    path: str = Field(..., description="Path to the table text file")
    header: bool | None = Field(
        None,
        description=(
            "Whether the first row is a header. None -> guessed with "
            "first_line_is_header()"
        ),
    )
    encoding: str = Field("utf-8-sig", description="Text encoding of the file")

    @model_validator(mode="after")
    def _check_path_not_blank(self) -> TableSource:
        if not self.path.strip():
            raise ValueError("Table path must not be empty")
        return self


class OutputConfig(BaseModel):
    """Output settings."""

    path: str | None = Field(
        None, description="Write the summary to this file instead of stdout"
    )


class CompareConfig(BaseModel):
    """Top-level configuration for table-compare.

    Maps 1:1 to ``tablecompare.yaml``.
    """

    table1: TableSource
    table2: TableSource
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: str | Path) -> CompareConfig:
    """Load and validate a YAML config into a CompareConfig model.

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
    return CompareConfig.model_validate(raw)


def save_config(config: CompareConfig, path: str | Path) -> None:
    """Serialize a CompareConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# table-compare configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def describe_config(config: CompareConfig) -> str:
    """Render the argument summary, one labelled path per line."""
    lines = [
        "Arguments:",
        f"  Table 1: {config.table1.path}",
        f"  Table 2: {config.table2.path}",
        f"  Output: {config.output.path or 'stdout'}",
    ]
    return "\n".join(lines)

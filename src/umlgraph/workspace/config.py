# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the UMLGraph project configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".umlgraph.yaml"


class ProjectConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


@dataclass
class ProjectConfig:
    """The parsed configuration of a UMLGraph project.

    Attributes:
        output_directory: Relative path (from the project root) for exported artifacts.
        models: Relative paths (from the project root) of the model documents to build.
    """

    output_directory: str
    models: list[str] = field(default_factory=list)


def load_project_config(path: Path) -> ProjectConfig:
    """Load and parse a UMLGraph project configuration file.

    Args:
        path: Path to the `.umlgraph.yaml` file.

    Returns:
        A ProjectConfig instance populated from the file.

    Raises:
        ProjectConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ProjectConfigError(f"Project config file not found: {path}") from None
    except OSError as exc:
        raise ProjectConfigError(f"Cannot read project config file: {exc}") from exc

    return _parse_project_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_project_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    """Parse project config YAML text into a ProjectConfig.

    Raises:
        ProjectConfigError: If the YAML is invalid or required fields are missing.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ProjectConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise ProjectConfigError(f"{source_label}: project config must be a YAML mapping")

    output_directory = _require_string(data, "output-directory", source_label)

    if "models" not in data:
        raise ProjectConfigError(f"{source_label}: missing required field 'models'")
    raw_models = data["models"]
    if not isinstance(raw_models, list):
        raise ProjectConfigError(f"{source_label}: 'models' must be a list")

    models: list[str] = []
    for index, entry in enumerate(raw_models):
        if not isinstance(entry, str):
            raise ProjectConfigError(f"{source_label}: models[{index}] must be a string")
        models.append(entry)

    return ProjectConfig(output_directory=output_directory, models=models)


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising ProjectConfigError if missing."""
    if key not in mapping:
        raise ProjectConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise ProjectConfigError(f"{source_label}: '{key}' must be a string")
    return value

# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for UMLGraph."""

from umlgraph.workspace.config import (
    CONFIG_FILE_NAME,
    ProjectConfig,
    ProjectConfigError,
    load_project_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ProjectConfig",
    "ProjectConfigError",
    "load_project_config",
]

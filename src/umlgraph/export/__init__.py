# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON artifact export and import of resolved UML models."""

from umlgraph.export.artifact import (
    ARTIFACT_FORMAT_VERSION,
    ARTIFACT_SUFFIX,
    artifact_path_for,
    deserialize,
    read_artifact,
    serialize,
    write_artifact,
)

__all__ = [
    "ARTIFACT_FORMAT_VERSION",
    "ARTIFACT_SUFFIX",
    "artifact_path_for",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
]

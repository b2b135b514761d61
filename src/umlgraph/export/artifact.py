# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of resolved UML models.

Artifacts are stored as compact JSON files so that out-of-process consumers
(such as a diagram renderer) can load the model without parsing the source
document again. Relationships are stored by identifier and re-resolved on load.
The format is versioned so future schema changes can be detected.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from umlgraph.model.entities import Component, Interface, Operation, UMLModel
from umlgraph.parser.elements import InterfaceRealizationRecord, UsageRecord
from umlgraph.parser.resolver import ParsedDocument, resolve

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".uml.json"


class OperationArtifact(BaseModel):
    id: str
    name: str


class InterfaceArtifact(BaseModel):
    id: str
    name: str
    operations: list[OperationArtifact] = Field(default_factory=list)


class ComponentArtifact(BaseModel):
    id: str
    name: str
    realizes: list[str] = Field(default_factory=list)
    uses: list[str] = Field(default_factory=list)


class ModelArtifact(BaseModel):
    """On-disk schema of a serialized UMLModel."""

    v: str
    interfaces: list[InterfaceArtifact] = Field(default_factory=list)
    components: list[ComponentArtifact] = Field(default_factory=list)


def serialize(model: UMLModel) -> str:
    """Serialize a UMLModel to a compact JSON string."""
    artifact = ModelArtifact(
        v=ARTIFACT_FORMAT_VERSION,
        interfaces=[_interface_to_artifact(i) for i in model.interfaces],
        components=[_component_to_artifact(c) for c in model.components],
    )
    return artifact.model_dump_json()


def deserialize(data: str) -> UMLModel:
    """Deserialize a UMLModel from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`UMLModel` with all relationships linked.

    Raises:
        ValueError: If the artifact format version is not recognised.
        pydantic.ValidationError: If the JSON does not match the schema.
        UnresolvedReferenceError: If a relationship names an unknown identifier.
    """
    artifact = ModelArtifact.model_validate_json(data)
    if artifact.v != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {artifact.v!r}")
    return resolve(_artifact_to_document(artifact))


def write_artifact(model: UMLModel, path: Path) -> None:
    """Write a model artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(model), encoding="utf-8")


def read_artifact(path: Path) -> UMLModel:
    """Read and deserialize a model artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


def artifact_path_for(source: Path) -> Path:
    """Return the default artifact path next to a source document."""
    return source.with_name(source.stem + ARTIFACT_SUFFIX)


# ################
# Implementation
# ################


def _interface_to_artifact(iface: Interface) -> InterfaceArtifact:
    return InterfaceArtifact(
        id=iface.identifier,
        name=iface.name,
        operations=[OperationArtifact(id=op.identifier, name=op.name) for op in iface.operations],
    )


def _component_to_artifact(comp: Component) -> ComponentArtifact:
    return ComponentArtifact(
        id=comp.identifier,
        name=comp.name,
        realizes=sorted(i.identifier for i in comp.realized_interfaces),
        uses=sorted(i.identifier for i in comp.used_interfaces),
    )


def _artifact_to_document(artifact: ModelArtifact) -> ParsedDocument:
    """Rebuild the provisional entities and relationship records of an artifact."""
    document = ParsedDocument()
    for iface in artifact.interfaces:
        if iface.id in document.interfaces:
            logger.warning("Artifact declares interface %s more than once; keeping the last one", iface.id)
        operations = tuple(Operation(identifier=op.id, name=op.name) for op in iface.operations)
        document.interfaces[iface.id] = Interface(iface.id, iface.name, operations)
    for comp in artifact.components:
        if comp.id in document.components:
            logger.warning("Artifact declares component %s more than once; keeping the last one", comp.id)
        document.components[comp.id] = Component(comp.id, comp.name)
        for target in comp.realizes:
            document.realizations.append(
                InterfaceRealizationRecord(identifier=f"{comp.id}->{target}", child_id=comp.id, parent_id=target)
            )
        for target in comp.uses:
            document.usages.append(UsageRecord(identifier=f"{comp.id}->{target}", source_id=comp.id, target_id=target))
    return document

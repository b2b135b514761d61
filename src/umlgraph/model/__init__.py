# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structural model: interfaces, components and their relationships."""

from umlgraph.model.entities import Component, ElementKind, Interface, Operation, UMLModel

__all__ = [
    "ElementKind",
    "Operation",
    "Interface",
    "Component",
    "UMLModel",
]

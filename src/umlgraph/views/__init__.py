# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Read-only views derived from resolved UML models."""

from umlgraph.views.dependencies import (
    DependencyEdge,
    DependencyView,
    ViewNode,
    build_dependency_view,
    interface_label,
)

__all__ = [
    "DependencyEdge",
    "DependencyView",
    "ViewNode",
    "build_dependency_view",
    "interface_label",
]

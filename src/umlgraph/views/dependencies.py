# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Component dependency view derived from a resolved UML model.

Builds the read-only node and edge data a diagram renderer draws:

- One node per component and per interface (interfaces labelled ``I:<name>``).
- One edge from component A to component B for every interface A uses that
  B realizes, labelled with that interface.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from umlgraph.model.entities import Interface, UMLModel

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ViewNode:
    """A box in the dependency view.

    Attributes:
        identifier: ``xmi:id`` of the underlying entity.
        label: Display text.
        kind: ``"component"`` or ``"interface"``.
    """

    identifier: str
    label: str
    kind: str  # "component" | "interface"


@dataclass(frozen=True)
class DependencyEdge:
    """A directed dependency between two components through an interface.

    Attributes:
        source: ``xmi:id`` of the using component.
        target: ``xmi:id`` of the realizing component.
        label: Label of the interface the dependency goes through.
    """

    source: str
    target: str
    label: str


@dataclass
class DependencyView:
    """Nodes and edges of a component dependency diagram."""

    nodes: list[ViewNode] = field(default_factory=list)
    edges: list[DependencyEdge] = field(default_factory=list)


def build_dependency_view(model: UMLModel) -> DependencyView:
    """Build a :class:`DependencyView` from *model*.

    Edges are ordered by the model order of the using component, then of the
    interface, then of the realizing component, and never repeated. A
    component that uses an interface it realizes itself gets a self edge.

    Args:
        model: The resolved model to visualize.

    Returns:
        A :class:`DependencyView` describing the diagram.
    """
    nodes = [ViewNode(c.identifier, c.name, "component") for c in model.components] + [
        ViewNode(i.identifier, interface_label(i), "interface") for i in model.interfaces
    ]

    edges: list[DependencyEdge] = []
    seen: set[DependencyEdge] = set()
    for component in model.components:
        used = component.used_interfaces
        for interface in model.interfaces:
            if interface not in used:
                continue
            for provider in model.components:
                if provider not in interface.realized_by:
                    continue
                edge = DependencyEdge(component.identifier, provider.identifier, interface_label(interface))
                if edge not in seen:
                    seen.add(edge)
                    edges.append(edge)

    return DependencyView(nodes=nodes, edges=edges)


def interface_label(interface: Interface) -> str:
    """Return the display label for an interface."""
    return f"I:{interface.name}"

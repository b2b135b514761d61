# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution pass turning buffered cross-references into object relationships.

Realizations are resolved first, then usages, each in document order. The
first record naming an unknown identifier aborts the whole parse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from umlgraph.model.entities import Component, Interface, UMLModel
from umlgraph.parser.elements import InterfaceRealizationRecord, UsageRecord
from umlgraph.parser.errors import UnresolvedReferenceError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass
class ParsedDocument:
    """Provisional result of the structural pass.

    Attributes:
        interfaces: Interfaces keyed by ``xmi:id``, in declaration order.
        components: Components keyed by ``xmi:id``, in declaration order.
        realizations: Interface-realization records in document order.
        usages: Usage records in document order.
    """

    interfaces: dict[str, Interface] = field(default_factory=dict)
    components: dict[str, Component] = field(default_factory=dict)
    realizations: list[InterfaceRealizationRecord] = field(default_factory=list)
    usages: list[UsageRecord] = field(default_factory=list)


def resolve(document: ParsedDocument) -> UMLModel:
    """Resolve all relationship records of *document* into a UMLModel.

    Args:
        document: The provisional entities and records from the structural pass.

    Returns:
        The finished model. Relationship records do not survive into it.

    Raises:
        UnresolvedReferenceError: If a realization or usage names an
            identifier absent from the component or interface map.
    """
    for realization in document.realizations:
        child = document.components.get(realization.child_id)
        parent = document.interfaces.get(realization.parent_id)
        if child is None or parent is None:
            raise UnresolvedReferenceError(
                "interface realization",
                realization.child_id,
                realization.parent_id,
            )
        _link_realization(child, parent)

    for usage in document.usages:
        source = document.components.get(usage.source_id)
        target = document.interfaces.get(usage.target_id)
        if source is None or target is None:
            raise UnresolvedReferenceError("usage", usage.source_id, usage.target_id)
        _link_usage(source, target)

    logger.debug(
        "Resolved %d realizations and %d usages",
        len(document.realizations),
        len(document.usages),
    )
    return UMLModel(
        components=tuple(document.components.values()),
        interfaces=tuple(document.interfaces.values()),
    )


# ################
# Implementation
# ################


def _link_realization(component: Component, interface: Interface) -> None:
    # Entities are frozen; only their private relationship sets are filled here.
    component._realized.add(interface)
    interface._realized_by.add(component)


def _link_usage(component: Component, interface: Interface) -> None:
    component._used.add(interface)

# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Core structural entities: interfaces, components and the resolved model."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

# ###############
# Public Interface
# ###############


class ElementKind(enum.Enum):
    """The entity kinds a top-level ``packagedElement`` can declare."""

    INTERFACE = "uml:Interface"
    COMPONENT = "uml:Component"


class Operation(BaseModel):
    """A named behavior declared inside an interface."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    name: str


@dataclass(frozen=True, eq=False)
class Interface:
    """A named contract comprising an ordered sequence of operations.

    Interfaces are compared by identity. The set of realizing components is
    filled in once by the resolution pass and is read-only afterwards.
    """

    identifier: str
    name: str
    operations: tuple[Operation, ...] = ()
    _realized_by: set[Component] = field(default_factory=set, init=False, repr=False)

    @property
    def realized_by(self) -> frozenset[Component]:
        """Components that realize this interface."""
        return frozenset(self._realized_by)


@dataclass(frozen=True, eq=False)
class Component:
    """An implementing unit that realizes and uses interfaces.

    Components are compared by identity.
    """

    identifier: str
    name: str
    _realized: set[Interface] = field(default_factory=set, init=False, repr=False)
    _used: set[Interface] = field(default_factory=set, init=False, repr=False)

    @property
    def realized_interfaces(self) -> frozenset[Interface]:
        """Interfaces this component realizes ("extends")."""
        return frozenset(self._realized)

    @property
    def used_interfaces(self) -> frozenset[Interface]:
        """Interfaces this component depends on."""
        return frozenset(self._used)


@dataclass(frozen=True)
class UMLModel:
    """The resolved graph of components and interfaces, in document order."""

    components: tuple[Component, ...] = ()
    interfaces: tuple[Interface, ...] = ()

    def get_component(self, identifier: str) -> Component | None:
        """Return the component with *identifier*, or ``None``."""
        return next((c for c in self.components if c.identifier == identifier), None)

    def get_interface(self, identifier: str) -> Interface | None:
        """Return the interface with *identifier*, or ``None``."""
        return next((i for i in self.interfaces if i.identifier == identifier), None)

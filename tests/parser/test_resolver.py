# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the relationship resolution pass."""

import pytest

from umlgraph.model.entities import Component, Interface
from umlgraph.parser.elements import InterfaceRealizationRecord, UsageRecord
from umlgraph.parser.errors import UnresolvedReferenceError
from umlgraph.parser.resolver import ParsedDocument, resolve

# ###############
# Test Helpers
# ###############


def _document() -> ParsedDocument:
    """A document with one interface I1 and two components C1, C2."""
    document = ParsedDocument()
    document.interfaces["I1"] = Interface("I1", "Greeter")
    document.components["C1"] = Component("C1", "GreeterImpl")
    document.components["C2"] = Component("C2", "Client")
    return document


def _realization(child: str, parent: str, identifier: str = "R") -> InterfaceRealizationRecord:
    return InterfaceRealizationRecord(identifier=identifier, child_id=child, parent_id=parent)


def _usage(source: str, target: str, identifier: str = "U") -> UsageRecord:
    return UsageRecord(identifier=identifier, source_id=source, target_id=target)


# ###############
# Successful Resolution
# ###############


class TestResolve:
    def test_empty_document(self) -> None:
        model = resolve(ParsedDocument())
        assert model.components == ()
        assert model.interfaces == ()

    def test_realization_is_bidirectional(self) -> None:
        document = _document()
        document.realizations.append(_realization("C1", "I1"))
        model = resolve(document)
        impl = model.get_component("C1")
        greeter = model.get_interface("I1")
        assert impl is not None and greeter is not None
        assert impl.realized_interfaces == frozenset({greeter})
        assert greeter.realized_by == frozenset({impl})

    def test_usage_is_recorded_on_component_only(self) -> None:
        document = _document()
        document.usages.append(_usage("C2", "I1"))
        model = resolve(document)
        client = model.get_component("C2")
        greeter = model.get_interface("I1")
        assert client is not None and greeter is not None
        assert client.used_interfaces == frozenset({greeter})
        assert greeter.realized_by == frozenset()

    def test_repeated_pairs_link_once(self) -> None:
        document = _document()
        document.realizations.append(_realization("C1", "I1", "R1"))
        document.realizations.append(_realization("C1", "I1", "R2"))
        document.usages.append(_usage("C2", "I1", "U1"))
        document.usages.append(_usage("C2", "I1", "U2"))
        model = resolve(document)
        greeter = model.get_interface("I1")
        client = model.get_component("C2")
        assert greeter is not None and client is not None
        assert len(greeter.realized_by) == 1
        assert len(client.used_interfaces) == 1

    def test_model_order_follows_maps(self) -> None:
        model = resolve(_document())
        assert [c.identifier for c in model.components] == ["C1", "C2"]


# ###############
# Unresolved References
# ###############


class TestUnresolved:
    def test_unknown_component_in_realization(self) -> None:
        document = _document()
        document.realizations.append(_realization("C9", "I1"))
        with pytest.raises(UnresolvedReferenceError, match="interface realization: C9 -> I1") as exc_info:
            resolve(document)
        assert exc_info.value.kind == "interface realization"

    def test_realization_to_component_instead_of_interface(self) -> None:
        document = _document()
        document.realizations.append(_realization("C1", "C2"))
        with pytest.raises(UnresolvedReferenceError):
            resolve(document)

    def test_unknown_interface_in_usage(self) -> None:
        document = _document()
        document.usages.append(_usage("C1", "I9"))
        with pytest.raises(UnresolvedReferenceError, match="source or target for usage") as exc_info:
            resolve(document)
        assert exc_info.value.kind == "usage"
        assert (exc_info.value.source_id, exc_info.value.target_id) == ("C1", "I9")

    def test_realizations_resolved_before_usages(self) -> None:
        document = _document()
        document.usages.append(_usage("C1", "I9"))
        document.realizations.append(_realization("C8", "I1"))
        with pytest.raises(UnresolvedReferenceError) as exc_info:
            resolve(document)
        assert exc_info.value.kind == "interface realization"

    def test_first_bad_record_aborts(self) -> None:
        document = _document()
        document.realizations.append(_realization("C7", "I1", "R1"))
        document.realizations.append(_realization("C8", "I1", "R2"))
        with pytest.raises(UnresolvedReferenceError) as exc_info:
            resolve(document)
        assert exc_info.value.source_id == "C7"

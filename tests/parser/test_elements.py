# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for attribute collection and the leaf-element parsers."""

import pytest

from umlgraph.model.entities import Operation
from umlgraph.parser.elements import (
    Cursor,
    InterfaceRealizationRecord,
    UsageRecord,
    collect_attributes,
    parse_interface_realization,
    parse_owned_operation,
    parse_usage,
)
from umlgraph.parser.errors import MalformedElementError, UnexpectedTokenError
from umlgraph.parser.lexer import TokenType, tokenize

# ###############
# Test Helpers
# ###############


def _cursor(text: str) -> Cursor:
    """Build a cursor over the tokens of *text*."""
    return Cursor(tuple(tokenize(text)))


# ###############
# Cursor
# ###############


class TestCursor:
    def test_advance_returns_new_cursor(self) -> None:
        cursor = _cursor('<a x="1"')
        moved = cursor.advance()
        assert cursor.index == 0
        assert moved.index == 1
        assert moved.current.type == TokenType.ATTRIBUTE

    def test_current_past_end_raises(self) -> None:
        cursor = _cursor("<a").advance()
        assert cursor.at_end
        with pytest.raises(UnexpectedTokenError, match="end of document"):
            _ = cursor.current


# ###############
# Attribute Collector
# ###############


class TestCollectAttributes:
    def test_collects_until_open_token(self) -> None:
        cursor, attributes = collect_attributes(_cursor('xmi:id="A" name="B" <next'))
        assert attributes == {"xmi:id": "A", "name": "B"}
        assert cursor.index == 2
        assert cursor.current.value == "<next"

    def test_stops_at_close_token_without_consuming_it(self) -> None:
        cursor, attributes = collect_attributes(_cursor('name="B"> </packagedElement>'))
        assert attributes == {"name": "B"}
        assert cursor.current.type == TokenType.CLOSE

    def test_stops_at_end_of_stream(self) -> None:
        cursor, attributes = collect_attributes(_cursor('name="B"'))
        assert attributes == {"name": "B"}
        assert cursor.at_end

    def test_no_attributes(self) -> None:
        cursor, attributes = collect_attributes(_cursor("<next"))
        assert attributes == {}
        assert cursor.index == 0

    def test_splits_on_first_equals_only(self) -> None:
        _, attributes = collect_attributes(_cursor('body="a=b"'))
        assert attributes == {"body": "a=b"}

    def test_unquoted_value_kept_verbatim(self) -> None:
        _, attributes = collect_attributes(_cursor("visibility=public"))
        assert attributes == {"visibility": "public"}

    def test_duplicate_key_last_wins(self) -> None:
        _, attributes = collect_attributes(_cursor('name="A" name="B"'))
        assert attributes == {"name": "B"}


# ###############
# Operation Parser
# ###############


class TestParseOwnedOperation:
    def test_valid_operation(self) -> None:
        cursor, operation = parse_owned_operation(_cursor('xmi:id="O1" name="greet"/> </packagedElement>'))
        assert operation == Operation(identifier="O1", name="greet")
        assert cursor.index == 2

    def test_three_attributes_rejected(self) -> None:
        with pytest.raises(MalformedElementError, match="at most 2 attributes, got 3") as exc_info:
            parse_owned_operation(_cursor('xmi:id="O1" name="greet" visibility="public"'))
        assert exc_info.value.element == "ownedOperation"
        assert exc_info.value.keys == ["xmi:id", "name", "visibility"]

    def test_missing_name_rejected(self) -> None:
        with pytest.raises(MalformedElementError, match="name"):
            parse_owned_operation(_cursor('xmi:id="O1" visibility="public"'))


# ###############
# Interface-Realization Parser
# ###############


class TestParseInterfaceRealization:
    def test_valid_realization(self) -> None:
        _, record = parse_interface_realization(
            _cursor('xmi:id="R1" client="C1" supplier="I1" contract="I1"/>')
        )
        assert record == InterfaceRealizationRecord(identifier="R1", child_id="C1", parent_id="I1")

    def test_missing_contract_rejected(self) -> None:
        with pytest.raises(MalformedElementError, match="contract"):
            parse_interface_realization(_cursor('xmi:id="R1" client="C1" supplier="I1"'))

    def test_five_attributes_rejected(self) -> None:
        with pytest.raises(MalformedElementError, match="at most 4 attributes, got 5"):
            parse_interface_realization(
                _cursor('xmi:id="R1" client="C1" supplier="I1" contract="I1" name="r"')
            )

    def test_returns_cursor_after_attribute_run(self) -> None:
        cursor, _ = parse_interface_realization(
            _cursor('xmi:id="R1" client="C1" supplier="I1" contract="I1"/> </packagedElement>')
        )
        assert cursor.index == 4
        assert cursor.current.type == TokenType.CLOSE


# ###############
# Usage Parser
# ###############


class TestParseUsage:
    def test_valid_usage(self) -> None:
        _, record = parse_usage(_cursor('xmi:type="uml:Usage" xmi:id="U1" client="C1" supplier="I1"/>'))
        assert record == UsageRecord(identifier="U1", source_id="C1", target_id="I1")

    def test_missing_supplier_rejected(self) -> None:
        with pytest.raises(MalformedElementError) as exc_info:
            parse_usage(_cursor('xmi:id="U1" client="C1"'))
        assert exc_info.value.element == "usage"
        assert "supplier" in str(exc_info.value)

    def test_five_attributes_rejected(self) -> None:
        with pytest.raises(MalformedElementError, match="at most 4"):
            parse_usage(_cursor('xmi:type="uml:Usage" xmi:id="U1" client="C1" supplier="I1" name="u"'))

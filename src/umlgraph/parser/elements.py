# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Attribute collection and leaf-element parsers.

Each parser receives a cursor positioned just after the element's opening tag
and returns the advanced cursor together with its result. The cursor is
immutable, so no parser shares position state with another.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from umlgraph.model.entities import Operation
from umlgraph.parser.errors import MalformedElementError, UnexpectedTokenError
from umlgraph.parser.lexer import Token, TokenType

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Cursor:
    """An immutable position in a token sequence."""

    tokens: tuple[Token, ...]
    index: int = 0

    @property
    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    @property
    def current(self) -> Token:
        """Return the token under the cursor.

        Raises:
            UnexpectedTokenError: If the cursor is past the last token.
        """
        if self.at_end:
            raise UnexpectedTokenError("Unexpected token", None, self.index)
        return self.tokens[self.index]

    def advance(self) -> Cursor:
        """Return a cursor one token further along."""
        return Cursor(self.tokens, self.index + 1)


class InterfaceRealizationRecord(BaseModel):
    """Raw realization edge: component *child* realizes interface *parent*."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    child_id: str
    parent_id: str


class UsageRecord(BaseModel):
    """Raw usage edge: component *source* depends on interface *target*."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    source_id: str
    target_id: str


def collect_attributes(cursor: Cursor) -> tuple[Cursor, dict[str, str]]:
    """Consume a run of attribute tokens into a key/value mapping.

    Stops at the first open or close token (left unconsumed) or at the end of
    the stream. Keys and values are split on the first ``=``; a value wrapped
    in double quotes is unquoted.

    Args:
        cursor: Position of the first candidate attribute token.

    Returns:
        The cursor at the boundary token and the collected attributes.
    """
    attributes: dict[str, str] = {}
    while not cursor.at_end and cursor.current.type == TokenType.ATTRIBUTE:
        key, _, value = cursor.current.value.partition("=")
        attributes[key] = _unquote(value.removesuffix(">"))
        cursor = cursor.advance()
    return cursor, attributes


def parse_owned_operation(cursor: Cursor) -> tuple[Cursor, Operation]:
    """Parse the attributes of an ``ownedOperation`` element.

    Raises:
        MalformedElementError: On more than two attributes or a missing
            ``xmi:id`` / ``name``.
    """
    cursor, attributes = collect_attributes(cursor)
    _check_attributes("ownedOperation", attributes, 2, ("xmi:id", "name"))
    return cursor, Operation(identifier=attributes["xmi:id"], name=attributes["name"])


def parse_interface_realization(cursor: Cursor) -> tuple[Cursor, InterfaceRealizationRecord]:
    """Parse the attributes of an ``interfaceRealization`` element.

    ``client`` names the realizing component and ``supplier`` the realized
    interface; ``contract`` must be present but is not kept.

    Raises:
        MalformedElementError: On more than four attributes or a missing
            ``xmi:id``, ``client``, ``supplier`` or ``contract``.
    """
    cursor, attributes = collect_attributes(cursor)
    _check_attributes(
        "interfaceRealization",
        attributes,
        4,
        ("xmi:id", "client", "supplier", "contract"),
    )
    record = InterfaceRealizationRecord(
        identifier=attributes["xmi:id"],
        child_id=attributes["client"],
        parent_id=attributes["supplier"],
    )
    return cursor, record


def parse_usage(cursor: Cursor) -> tuple[Cursor, UsageRecord]:
    """Parse the attributes of a nested ``packagedElement`` usage edge.

    Raises:
        MalformedElementError: On more than four attributes or a missing
            ``xmi:id``, ``client`` or ``supplier``.
    """
    cursor, attributes = collect_attributes(cursor)
    _check_attributes("usage", attributes, 4, ("xmi:id", "client", "supplier"))
    record = UsageRecord(
        identifier=attributes["xmi:id"],
        source_id=attributes["client"],
        target_id=attributes["supplier"],
    )
    return cursor, record


# ################
# Implementation
# ################


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def _check_attributes(
    element: str,
    attributes: dict[str, str],
    max_count: int,
    required: tuple[str, ...],
) -> None:
    """Enforce the attribute-count bound and required keys of an element."""
    keys = list(attributes)
    if len(attributes) > max_count:
        raise MalformedElementError(
            element,
            f"expected at most {max_count} attributes, got {len(attributes)} ({', '.join(keys)})",
            keys,
        )
    # Empty values count as missing.
    missing = [key for key in required if not attributes.get(key)]
    if missing:
        raise MalformedElementError(
            element,
            f"missing required attribute(s) {', '.join(missing)} (got {', '.join(keys) or 'none'})",
            keys,
        )

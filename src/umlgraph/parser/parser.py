# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Two-pass structural parser for UML model-interchange documents.

The first pass walks the token stream, builds provisional interfaces and
components keyed by their ``xmi:id`` and buffers every realization and usage
record. The second pass (:mod:`umlgraph.parser.resolver`) turns those records
into direct object relationships.
"""

from __future__ import annotations

import logging

from umlgraph.model.entities import Component, ElementKind, Interface, Operation, UMLModel
from umlgraph.parser.elements import (
    Cursor,
    collect_attributes,
    parse_interface_realization,
    parse_owned_operation,
    parse_usage,
)
from umlgraph.parser.errors import MalformedElementError, UnexpectedTokenError, UnknownTypeError
from umlgraph.parser.lexer import Token, TokenType, extract_content, tokenize
from umlgraph.parser.resolver import ParsedDocument, resolve

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse_uml(source: str) -> UMLModel:
    """Parse a model-interchange document into a resolved UMLModel.

    Args:
        source: The full text of the document.

    Returns:
        The resolved model.

    Raises:
        UMLParseError: If the document is malformed or a relationship cannot
            be resolved. No partial model is ever returned.
    """
    return resolve(parse_document(source))


def parse_document(source: str) -> ParsedDocument:
    """Run the structural pass only, without resolving relationships.

    Raises:
        MalformedElementError: If an element violates its attribute contract.
        UnexpectedTokenError: If the token stream does not match the grammar.
        UnknownTypeError: If a top-level element has an unsupported ``xmi:type``.
    """
    tokens = tokenize(extract_content(source))
    logger.debug("Tokenized document into %d tokens", len(tokens))
    document = ParsedDocument()
    cursor = Cursor(tuple(tokens))
    while not cursor.at_end:
        token = cursor.current
        if not _opens(token, _PACKAGED_ELEMENT):
            raise UnexpectedTokenError("Unexpected top-level token", token, cursor.index)
        cursor = _parse_packaged_element(cursor.advance(), document)
    logger.debug(
        "Parsed %d interfaces, %d components, %d realizations, %d usages",
        len(document.interfaces),
        len(document.components),
        len(document.realizations),
        len(document.usages),
    )
    return document


# ################
# Implementation
# ################

_PACKAGED_ELEMENT = "<packagedElement"
_OWNED_OPERATION = "<ownedOperation"
_INTERFACE_REALIZATION = "<interfaceRealization"
_PACKAGED_ELEMENT_CLOSE = "</packagedElement"


def _opens(token: Token, prefix: str) -> bool:
    return token.type == TokenType.OPEN and token.value.startswith(prefix)


def _parse_packaged_element(cursor: Cursor, document: ParsedDocument) -> Cursor:
    """Parse one top-level element, starting just after its opening tag.

    Returns the cursor positioned after the element's closing tag.
    """
    cursor, attributes = collect_attributes(cursor)
    operations: list[Operation] = []
    while True:
        token = cursor.current
        if token.type == TokenType.CLOSE:
            if not token.value.startswith(_PACKAGED_ELEMENT_CLOSE):
                raise UnexpectedTokenError("Unexpected token", token, cursor.index)
            cursor = cursor.advance()
            break
        if _opens(token, _OWNED_OPERATION):
            cursor, operation = parse_owned_operation(cursor.advance())
            operations.append(operation)
        elif _opens(token, _INTERFACE_REALIZATION):
            cursor, realization = parse_interface_realization(cursor.advance())
            document.realizations.append(realization)
        elif _opens(token, _PACKAGED_ELEMENT):
            cursor, usage = parse_usage(cursor.advance())
            document.usages.append(usage)
        else:
            raise UnexpectedTokenError("Unexpected token", token, cursor.index)

    identifier = attributes.get("xmi:id")
    name = attributes.get("name")
    if not identifier or not name:
        # Elements without an identity are skipped, not rejected.
        logger.debug("Skipping packagedElement without xmi:id or name: %s", attributes)
        return cursor

    kind = _element_kind(attributes.get("xmi:type"))
    if kind is ElementKind.INTERFACE:
        _check_unique_operations(identifier, operations)
        if identifier in document.interfaces:
            logger.warning("Interface %s declared more than once; keeping the last one", identifier)
        document.interfaces[identifier] = Interface(identifier, name, tuple(operations))
    else:
        if operations:
            logger.debug("Ignoring %d operations on component %s", len(operations), identifier)
        if identifier in document.components:
            logger.warning("Component %s declared more than once; keeping the last one", identifier)
        document.components[identifier] = Component(identifier, name)
    return cursor


def _element_kind(type_value: str | None) -> ElementKind:
    try:
        return ElementKind(type_value)
    except ValueError:
        raise UnknownTypeError(type_value) from None


def _check_unique_operations(interface_id: str, operations: list[Operation]) -> None:
    seen: set[str] = set()
    for operation in operations:
        if operation.identifier in seen:
            raise MalformedElementError(
                "ownedOperation",
                f"duplicate operation id {operation.identifier!r} in interface {interface_id!r}",
            )
        seen.add(operation.identifier)

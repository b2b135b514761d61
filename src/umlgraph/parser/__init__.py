# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer, structural parser and resolver for UML interchange documents."""

from umlgraph.parser.errors import (
    MalformedElementError,
    UMLParseError,
    UnexpectedTokenError,
    UnknownTypeError,
    UnresolvedReferenceError,
)
from umlgraph.parser.parser import parse_document, parse_uml
from umlgraph.parser.resolver import ParsedDocument, resolve

__all__ = [
    "parse_uml",
    "parse_document",
    "resolve",
    "ParsedDocument",
    "UMLParseError",
    "MalformedElementError",
    "UnexpectedTokenError",
    "UnknownTypeError",
    "UnresolvedReferenceError",
]

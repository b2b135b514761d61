# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy for UML document parsing.

Every failure aborts the parse; there is no partial model.
"""

from umlgraph.parser.lexer import Token

# ###############
# Public Interface
# ###############


class UMLParseError(Exception):
    """Base class for all errors raised while turning a document into a model."""


class MalformedElementError(UMLParseError):
    """Raised when an element has too many attributes or lacks a required one.

    Attributes:
        element: The element kind, e.g. ``"ownedOperation"``.
        keys: The attribute keys observed on the element.
    """

    def __init__(self, element: str, message: str, keys: list[str] | None = None) -> None:
        super().__init__(f"Malformed {element}: {message}")
        self.element = element
        self.keys = keys or []


class UnexpectedTokenError(UMLParseError):
    """Raised when the token stream does not match the expected grammar.

    Attributes:
        token: The offending token, or ``None`` at the end of the document.
        index: Position of the token in the token stream.
    """

    def __init__(self, context: str, token: Token | None, index: int) -> None:
        if token is None:
            message = f"Unexpected end of document at index {index}"
        else:
            message = f"{context}: {token.type.value} ({token.value}) at index {index}"
        super().__init__(message)
        self.token = token
        self.index = index


class UnknownTypeError(UMLParseError):
    """Raised when a top-level element's ``xmi:type`` is not a supported kind.

    Attributes:
        type_value: The offending ``xmi:type`` value (``None`` if absent).
    """

    def __init__(self, type_value: str | None) -> None:
        super().__init__(f"Unexpected type: {type_value!r}")
        self.type_value = type_value


class UnresolvedReferenceError(UMLParseError):
    """Raised when a relationship names an identifier that was never declared.

    Attributes:
        kind: ``"interface realization"`` or ``"usage"``.
        source_id: Identifier of the component end.
        target_id: Identifier of the interface end.
    """

    def __init__(self, kind: str, source_id: str, target_id: str) -> None:
        if kind == "usage":
            message = f"Could not find source or target for usage: {source_id} -> {target_id}"
        else:
            message = f"Could not find interface for {kind}: {source_id} -> {target_id}"
        super().__init__(message)
        self.kind = kind
        self.source_id = source_id
        self.target_id = target_id

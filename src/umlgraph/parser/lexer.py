# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for UML model-interchange documents.

Splits raw document text into a flat sequence of element-open, element-close
and attribute tokens. No nesting or validity checks happen here; malformed
input simply yields a token sequence that the parser rejects.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the lexer."""

    OPEN = "OPEN"
    CLOSE = "CLOSE"
    ATTRIBUTE = "ATTRIBUTE"


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        type: The kind of token.
        value: The literal text of the token. Attribute tokens have any
            trailing ``>`` or ``/>`` removed.
    """

    type: TokenType
    value: str


def extract_content(source: str) -> str:
    """Cut the element content out of a full interchange document.

    Content starts at the first ``<p`` (skipping the XML declaration and the
    root tag) and ends before the last ``</`` (dropping the root's closing
    tag). Newlines are collapsed to spaces.

    Args:
        source: The full text of the document.

    Returns:
        The trimmed content, or an empty string if the document holds no
        ``<p`` tag at all.
    """
    start = source.find("<p")
    if start == -1:
        return ""
    end = source.rfind("</")
    if end < start:
        end = len(source)
    return source[start:end].replace("\n", " ")


def tokenize(text: str) -> list[Token]:
    """Tokenize trimmed document content into a flat token list.

    Fragments that are neither tags nor ``key=value`` pairs (for example a
    stray ``>``) are dropped.

    Args:
        text: Document content, usually the result of :func:`extract_content`.

    Returns:
        A list of Token objects in document order.
    """
    tokens: list[Token] = []
    for fragment in text.split():
        if fragment.startswith("</"):
            tokens.append(Token(TokenType.CLOSE, fragment))
        elif fragment.startswith("<"):
            tokens.append(Token(TokenType.OPEN, fragment))
        elif fragment.find("=") > 0:
            tokens.append(Token(TokenType.ATTRIBUTE, _strip_tag_end(fragment)))
    return tokens


# ################
# Implementation
# ################


def _strip_tag_end(fragment: str) -> str:
    """Remove a trailing ``/>`` or ``>`` from an attribute fragment."""
    if fragment.endswith("/>"):
        return fragment[:-2]
    if fragment.endswith(">"):
        return fragment[:-1]
    return fragment

"""
CCL Surface Parser
==================

This module implements a recursive descent parser for the parenthesized
surface syntax. It turns source text directly into a raw syntax tree;
there is no separate tokenizer because atoms are delimited by whitespace
and parentheses alone.

Grammar
-------
    program   ::= node+
    node      ::= INT | TYPED_ID | ID | '(' node* ')'
    TYPED_ID  ::= ID ':' TYPE_TEXT        (exactly one colon)

Atom Classification
-------------------
An atom runs until whitespace, ')' or end of input and is classified as:

| Atom text      | Node                          |
|----------------|-------------------------------|
| 42, -3, +7     | IntLiteral                    |
| x:int          | TypedIdentifier("x", "int")   |
| anything else  | Identifier                    |

Example Usage
-------------
>>> from ccl.reader import parse
>>> parse("(+ x 1)")
RawList(children=(Identifier(name='+'), Identifier(name='x'), IntLiteral(value=1)))
"""

import logging
import re

from ccl.errors import EmptySourceError, IntegerLiteralError, MismatchedParensError
from ccl.syntax import Identifier, IntLiteral, RawList, RawNode, TypedIdentifier

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class SurfaceParser:
    """
    Recursive descent parser over one source string.

    The cursor position and the count of open lists belong to a single
    parser instance; create a new parser for every input.

    Usage:
        parser = SurfaceParser("(defn f:int () 0)")
        forms = parser.parse_program()
    """

    def __init__(self, source: str):
        self._source = source
        self._position = 0
        self._open = 0

    # =========================================================================
    # Public API
    # =========================================================================

    def parse_program(self) -> list[RawNode]:
        """
        Parse every top-level form in the source.

        Returns:
            The top-level raw nodes in source order

        Raises:
            EmptySourceError: If the source holds only whitespace
            MismatchedParensError: If parentheses do not balance
        """
        forms: list[RawNode] = []
        while True:
            self._skip_whitespace()
            if self._at_end():
                break
            if self._current() == ")":
                raise MismatchedParensError(self._position, self._open)
            forms.append(self._parse_node())

        if not forms:
            raise EmptySourceError()
        logger.debug(f"Parsed {len(forms)} top-level form(s) from {len(self._source)} chars")
        return forms

    # =========================================================================
    # Grammar Rules
    # =========================================================================

    def _parse_node(self) -> RawNode:
        self._skip_whitespace()
        if self._current() == "(":
            self._open += 1
            self._position += 1
            return self._parse_list()
        return self._parse_atom()

    def _parse_list(self) -> RawList:
        """Parse list children up to and including the closing ')'."""
        children: list[RawNode] = []
        while True:
            self._skip_whitespace()
            if self._at_end():
                raise MismatchedParensError(self._position, self._open)
            if self._current() == ")":
                break
            children.append(self._parse_node())

        self._open -= 1
        self._position += 1
        return RawList(tuple(children))

    def _parse_atom(self) -> RawNode:
        start = self._position
        while not self._at_end():
            char = self._current()
            if char.isspace() or char == ")":
                break
            self._position += 1
        text = self._source[start:self._position]

        if INTEGER_PATTERN.fullmatch(text):
            try:
                return IntLiteral(int(text))
            except ValueError:
                raise IntegerLiteralError(text) from None
        if text.count(":") == 1:
            name, type_text = text.split(":")
            return TypedIdentifier(name, type_text)
        return Identifier(text)

    # =========================================================================
    # Cursor Helpers
    # =========================================================================

    def _at_end(self) -> bool:
        return self._position >= len(self._source)

    def _current(self) -> str:
        return self._source[self._position]

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._current().isspace():
            self._position += 1


# =============================================================================
# Convenience Functions
# =============================================================================

def parse_program(source: str) -> list[RawNode]:
    """Parse all top-level forms of ``source``."""
    return SurfaceParser(source).parse_program()


def parse(source: str) -> RawNode:
    """
    Parse ``source`` and return its first top-level form.

    The whole input is still checked, so trailing unbalanced parentheses
    are reported even though only the first form is returned.

    Raises:
        EmptySourceError: If the source holds only whitespace
        MismatchedParensError: If parentheses do not balance
    """
    return parse_program(source)[0]

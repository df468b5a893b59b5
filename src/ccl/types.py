"""
CCL Type Descriptors
====================

This module defines the type descriptors attached to typed identifiers
and the resolver that builds them from annotation text.

Type Grammar
------------
    type  ::= 'int'
            | 'map' '<' type '>'
            | 'array' '<' type ',' DIGITS '>'

The whole annotation must match; no whitespace is allowed inside it
(whitespace would already have split the atom in the surface syntax).

| Text               | Descriptor                      |
|--------------------|---------------------------------|
| int                | IntType()                       |
| map<int>           | MapType(IntType())              |
| array<int,2>       | ArrayType(IntType(), 2)         |
| map<array<int,3>>  | MapType(ArrayType(IntType(), 3))|

Descriptors are frozen dataclasses and compare by value. ``str()`` of a
descriptor gives back its canonical annotation text.
"""

from dataclasses import dataclass

from ccl.errors import UnsupportedTypeError


# =============================================================================
# Type Descriptors
# =============================================================================

@dataclass(frozen=True)
class TypeDesc:
    """Base class for all type descriptors."""
    pass


@dataclass(frozen=True)
class IntType(TypeDesc):
    def __str__(self) -> str:
        return "int"


@dataclass(frozen=True)
class MapType(TypeDesc):
    """String-keyed map; only the value type is parameterized."""
    value_type: TypeDesc

    def __str__(self) -> str:
        return f"map<{self.value_type}>"


@dataclass(frozen=True)
class ArrayType(TypeDesc):
    element_type: TypeDesc
    dimension: int

    def __str__(self) -> str:
        return f"array<{self.element_type},{self.dimension}>"


TYPE_INT = IntType()


# =============================================================================
# Type Text Parser
# =============================================================================

class _TypeTextParser:
    """
    Recursive descent parser over a single annotation string.

    Any deviation from the grammar raises UnsupportedTypeError carrying
    the complete original text, not just the failing fragment.
    """

    def __init__(self, text: str):
        self._text = text
        self._position = 0

    def parse(self) -> TypeDesc:
        type_desc = self._parse_type()
        if self._position != len(self._text):
            self._fail()
        return type_desc

    def _parse_type(self) -> TypeDesc:
        keyword = self._read_while(str.isalpha)
        if keyword == "int":
            return TYPE_INT
        if keyword == "map":
            self._expect("<")
            value_type = self._parse_type()
            self._expect(">")
            return MapType(value_type)
        if keyword == "array":
            self._expect("<")
            element_type = self._parse_type()
            self._expect(",")
            digits = self._read_while(lambda c: c in "0123456789")
            if not digits:
                self._fail()
            self._expect(">")
            try:
                dimension = int(digits)
            except ValueError:
                self._fail()
            return ArrayType(element_type, dimension)
        self._fail()

    def _read_while(self, predicate) -> str:
        start = self._position
        while self._position < len(self._text) and predicate(self._text[self._position]):
            self._position += 1
        return self._text[start:self._position]

    def _expect(self, char: str) -> None:
        if self._text.startswith(char, self._position):
            self._position += 1
        else:
            self._fail()

    def _fail(self):
        raise UnsupportedTypeError(self._text)


def resolve_type(text: str) -> TypeDesc:
    """
    Resolve a type annotation into a type descriptor.

    Args:
        text: Annotation text such as ``int`` or ``map<array<int,2>>``

    Returns:
        The structured type descriptor

    Raises:
        UnsupportedTypeError: If the text matches no type rule

    Example:
        >>> resolve_type("array<int,2>")
        ArrayType(element_type=IntType(), dimension=2)
    """
    return _TypeTextParser(text).parse()

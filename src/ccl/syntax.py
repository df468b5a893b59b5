"""
Raw Syntax Tree
===============

Node types produced by the surface parser, before any semantic lowering.

Node Hierarchy
--------------
RawNode (base)
├── IntLiteral - integer atom, e.g. 42
├── Identifier - plain atom, e.g. x, defn, +
├── TypedIdentifier - atom with one ':' separator, e.g. x:int
└── RawList - one matched '(' ... ')' pair

All nodes are frozen dataclasses and list children are stored as tuples,
so a tree cannot be modified once the parser has built it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawNode:
    """Base class for all raw syntax tree nodes."""
    pass


@dataclass(frozen=True)
class IntLiteral(RawNode):
    value: int


@dataclass(frozen=True)
class Identifier(RawNode):
    name: str


@dataclass(frozen=True)
class TypedIdentifier(RawNode):
    """
    Identifier annotated with a type, written ``name:type``.

    The type text is kept verbatim; resolving it into a type descriptor
    is the job of the lowering pass.
    """
    name: str
    type_text: str


@dataclass(frozen=True)
class RawList(RawNode):
    children: tuple[RawNode, ...] = ()

    @property
    def head(self) -> RawNode | None:
        """First child, or None for the empty list."""
        return self.children[0] if self.children else None


def to_source(node: RawNode) -> str:
    """
    Render the canonical surface text of a raw tree.

    List children are separated by a single space. Parsing the result
    yields a tree equal to ``node``.

    Example:
        >>> to_source(RawList((Identifier("+"), IntLiteral(1), Identifier("x"))))
        '(+ 1 x)'
    """
    if isinstance(node, RawList):
        return "(" + " ".join(to_source(child) for child in node.children) + ")"
    if isinstance(node, TypedIdentifier):
        return f"{node.name}:{node.type_text}"
    if isinstance(node, Identifier):
        return node.name
    if isinstance(node, IntLiteral):
        return str(node.value)
    raise TypeError(f"not a raw syntax node: {node!r}")

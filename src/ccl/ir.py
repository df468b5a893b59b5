"""
CCL Intermediate AST
====================

This module defines the typed intermediate tree produced by lowering and
consumed by the emitter.

Node Hierarchy
--------------
IRNode (base)
├── Class - class with its methods
├── Fun - function with return type, parameters and body
├── Var - typed parameter
├── Blocks
│   └── EmptyBlock - placeholder block
├── Statements
│   └── If - conditional (reserved, never produced by lowering)
└── Expressions
    ├── Arith - arithmetic operator applied to operands
    ├── VarRef - reference to a variable by name
    └── LiteralInt - integer constant

Design Notes
------------
- All nodes are frozen dataclasses; sequences are tuples
- Each compiler stage builds a fresh tree and never mutates an earlier one
- ArithOp.MINUS, If and EmptyBlock exist in the model but lowering has no
  rule that produces them yet
"""

from dataclasses import dataclass
from enum import Enum, auto

from ccl.types import TypeDesc


# =============================================================================
# Base Classes
# =============================================================================

@dataclass(frozen=True)
class IRNode:
    """Base class for all intermediate AST nodes."""
    pass


@dataclass(frozen=True)
class Expression(IRNode):
    """Base class for nodes that evaluate to a value."""
    pass


@dataclass(frozen=True)
class Block(IRNode):
    """Base class for statement blocks."""
    pass


@dataclass(frozen=True)
class Statement(IRNode):
    """Base class for statements."""
    pass


class ArithOp(Enum):
    PLUS = auto()
    MINUS = auto()

    @property
    def symbol(self) -> str:
        return "+" if self is ArithOp.PLUS else "-"


# =============================================================================
# Expressions
# =============================================================================

@dataclass(frozen=True)
class Arith(Expression):
    op: ArithOp
    args: tuple[Expression, ...]


@dataclass(frozen=True)
class VarRef(Expression):
    name: str


@dataclass(frozen=True)
class LiteralInt(Expression):
    value: int


# =============================================================================
# Blocks and Statements
# =============================================================================

@dataclass(frozen=True)
class EmptyBlock(Block):
    pass


@dataclass(frozen=True)
class If(Statement):
    then_block: Block
    else_block: Block


# =============================================================================
# Declarations
# =============================================================================

@dataclass(frozen=True)
class Var(IRNode):
    """
    Typed variable declaration (currently only function parameters).

    Attributes:
        name: Variable name
        type: Resolved type descriptor
    """
    name: str
    type: TypeDesc


@dataclass(frozen=True)
class Fun(IRNode):
    """
    Function definition.

    Attributes:
        name: Function name
        return_type: Resolved return type
        params: Parameters in declaration order
        body: Single expression forming the function body
    """
    name: str
    return_type: TypeDesc
    params: tuple[Var, ...]
    body: Expression


@dataclass(frozen=True)
class Class(IRNode):
    name: str
    methods: tuple[Fun, ...] = ()


# =============================================================================
# IR Pretty Printer
# =============================================================================

class IRPrinter:
    """
    Pretty printer for the intermediate tree.

    Produces an indented, human-readable outline, one node per line.

    Usage:
        printer = IRPrinter()
        print(printer.print(tree))
    """

    def __init__(self):
        self.output: list[str] = []
        self.indent_level = 0

    def print(self, node: IRNode) -> str:
        """Print the tree and return it as a string."""
        self.output = []
        self.indent_level = 0
        self.visit(node)
        return "\n".join(self.output)

    def visit(self, node: IRNode) -> None:
        method_name = f"visit_{node.__class__.__name__}"
        visitor = getattr(self, method_name, None)
        if visitor is None:
            raise TypeError(f"no printer for {node.__class__.__name__}")
        visitor(node)

    def _emit(self, text: str) -> None:
        self.output.append("  " * self.indent_level + text)

    def visit_Class(self, node: Class):
        self._emit(f"Class {node.name}")
        self.indent_level += 1
        for method in node.methods:
            self.visit(method)
        self.indent_level -= 1

    def visit_Fun(self, node: Fun):
        params = ", ".join(f"{p.name}: {p.type}" for p in node.params)
        self._emit(f"Fun {node.name}({params}) -> {node.return_type}")
        self.indent_level += 1
        self._emit(self._expr_str(node.body))
        self.indent_level -= 1

    def visit_Var(self, node: Var):
        self._emit(f"Var {node.name}: {node.type}")

    def visit_EmptyBlock(self, node: EmptyBlock):
        self._emit("EmptyBlock")

    def visit_If(self, node: If):
        self._emit("If")
        self.indent_level += 1
        self._emit("Then:")
        self.visit(node.then_block)
        self._emit("Else:")
        self.visit(node.else_block)
        self.indent_level -= 1

    def visit_Arith(self, node: Arith):
        self._emit(self._expr_str(node))

    def visit_VarRef(self, node: VarRef):
        self._emit(self._expr_str(node))

    def visit_LiteralInt(self, node: LiteralInt):
        self._emit(self._expr_str(node))

    def _expr_str(self, expr: Expression) -> str:
        """Convert expression to a parenthesized prefix string."""
        if isinstance(expr, LiteralInt):
            return str(expr.value)
        if isinstance(expr, VarRef):
            return expr.name
        if isinstance(expr, Arith):
            args = " ".join(self._expr_str(a) for a in expr.args)
            return f"({expr.op.symbol} {args})"
        raise TypeError(f"not an expression: {expr!r}")

"""
CCL - Typed Lisp-to-Java Compiler Front End
===========================================

This package translates a small Lisp-like surface syntax with inline type
annotations into Java class skeletons:

    (class Calc (defn add:int (x:int y:int) (+ x y)))

becomes

    public class Calc {
    public static Integer add(){
    }
    }

Pipeline
--------
    Source → Surface Parser → Raw Tree → Lowering → Intermediate AST → Emitter → Java

Main Components
---------------
- **reader**: surface parser producing the raw syntax tree
- **types**: type descriptors and the annotation resolver
- **lowering**: raw tree to typed intermediate AST
- **emitter**: intermediate AST to Java source
- **compiler**: pipeline orchestration

Quick Start
-----------
    >>> from ccl import parse, lower, emit
    >>> tree = lower(parse("(class X (defn f:int () 0))"))
    >>> print(emit(tree), end="")
    public class X {
    public static Integer f(){
    }
    }

Or use the command-line tool:
    $ cclc program.ccl -o Program.java
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from ccl.errors import (
    CclError,
    CclSyntaxError,
    EmptySourceError,
    IntegerLiteralError,
    MismatchedParensError,
    UnsupportedTypeError,
    CclLoweringError,
    MalformedFormError,
    NotImplementedConstructError,
    CclEmitError,
    UnsupportedRenderTargetError,
)
from ccl.syntax import RawNode, IntLiteral, Identifier, TypedIdentifier, RawList, to_source
from ccl.reader import SurfaceParser, parse, parse_program
from ccl.types import TypeDesc, IntType, MapType, ArrayType, resolve_type
from ccl.ir import (
    IRNode,
    Class,
    Fun,
    Var,
    Block,
    EmptyBlock,
    Statement,
    If,
    ArithOp,
    Expression,
    Arith,
    VarRef,
    LiteralInt,
    IRPrinter,
)
from ccl.lowering import Lowerer, lower, lower_program
from ccl.emitter import JavaEmitter, emit, render_type
from ccl.compiler import (
    CclCompiler,
    CompilerOptions,
    CompilerResult,
    Stage,
    compile_source,
    compile_file,
)

__all__ = [
    "__version__",
    # Errors
    "CclError",
    "CclSyntaxError",
    "EmptySourceError",
    "IntegerLiteralError",
    "MismatchedParensError",
    "UnsupportedTypeError",
    "CclLoweringError",
    "MalformedFormError",
    "NotImplementedConstructError",
    "CclEmitError",
    "UnsupportedRenderTargetError",
    # Raw syntax tree
    "RawNode",
    "IntLiteral",
    "Identifier",
    "TypedIdentifier",
    "RawList",
    "to_source",
    # Surface parser
    "SurfaceParser",
    "parse",
    "parse_program",
    # Type descriptors
    "TypeDesc",
    "IntType",
    "MapType",
    "ArrayType",
    "resolve_type",
    # Intermediate AST
    "IRNode",
    "Class",
    "Fun",
    "Var",
    "Block",
    "EmptyBlock",
    "Statement",
    "If",
    "ArithOp",
    "Expression",
    "Arith",
    "VarRef",
    "LiteralInt",
    "IRPrinter",
    # Lowering
    "Lowerer",
    "lower",
    "lower_program",
    # Emitter
    "JavaEmitter",
    "emit",
    "render_type",
    # Compiler
    "CclCompiler",
    "CompilerOptions",
    "CompilerResult",
    "Stage",
    "compile_source",
    "compile_file",
]

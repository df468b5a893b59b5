"""
Java Source Emitter
===================

Renders the intermediate AST as Java source text.

Only class and method signatures are produced: every method is emitted
as a ``public static`` stub with an empty parameter list and an empty
body. Parameter and body rendering belong in ``JavaEmitter._emit_fun``.

Type Mapping
------------
| Descriptor   | Java               |
|--------------|--------------------|
| int          | Integer            |
| map<T>       | Map<String,T>      |
| array<T,N>   | (not supported)    |

Example output:
    public class X {
    public static Integer f(){
    }
    }
"""

import logging

from ccl.errors import CclEmitError, UnsupportedRenderTargetError
from ccl.ir import Class, Fun, IRNode
from ccl.types import IntType, MapType, TypeDesc

logger = logging.getLogger(__name__)


def render_type(type_desc: TypeDesc) -> str:
    """
    Map a type descriptor to its Java spelling.

    Raises:
        UnsupportedRenderTargetError: If the type has no Java mapping
    """
    if isinstance(type_desc, IntType):
        return "Integer"
    if isinstance(type_desc, MapType):
        return f"Map<String,{render_type(type_desc.value_type)}>"
    raise UnsupportedRenderTargetError(type_desc)


class JavaEmitter:
    """
    Emits Java source for one intermediate tree.

    Usage:
        text = JavaEmitter().emit(tree)
    """

    def __init__(self):
        self._buffer: list[str] = []

    def emit(self, tree: IRNode) -> str:
        """
        Render ``tree`` and return the source text.

        Raises:
            UnsupportedRenderTargetError: If a return type cannot be rendered
            CclEmitError: If the tree is neither a Class nor a Fun
        """
        self._buffer = []
        if isinstance(tree, Class):
            self._emit_class(tree)
        elif isinstance(tree, Fun):
            self._emit_fun(tree)
        else:
            raise CclEmitError(f"cannot emit {tree.__class__.__name__} at top level")
        return "".join(self._buffer)

    def _emit_class(self, node: Class) -> None:
        self._buffer.append(f"public class {node.name} {{\n")
        for method in node.methods:
            self._emit_fun(method)
        self._buffer.append("}\n")
        logger.debug(f"Emitted class '{node.name}' with {len(node.methods)} method stub(s)")

    def _emit_fun(self, node: Fun) -> None:
        # Signature only: parameters and body are not rendered yet.
        return_type = render_type(node.return_type)
        self._buffer.append(f"public static {return_type} {node.name}(){{\n")
        self._buffer.append("}\n")


def emit(tree: IRNode) -> str:
    """Render an intermediate tree as Java source text."""
    return JavaEmitter().emit(tree)

"""
CCL Lowering Pass
=================

Transforms the raw syntax tree into the typed intermediate AST.

Lowering Rules
--------------
| Raw form                                | Result                    |
|-----------------------------------------|---------------------------|
| (class NAME fun*)                       | Class                     |
| (defn NAME:TYPE (PARAM:TYPE*) expr)     | Fun                       |
| (+ expr+)                               | Arith(PLUS, ...)          |
| NAME                                    | VarRef                    |
| INT                                     | LiteralInt                |

The head symbols ``-``/``minus``, ``if`` and ``do``/``block`` name
constructs the intermediate tree can describe but that have no lowering
rule yet; they raise NotImplementedConstructError. Every other shape
raises MalformedFormError.
"""

import logging

from ccl.errors import MalformedFormError, NotImplementedConstructError
from ccl.ir import Arith, ArithOp, Class, Expression, Fun, IRNode, LiteralInt, Var, VarRef
from ccl.syntax import Identifier, IntLiteral, RawList, RawNode, TypedIdentifier, to_source
from ccl.types import resolve_type

logger = logging.getLogger(__name__)

CLASS_SHAPE = "(class NAME (defn ...)*)"
DEFN_SHAPE = "(defn NAME:TYPE (PARAM:TYPE ...) BODY)"
PLUS_SHAPE = "(+ EXPR EXPR ...)"

# Head symbol -> construct name for forms without a lowering rule
UNIMPLEMENTED_HEADS = {
    "-": "minus",
    "minus": "minus",
    "if": "if",
    "do": "block",
    "block": "block",
}


class Lowerer:
    """
    Lowers raw syntax nodes into intermediate AST nodes.

    The lowerer holds no state between calls; one instance can lower any
    number of trees.
    """

    def lower(self, node: RawNode) -> IRNode:
        """
        Lower a single raw node.

        Raises:
            MalformedFormError: If the node has no valid lowering
            NotImplementedConstructError: For recognized but unsupported forms
            UnsupportedTypeError: If a type annotation cannot be resolved
        """
        if isinstance(node, RawList):
            return self._lower_list(node)
        if isinstance(node, Identifier):
            return VarRef(node.name)
        if isinstance(node, IntLiteral):
            return LiteralInt(node.value)
        if isinstance(node, TypedIdentifier):
            raise MalformedFormError("an expression or form", to_source(node))
        raise TypeError(f"not a raw syntax node: {node!r}")

    def _lower_list(self, node: RawList) -> IRNode:
        head = node.head
        if not isinstance(head, Identifier):
            raise MalformedFormError("a form starting with a symbol", to_source(node))

        if head.name == "class":
            return self._lower_class(node)
        if head.name == "defn":
            return self._lower_defn(node)
        if head.name == "+":
            return self._lower_plus(node)
        if head.name in UNIMPLEMENTED_HEADS:
            raise NotImplementedConstructError(UNIMPLEMENTED_HEADS[head.name])
        raise MalformedFormError(
            f"one of {CLASS_SHAPE}, {DEFN_SHAPE}, {PLUS_SHAPE}", to_source(node)
        )

    # =========================================================================
    # Forms
    # =========================================================================

    def _lower_class(self, node: RawList) -> Class:
        if len(node.children) < 2 or not isinstance(node.children[1], Identifier):
            raise MalformedFormError(CLASS_SHAPE, to_source(node))

        methods = []
        for child in node.children[2:]:
            method = self.lower(child)
            if not isinstance(method, Fun):
                raise MalformedFormError(f"a method {DEFN_SHAPE}", to_source(child))
            methods.append(method)

        name = node.children[1].name
        logger.debug(f"Lowered class '{name}' with {len(methods)} method(s)")
        return Class(name, tuple(methods))

    def _lower_defn(self, node: RawList) -> Fun:
        if len(node.children) != 4:
            raise MalformedFormError(DEFN_SHAPE, to_source(node))
        _, signature, param_list, body = node.children

        if not isinstance(signature, TypedIdentifier) or not signature.name:
            raise MalformedFormError(f"a typed function name in {DEFN_SHAPE}", to_source(signature))
        if not isinstance(param_list, RawList):
            raise MalformedFormError(f"a parameter list in {DEFN_SHAPE}", to_source(param_list))

        params = tuple(self._lower_param(param) for param in param_list.children)
        fun = Fun(signature.name, resolve_type(signature.type_text), params, self._lower_expression(body))
        logger.debug(f"Lowered function '{fun.name}' with {len(params)} parameter(s)")
        return fun

    def _lower_param(self, node: RawNode) -> Var:
        if not isinstance(node, TypedIdentifier) or not node.name:
            raise MalformedFormError("a typed parameter NAME:TYPE", to_source(node))
        return Var(node.name, resolve_type(node.type_text))

    def _lower_plus(self, node: RawList) -> Arith:
        if len(node.children) < 2:
            raise MalformedFormError(PLUS_SHAPE, to_source(node))
        args = tuple(self._lower_expression(child) for child in node.children[1:])
        return Arith(ArithOp.PLUS, args)

    def _lower_expression(self, node: RawNode) -> Expression:
        result = self.lower(node)
        if not isinstance(result, Expression):
            raise MalformedFormError("an expression", to_source(node))
        return result


# =============================================================================
# Convenience Functions
# =============================================================================

def lower(node: RawNode) -> IRNode:
    """Lower one raw syntax tree into the intermediate AST."""
    return Lowerer().lower(node)


def lower_program(nodes: list[RawNode]) -> list[IRNode]:
    """Lower each top-level raw form in order."""
    lowerer = Lowerer()
    return [lowerer.lower(node) for node in nodes]

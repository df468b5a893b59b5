"""
Lowering Test Suite
===================

Tests for lowering raw syntax trees into the intermediate AST.

Test Organization
-----------------
- TestExpressions: Atoms and arithmetic forms
- TestDefn: Function definitions
- TestClass: Class definitions
- TestMalformedForms: Shape errors
- TestUnimplementedConstructs: Reserved but unsupported forms
"""

import pytest

from ccl.errors import (
    MalformedFormError,
    NotImplementedConstructError,
    UnsupportedTypeError,
)
from ccl.ir import Arith, ArithOp, Class, Fun, LiteralInt, Var, VarRef
from ccl.lowering import Lowerer, lower, lower_program
from ccl.reader import parse, parse_program
from ccl.types import ArrayType, IntType, MapType

ADD_FUN = Fun(
    "f",
    IntType(),
    (Var("x", IntType()), Var("y", IntType())),
    Arith(ArithOp.PLUS, (VarRef("x"), VarRef("y"))),
)


def lower_source(source: str):
    return lower(parse(source))


# =============================================================================
# Expression Tests
# =============================================================================

class TestExpressions:
    """Tests for expression lowering."""

    def test_identifier_is_var_ref(self):
        assert lower_source("x") == VarRef("x")

    def test_integer_is_literal(self):
        assert lower_source("7") == LiteralInt(7)

    def test_plus(self):
        assert lower_source("(+ x 1)") == Arith(ArithOp.PLUS, (VarRef("x"), LiteralInt(1)))

    def test_plus_single_operand(self):
        assert lower_source("(+ x)") == Arith(ArithOp.PLUS, (VarRef("x"),))

    def test_nested_plus(self):
        assert lower_source("(+ x (+ y 2))") == Arith(
            ArithOp.PLUS,
            (VarRef("x"), Arith(ArithOp.PLUS, (VarRef("y"), LiteralInt(2)))),
        )


# =============================================================================
# Function Tests
# =============================================================================

class TestDefn:
    """Tests for function definition lowering."""

    def test_defn(self):
        assert lower_source("(defn f:int (x:int y:int) (+ x y))") == ADD_FUN

    def test_defn_without_params(self):
        assert lower_source("(defn f:int () 0)") == Fun("f", IntType(), (), LiteralInt(0))

    def test_defn_with_collection_types(self):
        fun = lower_source("(defn g:map<int> (m:map<int> a:array<int,2>) m)")
        assert fun.return_type == MapType(IntType())
        assert fun.params == (
            Var("m", MapType(IntType())),
            Var("a", ArrayType(IntType(), 2)),
        )
        assert fun.body == VarRef("m")

    def test_unsupported_return_type(self):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            lower_source("(defn f:float () 0)")
        assert exc_info.value.text == "float"

    def test_unsupported_param_type(self):
        with pytest.raises(UnsupportedTypeError):
            lower_source("(defn f:int (x:string) x)")


# =============================================================================
# Class Tests
# =============================================================================

class TestClass:
    """Tests for class definition lowering."""

    def test_class_with_method(self):
        assert lower_source("(class x (defn f:int (x:int y:int) (+ x y)))") == Class(
            "x", (ADD_FUN,)
        )

    def test_class_without_methods(self):
        assert lower_source("(class Empty)") == Class("Empty", ())

    def test_class_method_order(self):
        tree = lower_source("(class C (defn a:int () 1) (defn b:int () 2))")
        assert [m.name for m in tree.methods] == ["a", "b"]

    def test_lower_program(self):
        trees = lower_program(parse_program("(class A) (class B)"))
        assert trees == [Class("A", ()), Class("B", ())]

    def test_lowerer_is_reusable(self):
        lowerer = Lowerer()
        first = lowerer.lower(parse("(+ 1 2)"))
        second = lowerer.lower(parse("(+ 1 2)"))
        assert first == second


# =============================================================================
# Malformed Form Tests
# =============================================================================

class TestMalformedForms:
    """Tests for forms whose shape does not match their head symbol."""

    @pytest.mark.parametrize("source", [
        "()",
        "(1 2)",
        "((+ 1 2))",
        "(frobnicate x)",
        "(+)",
        "x:int",
        "(class)",
        "(class x:int)",
        "(class 3)",
        "(class x 1)",
        "(class x (+ 1 2))",
        "(defn f:int (x:int))",
        "(defn f:int (x:int) x y)",
        "(defn f (x:int) x)",
        "(defn :int () x)",
        "(defn f:int x:int x)",
        "(defn f:int (x) x)",
        "(defn f:int (x:int) (defn g:int () 0))",
        "(+ x (class y))",
        "(+ x y:int)",
    ])
    def test_malformed(self, source):
        with pytest.raises(MalformedFormError):
            lower_source(source)

    def test_error_names_form_and_shape(self):
        with pytest.raises(MalformedFormError) as exc_info:
            lower_source("(defn f:int (x:int))")
        assert exc_info.value.got == "(defn f:int (x:int))"
        assert "defn" in exc_info.value.expected

    def test_method_error_names_method(self):
        with pytest.raises(MalformedFormError) as exc_info:
            lower_source("(class x (defn f:int () 0) 42)")
        assert exc_info.value.got == "42"


# =============================================================================
# Unimplemented Construct Tests
# =============================================================================

class TestUnimplementedConstructs:
    """Tests for constructs the intermediate AST reserves but cannot lower."""

    @pytest.mark.parametrize("source,construct", [
        ("(- x 1)", "minus"),
        ("(minus x 1)", "minus"),
        ("(if x 1 2)", "if"),
        ("(do x)", "block"),
        ("(block x)", "block"),
    ])
    def test_not_implemented(self, source, construct):
        with pytest.raises(NotImplementedConstructError) as exc_info:
            lower_source(source)
        assert exc_info.value.construct == construct

    def test_nested_in_function_body(self):
        with pytest.raises(NotImplementedConstructError):
            lower_source("(class x (defn f:int (a:int) (+ a (- a 1))))")

"""
Surface Parser Test Suite
=========================

Tests for the surface parser and the raw syntax tree serializer.

Test Organization
-----------------
- TestAtoms: Atom classification
- TestLists: List structure and nesting
- TestWhitespace: Delimiter handling
- TestParenBalance: Mismatched parentheses detection
- TestToSource: Canonical re-serialization
"""

import pytest

from ccl.errors import (
    CclSyntaxError,
    EmptySourceError,
    IntegerLiteralError,
    MismatchedParensError,
)
from ccl.reader import SurfaceParser, parse, parse_program
from ccl.syntax import Identifier, IntLiteral, RawList, TypedIdentifier, to_source


# =============================================================================
# Atom Tests
# =============================================================================

class TestAtoms:
    """Tests for atom classification."""

    def test_integer(self):
        assert parse("42") == IntLiteral(42)

    def test_signed_integers(self):
        """Leading sign is part of an integer literal."""
        assert parse("-3") == IntLiteral(-3)
        assert parse("+7") == IntLiteral(7)

    def test_plain_identifier(self):
        assert parse("defn") == Identifier("defn")

    def test_operator_symbols_are_identifiers(self):
        """A bare sign is not an integer."""
        assert parse("+") == Identifier("+")
        assert parse("-") == Identifier("-")

    def test_typed_identifier(self):
        assert parse("x:int") == TypedIdentifier("x", "int")

    def test_typed_identifier_keeps_type_text_verbatim(self):
        assert parse("l:array<int,2>") == TypedIdentifier("l", "array<int,2>")

    def test_two_colons_is_plain_identifier(self):
        """Only an atom with exactly one ':' is typed."""
        assert parse("a:b:c") == Identifier("a:b:c")

    def test_digits_with_letters_is_identifier(self):
        assert parse("12abc") == Identifier("12abc")

    def test_oversized_integer(self):
        """An integer atom too long to convert is a syntax error."""
        with pytest.raises(IntegerLiteralError) as exc_info:
            parse("(+ x " + "9" * 5000 + ")")
        assert exc_info.value.digit_count == 5000
        assert isinstance(exc_info.value, CclSyntaxError)


# =============================================================================
# List Tests
# =============================================================================

class TestLists:
    """Tests for parenthesized lists."""

    def test_empty_list(self):
        assert parse("()") == RawList(())

    def test_flat_list(self):
        assert parse("(+ x 1)") == RawList(
            (Identifier("+"), Identifier("x"), IntLiteral(1))
        )

    def test_nested_lists(self):
        assert parse("((a) (b (c)))") == RawList((
            RawList((Identifier("a"),)),
            RawList((Identifier("b"), RawList((Identifier("c"),)))),
        ))

    def test_atom_closed_by_paren(self):
        """An atom ends at ')' without whitespace."""
        assert parse("(x:int)") == RawList((TypedIdentifier("x", "int"),))

    def test_defn_form(self):
        tree = parse("(defn f:int (x:int y:int) (+ x y))")
        assert tree == RawList((
            Identifier("defn"),
            TypedIdentifier("f", "int"),
            RawList((TypedIdentifier("x", "int"), TypedIdentifier("y", "int"))),
            RawList((Identifier("+"), Identifier("x"), Identifier("y"))),
        ))

    def test_head_property(self):
        assert parse("(class x)").head == Identifier("class")
        assert parse("()").head is None

    def test_program_with_several_forms(self):
        """Concatenated balanced groups parse as separate forms."""
        forms = parse_program("(a) (b) 3")
        assert forms == [
            RawList((Identifier("a"),)),
            RawList((Identifier("b"),)),
            IntLiteral(3),
        ]

    def test_parse_returns_first_form(self):
        assert parse("(a) (b)") == RawList((Identifier("a"),))


# =============================================================================
# Whitespace Tests
# =============================================================================

class TestWhitespace:
    """Tests for whitespace delimiting."""

    def test_newlines_and_tabs(self):
        assert parse("(\tf\n x\r\n)") == RawList((Identifier("f"), Identifier("x")))

    def test_unicode_separators(self):
        """Unicode space and line separators delimit atoms."""
        assert parse("(a\u00a0b\u2028c)") == RawList(
            (Identifier("a"), Identifier("b"), Identifier("c"))
        )

    def test_surrounding_whitespace(self):
        assert parse("   (x)   \n") == RawList((Identifier("x"),))

    def test_empty_source(self):
        with pytest.raises(EmptySourceError):
            parse("")

    def test_whitespace_only_source(self):
        with pytest.raises(EmptySourceError):
            parse(" \n\t ")


# =============================================================================
# Paren Balance Tests
# =============================================================================

class TestParenBalance:
    """Tests for mismatched parentheses."""

    def test_unmatched_close_after_atom(self):
        with pytest.raises(MismatchedParensError) as exc_info:
            parse("a)")
        assert exc_info.value.position == 1

    def test_leading_close(self):
        with pytest.raises(MismatchedParensError):
            parse(")")

    def test_extra_close_after_list(self):
        with pytest.raises(MismatchedParensError):
            parse("(a))")

    def test_unclosed_list(self):
        with pytest.raises(MismatchedParensError) as exc_info:
            parse("(a (b)")
        assert exc_info.value.open_count == 1

    def test_error_message(self):
        with pytest.raises(MismatchedParensError) as exc_info:
            parse("a)")
        assert "mismatched parens" in str(exc_info.value)

    def test_counter_returns_to_zero(self):
        parser = SurfaceParser("((a) (b (c))) (d)")
        parser.parse_program()
        assert parser._open == 0


# =============================================================================
# Serializer Tests
# =============================================================================

class TestToSource:
    """Tests for canonical re-serialization."""

    def test_canonical_spacing(self):
        assert to_source(parse("(  defn   f:int\n(x:int)  (+ x 1) )")) == \
            "(defn f:int (x:int) (+ x 1))"

    def test_reparse_gives_equal_tree(self):
        source = "(class x (defn f:int (x:int g:map<int> l:array<int,2>) (+ x -1)))"
        tree = parse(source)
        assert parse(to_source(tree)) == tree

    def test_rejects_non_node(self):
        with pytest.raises(TypeError):
            to_source("x")

"""
CCL Error Hierarchy
===================

This module defines the exception hierarchy for the CCL compiler.
All exceptions inherit from CclError, allowing callers to catch every
compiler error with a single except clause if desired.

Exception Hierarchy
-------------------
CclError (base)
├── CclSyntaxError - surface syntax errors
│   ├── EmptySourceError - no form in the input
│   ├── IntegerLiteralError - integer atom too long to convert
│   └── MismatchedParensError - unbalanced '(' / ')'
├── UnsupportedTypeError - type annotation matches no type rule
├── CclLoweringError - raw tree cannot be lowered
│   ├── MalformedFormError - form has the wrong shape for its head symbol
│   └── NotImplementedConstructError - recognized but unsupported construct
└── CclEmitError - code emission errors
    └── UnsupportedRenderTargetError - type has no target-language mapping

Every error is terminal for the call that raised it. The pipeline never
recovers locally or produces partial output.

Error Message Format
--------------------
    error: description
    hint: suggestion for fixing (when available)
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class CclError(Exception):
    """
    Base exception for all CCL compiler errors.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with an optional hint line.

        Example output:
            error: unsupported type 'float'
            hint: supported types are int, map<T> and array<T,N>
        """
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Syntax Errors (Surface Parser)
# =============================================================================

class CclSyntaxError(CclError):
    """Error in the parenthesized surface syntax."""
    pass


class EmptySourceError(CclSyntaxError):
    """Raised when the input contains no form at all."""

    def __init__(self):
        super().__init__("source contains no forms")


class IntegerLiteralError(CclSyntaxError):
    """
    Integer atom that cannot be converted to a value.

    Attributes:
        digit_count: Number of characters in the offending atom
    """

    def __init__(self, text: str):
        self.digit_count = len(text)
        super().__init__(
            f"integer literal with {len(text)} characters is too long",
            hint="split the constant into smaller literals",
        )


class MismatchedParensError(CclSyntaxError):
    """
    Unbalanced parentheses.

    Raised when a ')' has no matching '(' or when the input ends while
    a list is still open.

    Attributes:
        position: Character offset where the imbalance was detected
        open_count: Number of lists still open at that point
    """

    def __init__(self, position: int, open_count: int):
        self.position = position
        self.open_count = open_count
        if open_count > 0:
            message = f"mismatched parens: {open_count} unclosed '(' at end of input"
            hint = "add the missing ')'"
        else:
            message = f"mismatched parens: unexpected ')' at offset {position}"
            hint = "remove the ')' or add a matching '('"
        super().__init__(message, hint=hint)


# =============================================================================
# Type Descriptor Errors
# =============================================================================

class UnsupportedTypeError(CclError):
    """
    Type annotation that matches none of the recognized forms.

    Attributes:
        text: The complete type text that failed to resolve
    """

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"unsupported type '{text}'",
            hint="supported types are int, map<T> and array<T,N>",
        )


# =============================================================================
# Lowering Errors
# =============================================================================

class CclLoweringError(CclError):
    """Base class for errors raised while lowering the raw syntax tree."""
    pass


class MalformedFormError(CclLoweringError):
    """
    A form whose shape does not match the construct named by its head.

    Attributes:
        expected: Description of the expected shape
        got: Surface text of the offending form
    """

    def __init__(self, expected: str, got: str):
        self.expected = expected
        self.got = got
        super().__init__(f"malformed form {got}", hint=f"expected {expected}")


class NotImplementedConstructError(CclLoweringError):
    """
    A recognized construct that has no lowering rule yet.

    Attributes:
        construct: Name of the construct (e.g. 'minus', 'if', 'block')
    """

    def __init__(self, construct: str):
        self.construct = construct
        super().__init__(f"'{construct}' is not implemented")


# =============================================================================
# Emitter Errors
# =============================================================================

class CclEmitError(CclError):
    """Base class for code emission errors."""
    pass


class UnsupportedRenderTargetError(CclEmitError):
    """
    The emitter has no target-language mapping for a type descriptor.

    Attributes:
        type_desc: The type descriptor that could not be rendered
    """

    def __init__(self, type_desc):
        self.type_desc = type_desc
        super().__init__(f"cannot render type '{type_desc}' in the target language")

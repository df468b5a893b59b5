"""
CCL Compiler Main Module
========================

This module provides the main compiler interface for CCL.
It orchestrates the complete compilation process:

    Source → Parse → Raw Tree → Lower → Intermediate Tree → Emit → Java

Usage
-----
Command line:
    $ cclc program.ccl -o Program.java

Programmatic:
    >>> from ccl.compiler import compile_source
    >>> print(compile_source("(class X (defn f:int () 0))"))
    public class X {
    public static Integer f(){
    }
    }

Compilation Pipeline
--------------------
1. **Parsing**: Read every top-level form into a raw syntax tree
2. **Lowering**: Turn each raw form into a typed intermediate tree
3. **Emission**: Render each intermediate tree as Java and concatenate

Error Handling
--------------
The first error aborts compilation. Errors propagate unchanged to the
caller; no partial result is returned.
"""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

from ccl.emitter import emit
from ccl.ir import IRNode
from ccl.lowering import lower_program
from ccl.reader import parse_program
from ccl.syntax import RawNode

logger = logging.getLogger(__name__)


class Stage(IntEnum):
    """Compilation stages in pipeline order."""
    PARSE = 1
    LOWER = 2
    EMIT = 3


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        stop_after: Last stage to run (default: run the whole pipeline)
        filename: Source name used in log messages
    """
    stop_after: Stage = Stage.EMIT
    filename: str = "<input>"


@dataclass
class CompilerResult:
    """
    Result of a compilation.

    Attributes:
        filename: Source filename
        stage_reached: Last stage that ran
        raw_forms: Raw syntax tree of each top-level form
        ir_forms: Intermediate tree of each form (empty if lowering was skipped)
        output: Emitted Java source (empty if emission was skipped)
    """
    filename: str = ""
    stage_reached: Stage = Stage.PARSE
    raw_forms: list[RawNode] = field(default_factory=list)
    ir_forms: list[IRNode] = field(default_factory=list)
    output: str = ""


class CclCompiler:
    """
    CCL compiler front end.

    Example:
        compiler = CclCompiler()
        result = compiler.compile_source("(class X (defn f:int () 0))")
        print(result.output)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: CompilerOptions | None = None):
        self.options = options or CompilerOptions()

    def compile_source(self, source: str, filename: str | None = None) -> CompilerResult:
        """
        Run the pipeline over ``source`` up to ``options.stop_after``.

        Args:
            source: CCL source text
            filename: Source name for log messages (default: options.filename)

        Raises:
            CclError: If any stage fails
        """
        filename = filename or self.options.filename
        result = CompilerResult(filename=filename)

        result.raw_forms = parse_program(source)
        logger.debug(f"{filename}: parsed {len(result.raw_forms)} form(s)")
        if self.options.stop_after == Stage.PARSE:
            return result

        result.ir_forms = lower_program(result.raw_forms)
        result.stage_reached = Stage.LOWER
        logger.debug(f"{filename}: lowered {len(result.ir_forms)} form(s)")
        if self.options.stop_after == Stage.LOWER:
            return result

        result.output = "".join(emit(tree) for tree in result.ir_forms)
        result.stage_reached = Stage.EMIT
        logger.debug(f"{filename}: emitted {len(result.output)} chars")
        return result

    def compile_file(self, filepath: str | Path) -> CompilerResult:
        """
        Compile a source file.

        Raises:
            FileNotFoundError: If the file does not exist
            CclError: If compilation fails
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")
        return self.compile_source(path.read_text(encoding="utf-8"), str(path))


# =============================================================================
# Convenience Functions
# =============================================================================

def compile_source(source: str) -> str:
    """Compile CCL source text to Java source text."""
    return CclCompiler().compile_source(source).output


def compile_file(filepath: str | Path, output_path: str | Path | None = None) -> str:
    """
    Compile a CCL source file to Java source text.

    Args:
        filepath: Path to the source file
        output_path: Optional path to write the Java output to

    Returns:
        The emitted Java source
    """
    result = CclCompiler().compile_file(filepath)
    if output_path:
        Path(output_path).write_text(result.output, encoding="utf-8")
    return result.output

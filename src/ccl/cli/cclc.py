"""
cclc - CCL Compiler Command-Line Interface
==========================================

This module implements the command-line interface for the CCL compiler.

Usage Examples
--------------
Compile the built-in sample and show every stage:
    $ cclc

Compile a file to stdout:
    $ cclc program.ccl

With output file:
    $ cclc program.ccl -o Program.java

Inspect intermediate stages:
    $ cclc program.ccl --raw
    $ cclc program.ccl --ir
"""

import logging
from pathlib import Path
from typing import Optional

import click

from ccl import __version__
from ccl.cli.errors import handle_cli_exception
from ccl.compiler import CclCompiler, CompilerOptions, Stage
from ccl.ir import IRPrinter
from ccl.syntax import to_source

logger = logging.getLogger(__name__)

SAMPLE_SOURCE = (
    "(class x \n"
    "  (defn f:int (x:int y:int g:map<int> l:array<int,2>) (+ x y))\n"
    "  (defn g:map<int> (x:int) (+ x x 1)))"
)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def format_raw_forms(forms) -> str:
    return "\n".join(to_source(form) for form in forms)


def format_ir_forms(forms) -> str:
    printer = IRPrinter()
    return "\n".join(printer.print(form) for form in forms)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output Java file (default: stdout)",
)
@click.option(
    "--raw",
    is_flag=True,
    help="Print the raw syntax tree and exit",
)
@click.option(
    "--ir",
    is_flag=True,
    help="Print the intermediate tree and exit",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="cclc")
def main(
    input_file: Optional[Path],
    output: Optional[Path],
    raw: bool,
    ir: bool,
    verbose: bool,
) -> None:
    """
    Compile CCL source into Java class skeletons.

    INPUT_FILE is the CCL source file. Without it, the built-in sample
    program is compiled and every pipeline stage is printed.

    \b
    Examples:
        cclc                          # Run the sample program
        cclc prog.ccl                 # Print Java to stdout
        cclc prog.ccl -o Prog.java    # Write Java to a file
        cclc prog.ccl --ir            # Show the intermediate tree
    """
    setup_logging(verbose)

    if output is not None and (input_file is None or raw or ir):
        raise click.UsageError("-o/--output requires INPUT_FILE and cannot be combined with --raw or --ir")

    if raw:
        stop_after = Stage.PARSE
    elif ir:
        stop_after = Stage.LOWER
    else:
        stop_after = Stage.EMIT
    compiler = CclCompiler(CompilerOptions(stop_after=stop_after))

    try:
        if input_file is None:
            if verbose:
                click.echo("Compiling built-in sample program...")
            result = compiler.compile_source(SAMPLE_SOURCE)
            click.echo(format_raw_forms(result.raw_forms))
            if result.stage_reached >= Stage.LOWER:
                click.echo(format_ir_forms(result.ir_forms))
            if result.stage_reached >= Stage.EMIT:
                click.echo(result.output, nl=False)
            return

        if verbose:
            click.echo(f"Compiling {input_file}...")
        result = compiler.compile_file(input_file)

        if raw:
            click.echo(format_raw_forms(result.raw_forms))
            return
        if ir:
            click.echo(format_ir_forms(result.ir_forms))
            return

        if output is None:
            click.echo(result.output, nl=False)
        else:
            output.write_text(result.output, encoding="utf-8")
            click.echo(f"Compiled {input_file} -> {output}")

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()

"""
CCL Command-Line Interface
==========================

- **cclc**: CCL to Java compiler

The tool is implemented as a Click-based CLI application with
consistent error reporting and exit codes.
"""

__all__ = ["cclc"]

"""
Command-line interface for Travelbook.

The ``travelbook`` command opens an interactive session over a data file;
the session itself lives in the ``repl`` package.
"""

from .main import cli, main

__all__ = ["cli", "main"]

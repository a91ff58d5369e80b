"""
Interactive session: command decoding, dispatch and console output.
"""

from .commands import Command, CommandName
from .interpreter import Interpreter
from .parser import CommandParser, tokenize
from .presenter import Presenter

__all__ = [
    "Command",
    "CommandName",
    "CommandParser",
    "Interpreter",
    "Presenter",
    "tokenize",
]

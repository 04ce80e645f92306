"""Command interpreter and in-memory list engine."""

from textbuddy.core.commands import Command, CommandType, parse_command
from textbuddy.core.engine import ListEngine, render_entries
from textbuddy.core.interpreter import CommandInterpreter, CommandResult

__all__ = [
    "Command",
    "CommandInterpreter",
    "CommandResult",
    "CommandType",
    "ListEngine",
    "parse_command",
    "render_entries",
]

"""Command interpreter: dispatches parsed commands to the list engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from textbuddy.core.commands import Command, CommandType, parse_command
from textbuddy.core.engine import ListEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    message: str
    exit_requested: bool = False


class CommandInterpreter:
    """Turns raw command lines into engine calls."""

    def __init__(self, engine: ListEngine) -> None:
        self.engine = engine

    def interpret(self, raw: str) -> str:
        """Execute one raw line and return its feedback string."""
        return self.execute(raw).message

    def execute(self, raw: str) -> CommandResult:
        """Execute one raw line. Exit is reported through ``exit_requested``."""
        command = parse_command(raw)
        logger.debug(
            "Dispatching %s (argument=%r)",
            command.kind.value,
            command.argument,
            extra={"command": command.kind.value},
        )
        if command.kind is CommandType.EXIT:
            return CommandResult(self.engine.exit(), exit_requested=True)
        return CommandResult(self._dispatch(command))

    def _dispatch(self, command: Command) -> str:
        engine = self.engine
        kind = command.kind
        if kind is CommandType.ADD:
            return engine.add(command.argument)
        if kind is CommandType.DISPLAY:
            return engine.display()
        if kind is CommandType.SORT:
            return engine.sort()
        if kind is CommandType.SEARCH:
            return engine.search(command.argument)
        if kind is CommandType.DELETE:
            return engine.delete(command.argument)
        if kind is CommandType.CLEAR:
            return engine.clear()
        return engine.invalid(command.raw)

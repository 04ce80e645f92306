"""Command loop: reads lines, shows feedback, stops on exit or end of input."""

from __future__ import annotations

import logging
from typing import Callable

from textbuddy.core.commands import CommandType
from textbuddy.core.interpreter import CommandInterpreter

logger = logging.getLogger(__name__)


class CommandLoop:
    """Drives one interactive session against a CommandInterpreter.

    ``read_line`` returns the next raw command, or None at end of input.
    ``show`` receives every feedback message except the (empty) exit one.
    """

    def __init__(
        self,
        interpreter: CommandInterpreter,
        read_line: Callable[[], str | None],
        show: Callable[[str], None],
    ) -> None:
        self.interpreter = interpreter
        self.read_line = read_line
        self.show = show

    def run(self) -> int:
        """Run until exit. Returns the number of commands processed."""
        processed = 0
        while True:
            raw = self.read_line()
            if raw is None:
                logger.info("End of input, saving and exiting")
                self.interpreter.execute(CommandType.EXIT.value)
                return processed

            result = self.interpreter.execute(raw)
            processed += 1
            if result.exit_requested:
                return processed
            self.show(result.message)

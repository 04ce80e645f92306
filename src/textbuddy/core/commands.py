"""Command parsing: raw input line to (kind, argument)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CommandType(str, Enum):
    ADD = "add"
    DISPLAY = "display"
    SORT = "sort"
    SEARCH = "search"
    DELETE = "delete"
    CLEAR = "clear"
    EXIT = "exit"
    INVALID = "invalid"

    @classmethod
    def from_keyword(cls, keyword: str) -> CommandType:
        """Case-insensitive exact match on a keyword. Unknown words are INVALID."""
        lowered = keyword.lower()
        for kind in cls:
            if kind is not cls.INVALID and kind.value == lowered:
                return kind
        return cls.INVALID


@dataclass(frozen=True)
class Command:
    kind: CommandType
    argument: str = ""
    raw: str = ""


def parse_command(raw: str) -> Command:
    """Split a raw line on its first whitespace run.

    The first token selects the command kind; everything after it, trimmed,
    is the argument. Slicing keeps arguments that repeat the keyword intact
    (``add add more`` adds ``add more``).
    """
    parts = raw.strip().split(None, 1)
    if not parts:
        return Command(CommandType.INVALID, "", raw)

    kind = CommandType.from_keyword(parts[0])
    argument = parts[1].strip() if len(parts) > 1 else ""
    return Command(kind, argument, raw)

"""List engine: the ordered in-memory entries of one TextBuddy session."""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Callable

logger = logging.getLogger(__name__)

MESSAGE_ADDED = 'added to {target}: "{text}"'
MESSAGE_ADD_EMPTY = "Cannot add empty message"
MESSAGE_SEARCH_EMPTY = "Cannot search for an empty keyword"
MESSAGE_NO_SEARCH_RESULT = 'No item contains "{keyword}"'
MESSAGE_DELETED = 'deleted from {target}: "{text}"'
MESSAGE_DELETE_EMPTY = "Cannot delete without a line number"
MESSAGE_DELETE_NOT_EXIST = "this line does not exist"
MESSAGE_CLEARED = "all content deleted from {target}"
MESSAGE_EMPTY = "{target} is empty"
MESSAGE_INVALID_FORMAT = "invalid command format: {command}"

_NUMBER_RE = re.compile(r"^[+-]?\d+(\.\d+)?$")


def render_entries(entries: list[str]) -> str:
    """Number entries from 1, one per line, no trailing newline."""
    return "\n".join(f"{i}. {entry}" for i, entry in enumerate(entries, start=1))


def is_numeric(text: str) -> bool:
    """True for an optionally signed integer or decimal (``-3``, ``+2``, ``1.5``)."""
    return bool(_NUMBER_RE.match(text))


def _line_number(text: str) -> int | None:
    """Parse a 1-based line number, or None when the text names no line."""
    if not is_numeric(text):
        return None
    value = Decimal(text)
    if value != value.to_integral_value():
        return None
    return int(value)


class ListEngine:
    """Owns the content list and applies every list operation.

    Operations never raise on bad user input; each returns the feedback
    string shown to the user.
    """

    def __init__(self, target: str, writer: Callable[[str], None] | None = None) -> None:
        self.target = target
        self._writer = writer
        self._entries: list[str] = []
        self._closed = False

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def closed(self) -> bool:
        """True once exit() has handed the content to the writer."""
        return self._closed

    def __len__(self) -> int:
        return len(self._entries)

    def _empty_message(self) -> str:
        return MESSAGE_EMPTY.format(target=self.target)

    def add(self, text: str) -> str:
        text = text.strip()
        if not text:
            return MESSAGE_ADD_EMPTY
        self._entries.append(text)
        logger.debug("Added entry %d to %s", len(self._entries), self.target)
        return MESSAGE_ADDED.format(target=self.target, text=text)

    def display(self) -> str:
        if not self._entries:
            return self._empty_message()
        return render_entries(self._entries)

    def sort(self) -> str:
        """Sort in place, case-insensitively. Entries equal ignoring case keep their order."""
        if not self._entries:
            return self._empty_message()
        self._entries.sort(key=str.lower)
        return render_entries(self._entries)

    def search(self, keyword: str) -> str:
        keyword = keyword.strip()
        if not keyword:
            return MESSAGE_SEARCH_EMPTY
        needle = keyword.casefold()
        matches = [entry for entry in self._entries if needle in entry.casefold()]
        logger.debug("Search %r matched %d of %d entries", keyword, len(matches), len(self._entries))
        if not matches:
            return MESSAGE_NO_SEARCH_RESULT.format(keyword=keyword)
        return render_entries(matches)

    def delete(self, index_text: str) -> str:
        index_text = index_text.strip()
        if not index_text:
            return MESSAGE_DELETE_EMPTY
        number = _line_number(index_text)
        if number is None or not 1 <= number <= len(self._entries):
            return MESSAGE_DELETE_NOT_EXIST
        removed = self._entries.pop(number - 1)
        logger.debug("Deleted line %d from %s", number, self.target)
        return MESSAGE_DELETED.format(target=self.target, text=removed)

    def clear(self) -> str:
        self._entries.clear()
        return MESSAGE_CLEARED.format(target=self.target)

    def exit(self) -> str:
        """Hand the rendered content to the writer. Returns no feedback.

        The writer is called exactly once per session, with ``""`` when the
        list is empty. Later calls are no-ops.
        """
        if self._closed:
            return ""
        text = render_entries(self._entries) if self._entries else ""
        self._closed = True
        if self._writer is not None:
            self._writer(text)
        logger.info("Saved %d entries to %s", len(self._entries), self.target)
        return ""

    def invalid(self, command: str) -> str:
        return MESSAGE_INVALID_FORMAT.format(command=command)

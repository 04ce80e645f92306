"""Target file handling: name validation, create/overwrite, final write."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class TargetFileError(Exception):
    """The target file name is unusable or the file cannot be written."""


def validate_filename(name: str, allowed_extensions: list[str] | None = None) -> str:
    """Return ``name`` if it ends with an allowed extension.

    The name must be longer than the extension itself, so ``.txt`` alone is
    rejected. Matching ignores case.
    """
    extensions = allowed_extensions or [".txt"]
    lowered = name.lower()
    for ext in extensions:
        if len(name) > len(ext) and lowered.endswith(ext.lower()):
            return name
    raise TargetFileError(f"Argument must end with {' or '.join(extensions)}")


class TargetFile:
    """The file a session persists to. Written once, at exit."""

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def create(self) -> None:
        """Create the file, or truncate it when it already exists."""
        try:
            self.path.write_text("", encoding=self.encoding)
        except (OSError, UnicodeError, LookupError) as e:
            raise TargetFileError(f"Cannot create {self.path}: {e}") from e
        logger.info("Target file ready: %s", self.path)

    def write(self, text: str) -> None:
        """Overwrite the file with the final content."""
        try:
            self.path.write_text(text, encoding=self.encoding)
        except (OSError, UnicodeError, LookupError) as e:
            raise TargetFileError(f"Cannot write {self.path}: {e}") from e
        logger.info("Wrote %d characters to %s", len(text), self.path)

"""Configuration loader for TextBuddy."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from textbuddy.config.schema import TextBuddyConfig


def _describe(error: ValidationError) -> str:
    """One ``section.field: reason`` fragment per validation problem."""
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    )


def load_config(path: Path | str | None = None) -> TextBuddyConfig:
    """Load session and logging settings from a YAML file.

    A missing path or file, an empty document, or a top level that is not a
    mapping all give the defaults. Unparseable YAML and settings that fail
    validation raise ValueError naming the file.
    """
    if path is None:
        return TextBuddyConfig()

    path = Path(path).expanduser().resolve()
    if not path.is_file():
        return TextBuddyConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Malformed YAML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ValueError(f"Config file {path} is not UTF-8: {e}") from e

    if not isinstance(data, dict):
        return TextBuddyConfig()

    try:
        return TextBuddyConfig(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid TextBuddy config in {path}: {_describe(e)}") from e

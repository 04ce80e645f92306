"""Shared test fixtures."""

import logging
from pathlib import Path

import pytest

from textbuddy.core.engine import ListEngine
from textbuddy.core.interpreter import CommandInterpreter

SAMPLE_LINES = ["first line", "second line", "third line", "forth line", "WOW OMG"]


@pytest.fixture
def written() -> list[str]:
    """Collects every text handed to the engine's writer."""
    return []


@pytest.fixture
def engine(written: list[str]) -> ListEngine:
    return ListEngine("sample.txt", writer=written.append)


@pytest.fixture
def interpreter(engine: ListEngine) -> CommandInterpreter:
    return CommandInterpreter(engine)


@pytest.fixture
def filled(interpreter: CommandInterpreter) -> CommandInterpreter:
    """Interpreter whose list holds the five sample lines."""
    for line in SAMPLE_LINES:
        interpreter.interpret(f"add {line}")
    return interpreter


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Create a minimal valid config YAML file."""
    config = tmp_path / "textbuddy.yaml"
    config.write_text(
        """\
session:
  prompt: "> "
  show_welcome: false
logging:
  level: "debug"
"""
    )
    return config


@pytest.fixture
def empty_config_yaml(tmp_path: Path) -> Path:
    """Create an empty config YAML file."""
    config = tmp_path / "textbuddy.yaml"
    config.write_text("{}\n")
    return config


@pytest.fixture(autouse=True)
def reset_textbuddy_logger():
    """CLI runs attach a handler to a stream CliRunner closes afterwards."""
    yield
    logger = logging.getLogger("textbuddy")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)

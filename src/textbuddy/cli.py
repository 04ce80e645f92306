"""TextBuddy CLI entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable

import click

from textbuddy import __version__

logger = logging.getLogger(__name__)

MESSAGE_WELCOME = "Welcome to TextBuddy. {target} is ready for use"


def _line_reader(prompt: str) -> Callable[[], str | None]:
    """Prompt on stdout, then read one line from stdin. None at end of input.

    Bytes that do not decode are replaced, so a bad line never ends the session.
    """
    stdin = sys.stdin
    buffer = getattr(stdin, "buffer", None)
    encoding = getattr(stdin, "encoding", None) or "utf-8"

    def read_line() -> str | None:
        click.echo(prompt, nl=False)
        if buffer is not None:
            line = buffer.readline().decode(encoding, errors="replace")
        else:
            line = stdin.readline()
        if not line:
            click.echo()
            return None
        return line.rstrip("\r\n")

    return read_line


@click.command()
@click.version_option(version=__version__)
@click.argument("filename")
@click.option("--config", "-c", type=click.Path(), default=None, help="Config file path")
@click.option("--log-level", default=None, help="Log level (overrides config)")
@click.option("--json-logs", is_flag=True, help="JSON log output")
def main(
    filename: str,
    config: str | None,
    log_level: str | None,
    json_logs: bool,
) -> None:
    """TextBuddy - edit a list of text lines in FILENAME.

    Commands: add <text>, display, sort, search <keyword>,
    delete <line number>, clear, exit.
    """
    from textbuddy.config.loader import load_config
    from textbuddy.core.engine import ListEngine
    from textbuddy.core.interpreter import CommandInterpreter
    from textbuddy.logging_config import setup_logging
    from textbuddy.session import CommandLoop
    from textbuddy.storage import TargetFile, TargetFileError, validate_filename

    try:
        cfg = load_config(config)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(
        level=log_level or cfg.logging.level,
        json_output=json_logs or cfg.logging.json_output,
    )

    try:
        validate_filename(filename, cfg.session.allowed_extensions)
        target = TargetFile(Path(filename), encoding=cfg.session.encoding)
        target.create()
    except TargetFileError as e:
        logger.error("Startup failed: %s", e)
        raise click.ClickException(str(e)) from e

    engine = ListEngine(filename, writer=target.write)
    loop = CommandLoop(
        CommandInterpreter(engine),
        read_line=_line_reader(cfg.session.prompt),
        show=click.echo,
    )

    if cfg.session.show_welcome:
        click.echo(MESSAGE_WELCOME.format(target=filename))

    try:
        processed = loop.run()
    except TargetFileError as e:
        logger.error("Save failed: %s", e)
        raise click.ClickException(str(e)) from e

    logger.info("Session ended after %d commands", processed)

"""CLI entry point for textify. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import os
import sys

import click

from textify.config import TextifyConfig
from textify.convert import html_to_text


def _terminal_columns() -> int | None:
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (ValueError, OSError):
        return None


@click.command()
@click.argument("path", required=False, default="-", type=click.File("rb"))
@click.option("--width", "-w", type=int, default=None, help="Wrap width for layout tables")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Logging verbosity",
)
@click.option("--encoding", default=None, help="Charset of the input (detected if omitted)")
def main(path, width, log_level, encoding):
    """Render an HTML file (or stdin) as plain terminal text."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = TextifyConfig.from_env()
    if width is None and sys.stdout.isatty():
        width = _terminal_columns()

    text = html_to_text(path.read(), width=width, config=config, encoding=encoding)
    if text is None:
        click.echo("No text content extracted", err=True)
        sys.exit(1)
    click.echo(text, nl=not text.endswith("\n"))


if __name__ == "__main__":
    main()

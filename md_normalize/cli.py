"""
Normalizes the layout of a Markdown document.
Reads a file or stdin and writes the formatted document to a file or stdout.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .config import ConfigError, build_config
from .exceptions import NormalizeIOError
from .filesystem import get_max_file_size, read_input, write_output
from .formatter import format_markdown

__all__ = ["cli"]

PACKAGE_LOGGER = "md_normalize"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Route package debug logs to stderr when `verbose` is set."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if not verbose:
        logger.setLevel(logging.NOTSET)
        return

    handler = logging.StreamHandler(click.get_text_stream("stderr"))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


@click.command()
@click.version_option(package_name="md-normalize")
@click.argument(
    "input_path", required=False, type=click.Path(dir_okay=False, path_type=Path)
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-i",
    "--indent",
    type=click.IntRange(min=0),
    help="Number of spaces for indentation",
)
@click.option("-v", "--verbose", is_flag=True, help="Log line classification to stderr")
def cli(
    input_path: Path | None = None,
    output_path: Path | None = None,
    indent: int | None = None,
    verbose: bool = False,
):
    """
    Format Markdown with consistent empty lines and spacing.

    Args:
        input_path: Markdown file to format; stdin when omitted.
        output_path: Destination file; stdout when omitted.
        indent: Override for the configured indentation width.
        verbose: Whether to log each classified line.

    Returns:
        None.

    Raises:
        click.BadParameter: If the configuration or overrides are invalid.
        click.ClickException: If the input cannot be read or the output cannot
            be written. Nothing is written in that case.

    Examples:
        md-normalize README.md -o README.md
        cat notes.md | md-normalize
    """
    configure_logging(verbose)

    search_path = input_path.parent if input_path is not None else Path.cwd()
    try:
        config = build_config(search_path, indent=indent)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        content = read_input(input_path, max_file_size)
    except NormalizeIOError as error:
        raise click.ClickException(str(error)) from error

    formatted = format_markdown(content)

    try:
        write_output(formatted, output_path)
    except NormalizeIOError as error:
        raise click.ClickException(str(error)) from error


if __name__ == "__main__":
    cli()

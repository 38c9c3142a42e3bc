"""Whole-document Markdown normalization pipeline."""

from __future__ import annotations

from .blocks import format_lines
from .lists import renumber_lists
from .tables import format_tables


def split_lines(text: str) -> list[str]:
    """Split a document into lines ready for classification.

    Trailing whitespace is stripped from every line, and blank lines at the
    start and end of the document are dropped. Indentation is preserved.

    Args:
        text: Document text with ``\\n`` line endings.

    Returns:
        list[str]: Trimmed lines; empty for a blank document.

    Examples:
        split_lines("\\n\\n# Title  \\ntext\\n\\n")  # ["# Title", "text"]
    """
    lines = [line.rstrip() for line in text.split("\n")]

    start = 0
    end = len(lines)
    while start < end and not lines[start]:
        start += 1
    while end > start and not lines[end - 1]:
        end -= 1

    return lines[start:end]


def format_markdown(text: str) -> str:
    """Normalize the layout of a Markdown document.

    Runs the block formatter and the list renumberer over the document's
    lines, aligns tables on the joined text, and terminates the result with a
    single newline.

    Args:
        text: Document text with ``\\n`` line endings.

    Returns:
        str: Normalized document, always ending with exactly one ``\\n``.

    Examples:
        format_markdown("* a\\n+ b")  # "- a\\n- b\\n"
        format_markdown("")  # "\\n"
    """
    lines = format_lines(split_lines(text))
    lines = renumber_lists(lines)

    document = format_tables("\n".join(lines) + "\n")

    return document.rstrip("\n") + "\n"

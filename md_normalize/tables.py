"""Column alignment for pipe-delimited Markdown tables."""

from __future__ import annotations

import unicodedata
from enum import Enum, auto

from .constants import CODE_FENCE, MIN_TABLE_COLUMN_WIDTH, TABLE_DELIMITER_CELL_PATTERN


class Alignment(Enum):
    """Column alignment declared by a table's delimiter row."""

    NONE = auto()
    LEFT = auto()
    RIGHT = auto()
    CENTER = auto()


def is_escaped(text: str, pos: int) -> bool:
    """Determine whether a character is escaped by preceding backslashes.

    Counts consecutive backslashes immediately before `pos`; an odd count marks
    the character as escaped.

    Examples:
        is_escaped("\\\\|", 2)  # False, two backslashes
        is_escaped("\\|", 1)  # True, one backslash
    """
    backslash_count = 0
    i = pos - 1
    while i >= 0 and text[i] == "\\":
        backslash_count += 1
        i -= 1
    return backslash_count % 2 == 1


def display_width(text: str) -> int:
    """Return the number of terminal columns `text` occupies.

    Wide and fullwidth East Asian characters take two columns, combining marks
    take none.

    Examples:
        display_width("abc")  # 3
        display_width("你好")  # 4
    """
    width = 0
    for character in text:
        if unicodedata.combining(character):
            continue
        width += 2 if unicodedata.east_asian_width(character) in ("W", "F") else 1
    return width


def split_row(line: str) -> list[str]:
    """Split a table row into stripped cell texts.

    Leading and trailing pipes are optional. Escaped pipes (``\\|``) stay inside
    their cell.

    Examples:
        split_row("| a | b |")  # ["a", "b"]
        split_row("|a \\| b|c")  # ["a \\| b", "c"]
    """
    row = line.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|") and not is_escaped(row, len(row) - 1):
        row = row[:-1]

    cells = []
    start = 0
    for pos, character in enumerate(row):
        if character == "|" and not is_escaped(row, pos):
            cells.append(row[start:pos].strip())
            start = pos + 1
    cells.append(row[start:].strip())
    return cells


def parse_alignment(cell: str) -> Alignment | None:
    """Return the alignment of a delimiter cell, or None if it is not one.

    Examples:
        parse_alignment(":---:")  # Alignment.CENTER
        parse_alignment("text")  # None
    """
    if not TABLE_DELIMITER_CELL_PATTERN.match(cell):
        return None
    if cell.startswith(":") and cell.endswith(":") and len(cell) > 1:
        return Alignment.CENTER
    if cell.startswith(":"):
        return Alignment.LEFT
    if cell.endswith(":"):
        return Alignment.RIGHT
    return Alignment.NONE


def _parse_delimiter_row(line: str) -> list[Alignment] | None:
    alignments = []
    for cell in split_row(line):
        alignment = parse_alignment(cell)
        if alignment is None:
            return None
        alignments.append(alignment)
    return alignments


def _pad(text: str, width: int, alignment: Alignment) -> str:
    padding = width - display_width(text)
    if alignment is Alignment.RIGHT:
        return " " * padding + text
    if alignment is Alignment.CENTER:
        left = padding // 2
        return " " * left + text + " " * (padding - left)
    return text + " " * padding


def _render_delimiter(width: int, alignment: Alignment) -> str:
    if alignment is Alignment.CENTER:
        return ":" + "-" * (width - 2) + ":"
    if alignment is Alignment.LEFT:
        return ":" + "-" * (width - 1)
    if alignment is Alignment.RIGHT:
        return "-" * (width - 1) + ":"
    return "-" * width


def _render_row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def align_table(rows: list[str]) -> list[str] | None:
    """Column-align one table block.

    The second row must be a delimiter row; otherwise the block is not a table
    and None is returned.

    Args:
        rows: Consecutive lines starting with ``|``.

    Returns:
        list[str] | None: Aligned rows, or None when `rows` is not a table.

    Examples:
        align_table(["|a|b|", "|---|---|", "|1|2|"])
        # ["| a   | b   |", "| --- | --- |", "| 1   | 2   |"]
    """
    if len(rows) < 2:
        return None

    alignments = _parse_delimiter_row(rows[1])
    if alignments is None:
        return None

    body = [split_row(row) for index, row in enumerate(rows) if index != 1]
    column_count = max(len(alignments), *(len(cells) for cells in body))
    alignments += [Alignment.NONE] * (column_count - len(alignments))
    body = [cells + [""] * (column_count - len(cells)) for cells in body]

    widths = [
        max(MIN_TABLE_COLUMN_WIDTH, *(display_width(cells[column]) for cells in body))
        for column in range(column_count)
    ]

    rendered = [
        _render_row(
            [_pad(cell, width, alignment) for cell, width, alignment in zip(cells, widths, alignments)]
        )
        for cells in body
    ]
    delimiter = _render_row(
        [_render_delimiter(width, alignment) for width, alignment in zip(widths, alignments)]
    )
    rendered.insert(1, delimiter)
    return rendered


def format_tables(text: str) -> str:
    """Column-align every pipe table in a document.

    A table block is a maximal run of lines starting with ``|`` outside fenced
    code. Blocks whose second line is not a delimiter row are left untouched.

    Args:
        text: Full document text.

    Returns:
        str: Document with table blocks aligned; everything else unchanged.

    Examples:
        format_tables("|a|b|\\n|---|---|\\n| column 1 | column 2    |\\n")
    """
    lines = text.split("\n")
    result: list[str] = []
    block: list[str] = []
    in_code = False

    def flush() -> None:
        aligned = align_table(block)
        result.extend(block if aligned is None else aligned)
        block.clear()

    for line in lines:
        if not in_code and line.startswith("|"):
            block.append(line)
            continue

        if block:
            flush()
        if line.startswith(CODE_FENCE):
            in_code = not in_code
        result.append(line)

    if block:
        flush()

    return "\n".join(result)

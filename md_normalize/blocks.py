"""Line classification and block-level blank-line formatting."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .constants import CODE_FENCE, INITIAL_LINE_STATE, LIST_ITEM_PATTERN
from .models import Line, LineState
from .spacing import format_text

logger = logging.getLogger(__name__)

# Previous states that require a separating blank line before the current one
_BLANK_BEFORE_NORMAL = (LineState.TABLE, LineState.CODE_END, LineState.BLOCKQUOTE)
_NO_BLANK_BEFORE_BLOCKQUOTE = (LineState.EMPTY, LineState.BLOCKQUOTE)
_NO_BLANK_BEFORE_TABLE = (LineState.EMPTY, LineState.TABLE)
_NO_BLANK_BEFORE_LIST = (LineState.EMPTY, LineState.LIST)


def classify_line(line: str, prev_state: LineState) -> LineState:
    """Classify a line from its leading characters and the previous state.

    Rules are checked in order and the first match wins: code continuation,
    blank line, list item, opening fence, heading, blockquote, table row, and
    finally normal text.

    Args:
        line: Line content with trailing whitespace removed.
        prev_state: Effective state of the previous line.

    Returns:
        LineState: State of `line`.

    Examples:
        classify_line("# Title", LineState.EMPTY)  # LineState.TITLE
        classify_line("# not a title", LineState.CODE)  # LineState.CODE
    """
    if prev_state in (LineState.CODE_START, LineState.CODE):
        if line.startswith(CODE_FENCE):
            return LineState.CODE_END
        return LineState.CODE

    if not line:
        return LineState.EMPTY
    if LIST_ITEM_PATTERN.match(line):
        return LineState.LIST
    if line.startswith(CODE_FENCE):
        return LineState.CODE_START
    if line.startswith("#"):
        return LineState.TITLE
    if line.startswith(">"):
        return LineState.BLOCKQUOTE
    if line.startswith("|"):
        return LineState.TABLE
    return LineState.NORMAL


def classify_lines(lines: Iterable[str]) -> Iterator[tuple[LineState, Line]]:
    """Walk lines in order, pairing each classified line with its predecessor's state.

    The first line is classified against `INITIAL_LINE_STATE`. A heading is
    always followed by a blank line, so the state carried past a heading is
    `LineState.EMPTY`. Lines outside fenced code are run through the inline
    spacer and classified on the spaced text, which is what gets emitted.

    Args:
        lines: Trailing-whitespace-trimmed lines.

    Yields:
        tuple[LineState, Line]: The effective previous state and the current
            line with its final text and state.

    Examples:
        list(classify_lines(["# A", "text"]))
    """
    prev_state = INITIAL_LINE_STATE
    for raw_line in lines:
        state = classify_line(raw_line, prev_state)
        text = raw_line
        if not state.verbatim and state is not LineState.EMPTY:
            text = format_text(raw_line)
            # Spacing can turn "-`x`" into the list item "- `x`"
            state = classify_line(text, prev_state)

        logger.debug("%s: %s", state.name, text)
        yield prev_state, Line(text=text, state=state)

        prev_state = LineState.EMPTY if state is LineState.TITLE else state


def _needs_blank_before(state: LineState, prev_state: LineState) -> bool:
    if state is LineState.NORMAL:
        return prev_state in _BLANK_BEFORE_NORMAL
    if state is LineState.CODE_START:
        return prev_state is not LineState.EMPTY
    if state is LineState.BLOCKQUOTE:
        return prev_state not in _NO_BLANK_BEFORE_BLOCKQUOTE
    if state is LineState.TABLE:
        return prev_state not in _NO_BLANK_BEFORE_TABLE
    if state is LineState.EMPTY:
        return prev_state is not LineState.EMPTY
    if state is LineState.TITLE:
        return prev_state is not LineState.EMPTY
    if state is LineState.LIST:
        return prev_state not in _NO_BLANK_BEFORE_LIST
    # Code body and closing fence
    return False


def format_lines(lines: Iterable[str]) -> list[str]:
    """Insert or suppress blank lines around block elements.

    Runs of blank lines collapse to one; code fences, tables, blockquotes and
    lists are separated from neighbouring blocks; every heading is followed by
    a blank line. Fenced code is copied verbatim.

    Args:
        lines: Trailing-whitespace-trimmed lines, without leading or trailing
            blank lines.

    Returns:
        list[str]: Output lines; inserted blank lines are empty strings.

    Examples:
        format_lines(["text", "```", "code", "```", "more"])
        # ["text", "", "```", "code", "```", "", "more"]
    """
    result: list[str] = []

    for prev_state, line in classify_lines(lines):
        if _needs_blank_before(line.state, prev_state):
            result.append("")

        if line.state is LineState.EMPTY:
            continue

        result.append(line.text)

        if line.state is LineState.TITLE:
            result.append("")

    return result

"""Data models for md-normalize."""

from dataclasses import dataclass
from enum import Enum, auto


class LineState(Enum):
    """Classification assigned to each line while formatting.

    A line's state depends only on its own leading characters and the state
    of the previous line.

    Attributes:
        NORMAL: Paragraph text.
        TABLE: Pipe-delimited table row.
        CODE_START: Opening fence of a code block.
        CODE_END: Closing fence of a code block.
        CODE: Line inside a fenced code block.
        EMPTY: Blank line.
        TITLE: ATX heading.
        LIST: Ordered or unordered list item.
        BLOCKQUOTE: Blockquote line.
    """

    NORMAL = auto()
    TABLE = auto()
    CODE_START = auto()
    CODE_END = auto()
    CODE = auto()
    EMPTY = auto()
    TITLE = auto()
    LIST = auto()
    BLOCKQUOTE = auto()

    @property
    def verbatim(self) -> bool:
        """Whether lines in this state are emitted without inline spacing."""
        return self in (LineState.CODE_START, LineState.CODE, LineState.CODE_END)


class ListKind(Enum):
    """Marker family of a list item."""

    UNORDERED = auto()
    ORDERED = auto()


@dataclass
class ListContext:
    """One open nesting level while renumbering lists.

    Attributes:
        kind: Marker family of the level.
        indent: Source indentation width recorded when the level was opened.
        counter: Current item number; only meaningful for ordered levels.
    """

    kind: ListKind
    indent: int
    counter: int = 1


@dataclass(frozen=True)
class Line:
    """A single trailing-whitespace-trimmed line and its classification.

    Attributes:
        text: Line content, without the line ending.
        state: Classification of the line.
    """

    text: str
    state: LineState

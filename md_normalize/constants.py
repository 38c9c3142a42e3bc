"""Constants used across the md-normalize package."""

from __future__ import annotations

import re

from .models import LineState

# Markdown patterns
CODE_FENCE = "```"

# 1: indentation, 2: unordered marker, 3: ordered number, 4: item content
LIST_ITEM_PATTERN = re.compile(
    r"^(?P<indent>\s*)(?:(?P<bullet>[*+-])|(?P<number>\d+)\.)\s+(?P<content>.*)"
)

# Han script (CJK unified ideographs, extensions, radicals, compatibility forms)
HAN_CHARACTERS = (
    "\u2e80-\u2e99\u2e9b-\u2ef3\u2f00-\u2fd5"
    "\u3005\u3007\u3021-\u3029\u3038-\u303b"
    "\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufa6d\ufa70-\ufad9"
    "\U00016fe2\U00016fe3\U00016ff0\U00016ff1"
    "\U00020000-\U0002a6df\U0002a700-\U0002ebef\U0002f800-\U0002fa1f"
    "\U00030000-\U0003134f\U00031350-\U000323af"
)
CJK_ASCII_PATTERN = re.compile(
    rf"([{HAN_CHARACTERS}])([a-zA-Z0-9])|([a-zA-Z0-9])([{HAN_CHARACTERS}])"
)
CODE_SPAN_PATTERN = re.compile(r"([^`\s]?)(`[^`]*`)([^`\s]?)")

TABLE_DELIMITER_CELL_PATTERN = re.compile(r"^:?-+:?$")

# Formatting
INITIAL_LINE_STATE = LineState.EMPTY
LIST_INDENT_STEP = 2
MIN_TABLE_COLUMN_WIDTH = 3

# Limits and configuration defaults
DEFAULT_INDENT = 4
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024

"""Inline spacing between CJK text, ASCII tokens, and inline code spans."""

from __future__ import annotations

import re

from .constants import CJK_ASCII_PATTERN, CODE_SPAN_PATTERN


def _join_present_groups(match: re.Match[str]) -> str:
    return " ".join(group for group in match.groups() if group)


def add_spaces_between_cjk_ascii(text: str) -> str:
    """Insert a space wherever a Han character touches a Latin letter or digit.

    Performs a single left-to-right pass. A character consumed by one match is
    not examined again, so ``"a中b"`` only gains its first space; run the pass
    twice to reach a fixed point.

    Examples:
        add_spaces_between_cjk_ascii("123你好")  # "123 你好"
    """
    return CJK_ASCII_PATTERN.sub(_join_present_groups, text)


def add_space_around_code_spans(text: str) -> str:
    """Separate inline code spans from adjacent non-whitespace characters.

    Backticks and whitespace never count as neighbors, so spans already bounded
    by whitespace or the edges of the text are left untouched. Performs a single
    pass.

    Examples:
        add_space_around_code_spans("call`f()`now")  # "call `f()` now"
    """
    return CODE_SPAN_PATTERN.sub(_join_present_groups, text)


def format_text(text: str) -> str:
    """Apply both inline spacing transforms until they are stable.

    Each transform runs twice: the second pass picks up boundaries whose
    characters were consumed by an adjacent match in the first.

    Args:
        text: A single non-verbatim line.

    Returns:
        str: The line with CJK/ASCII and code-span boundaries spaced.

    Examples:
        format_text("123你好2谢谢")  # "123 你好 2 谢谢"
        format_text("`a`b`c`")  # "`a` b `c`"
    """
    text = add_spaces_between_cjk_ascii(text)
    text = add_spaces_between_cjk_ascii(text)

    text = add_space_around_code_spans(text)
    text = add_space_around_code_spans(text)
    return text

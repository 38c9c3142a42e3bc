"""List marker canonicalization and renumbering."""

from __future__ import annotations

from collections.abc import Iterable

from .constants import LIST_INDENT_STEP, LIST_ITEM_PATTERN
from .models import ListContext, ListKind


def parse_list_item(line: str) -> tuple[int, ListKind, str] | None:
    """Split a list-item line into indentation width, marker kind, and content.

    Args:
        line: Line to inspect.

    Returns:
        tuple[int, ListKind, str] | None: Indentation width in characters, the
            marker family, and the item content; None when `line` is not a
            list item.

    Examples:
        parse_list_item("  3. third")  # (2, ListKind.ORDERED, "third")
        parse_list_item("plain text")  # None
    """
    match = LIST_ITEM_PATTERN.match(line)
    if match is None:
        return None

    kind = ListKind.UNORDERED if match.group("bullet") else ListKind.ORDERED
    return len(match.group("indent")), kind, match.group("content")


def _render_item(stack: list[ListContext], content: str) -> str:
    current = stack[-1]
    indent = " " * (LIST_INDENT_STEP * (len(stack) - 1))
    if current.kind is ListKind.UNORDERED:
        return f"{indent}- {content}"
    return f"{indent}{current.counter}. {content}"


def renumber_lists(lines: Iterable[str]) -> list[str]:
    """Rewrite list items with canonical markers, numbering, and indentation.

    Nesting is tracked with a stack of open levels keyed by source
    indentation. Ordered levels are numbered sequentially from 1 regardless of
    the numbers in the source, unordered markers become ``-``, and each level
    is indented by `LIST_INDENT_STEP` spaces. A different marker kind at the
    same level starts a new list, and any non-list line closes every open
    level.

    Args:
        lines: Block-formatted lines.

    Returns:
        list[str]: Lines with list items rewritten; other lines unchanged.

    Examples:
        renumber_lists(["1. a", "3. b", "2. c"])  # ["1. a", "2. b", "3. c"]
        renumber_lists(["* a", "    + b"])  # ["- a", "  - b"]
    """
    result: list[str] = []
    stack: list[ListContext] = []

    for line in lines:
        item = parse_list_item(line)
        if item is None:
            stack.clear()
            result.append(line)
            continue

        indent, kind, content = item

        while stack and indent < stack[-1].indent:
            stack.pop()

        if not stack or indent > stack[-1].indent:
            # The outermost level is always anchored at column 0
            stack.append(ListContext(kind=kind, indent=indent if stack else 0))
        elif stack[-1].kind is not kind:
            stack[-1] = ListContext(kind=kind, indent=indent)
        elif kind is ListKind.ORDERED:
            stack[-1].counter += 1

        result.append(_render_item(stack, content))

    return result

from __future__ import annotations

import pytest

from md_normalize.spacing import (
    add_space_around_code_spans,
    add_spaces_between_cjk_ascii,
    format_text,
)


def test_cjk_ascii_spacing_in_both_directions():
    assert format_text("123你好2谢谢") == "123 你好 2 谢谢"


def test_single_cjk_pass_leaves_overlapping_boundary():
    assert add_spaces_between_cjk_ascii("a中b") == "a 中b"
    assert add_spaces_between_cjk_ascii("a 中b") == "a 中 b"


def test_cjk_spacing_keeps_existing_whitespace():
    assert format_text("已有 space 的 text") == "已有 space 的 text"


@pytest.mark.parametrize("text", ["中文，English", "日本語です", "abc-def", "é中"])
def test_cjk_spacing_ignores_non_boundaries(text: str):
    assert add_spaces_between_cjk_ascii(text) == text


def test_code_span_spacing():
    assert format_text("`a`b`c`") == "`a` b `c`"


def test_single_code_span_pass_leaves_consumed_neighbour():
    assert add_space_around_code_spans("`a`/`b`/`c`") == "`a` /`b` /`c`"


def test_code_span_spacing_respects_existing_boundaries():
    text = "use `git status` to check"

    assert format_text(text) == text


def test_code_span_spacing_at_line_edges():
    assert format_text("`start`middle`end`") == "`start` middle `end`"


def test_code_span_paths_are_separated():
    text = "`start`ignored `by` your `.gitignore`/`.ignore`/`.rgignore` files`end`"

    assert format_text(text) == (
        "`start` ignored `by` your `.gitignore` / `.ignore` / `.rgignore` files `end`"
    )


def test_combined_spacing():
    assert format_text("123你好2谢谢hello`你好call function()`$text谢谢$谢谢") == (
        "123 你好 2 谢谢 hello `你好 call function()` $text 谢谢$谢谢"
    )


def test_format_text_is_stable():
    once = format_text("a中b中c`x`y`z`中1")

    assert format_text(once) == once

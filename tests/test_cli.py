from __future__ import annotations

import textwrap
from pathlib import Path

from md_normalize import __version__
from md_normalize.cli import cli, configure_logging


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_cli_formats_file_to_output(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = _write(
        tmp_path,
        "doc.md",
        """
        ## title
        text
        """,
    )
    target = tmp_path / "out.md"

    result = cli_runner.invoke(cli, [str(source), "-o", str(target)])

    assert result.exit_code == 0
    assert result.output == ""
    assert target.read_text(encoding="utf-8") == "## title\n\ntext\n"
    assert source.read_text(encoding="utf-8") == "## title\ntext\n"


def test_cli_formats_file_in_place(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = _write(tmp_path, "doc.md", "中文English\n")

    result = cli_runner.invoke(cli, [str(source), "--output", str(source)])

    assert result.exit_code == 0
    assert source.read_text(encoding="utf-8") == "中文 English\n"


def test_cli_prints_to_stdout(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = _write(
        tmp_path,
        "doc.md",
        """
        1. a
        1. b
        """,
    )

    result = cli_runner.invoke(cli, [str(source)])

    assert result.exit_code == 0
    assert result.output == "1. a\n2. b\n"


def test_cli_reads_stdin(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, [], input="# Title\ntext\n\n\n\nmore\n")

    assert result.exit_code == 0
    assert result.output == "# Title\n\ntext\n\nmore\n"


def test_cli_empty_stdin(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, [], input="")

    assert result.exit_code == 0
    assert result.output == "\n"


def test_cli_mixed_document(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = _write(
        tmp_path,
        "doc.md",
        """
        # Title
        Some text
        ```
        code
        ```
        > quote
        - item
        |a|b|
        |---|---|
        |1|2|
        """,
    )

    result = cli_runner.invoke(cli, [str(source)])

    assert result.exit_code == 0
    assert result.output == (
        "# Title\n"
        "\n"
        "Some text\n"
        "\n"
        "```\n"
        "code\n"
        "```\n"
        "\n"
        "> quote\n"
        "\n"
        "- item\n"
        "\n"
        "| a   | b   |\n"
        "| --- | --- |\n"
        "| 1   | 2   |\n"
    )


def test_cli_accepts_indent_option(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = _write(tmp_path, "doc.md", "1. level 1\n    1. level 2\n")

    result = cli_runner.invoke(cli, [str(source), "-i", "4"])

    assert result.exit_code == 0
    assert result.output == "1. level 1\n  1. level 2\n"


def test_cli_rejects_negative_indent(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = _write(tmp_path, "doc.md", "text\n")

    result = cli_runner.invoke(cli, [str(source), "--indent", "-1"])

    assert result.exit_code != 0


def test_cli_missing_input_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, [str(tmp_path / "missing.md")])

    assert result.exit_code != 0
    assert "Error accessing" in result.output


def test_cli_rejects_invalid_utf8(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "doc.md"
    source.write_bytes(b"\xff\xfe broken")
    target = tmp_path / "out.md"

    result = cli_runner.invoke(cli, [str(source), "-o", str(target)])

    assert result.exit_code != 0
    assert "Invalid UTF-8" in result.output
    assert not target.exists()


def test_cli_reports_write_errors(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = _write(tmp_path, "doc.md", "text\n")

    result = cli_runner.invoke(cli, [str(source), "-o", str(tmp_path / "missing" / "out.md")])

    assert result.exit_code != 0
    assert "Error writing" in result.output


def test_cli_rejects_large_files(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MD_NORMALIZE_MAX_FILE_SIZE", "10")
    source = _write(tmp_path, "doc.md", "x" * 50 + "\n")

    result = cli_runner.invoke(cli, [str(source)])

    assert result.exit_code != 0
    assert "exceeding the maximum allowed size" in result.output


def test_cli_rejects_invalid_size_environment(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MD_NORMALIZE_MAX_FILE_SIZE", "lots")
    source = _write(tmp_path, "doc.md", "text\n")

    result = cli_runner.invoke(cli, [str(source)])

    assert result.exit_code != 0
    assert "MD_NORMALIZE_MAX_FILE_SIZE" in result.output


def test_cli_reads_max_file_size_from_pyproject(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MD_NORMALIZE_MAX_FILE_SIZE", raising=False)
    _write_pyproject(
        tmp_path,
        """
        [tool.md-normalize]
        max_file_size = 8
        """,
    )
    source = _write(tmp_path, "doc.md", "a longer document\n")

    result = cli_runner.invoke(cli, [str(source)])

    assert result.exit_code != 0
    assert "exceeding the maximum allowed size" in result.output


def test_cli_rejects_invalid_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.md-normalize]
        indent = -2
        """,
    )
    source = _write(tmp_path, "doc.md", "text\n")

    result = cli_runner.invoke(cli, [str(source)])

    assert result.exit_code == 2
    assert "`indent` must be >= 0" in result.output


def test_cli_verbose_logs_line_states(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = _write(tmp_path, "doc.md", "# Title\n- item\n")

    try:
        result = cli_runner.invoke(cli, [str(source), "--verbose"])
    finally:
        configure_logging(False)

    assert result.exit_code == 0
    assert "TITLE: # Title" in result.output
    assert "LIST: - item" in result.output


def test_cli_version(cli_runner, monkeypatch):
    monkeypatch.setattr("importlib.metadata.version", lambda name: __version__)

    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output

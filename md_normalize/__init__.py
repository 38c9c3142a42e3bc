"""
md-normalize: consistent blank lines, list numbering and inline spacing for Markdown.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    md-normalize README.md -o README.md

Library Usage:
    from pathlib import Path
    from md_normalize import format_markdown

    content = Path("README.md").read_text()
    Path("README.md").write_text(format_markdown(content))
"""

from .blocks import classify_line, format_lines
from .exceptions import FileTooLargeError, InputError, NormalizeIOError, OutputError
from .formatter import format_markdown, split_lines
from .lists import renumber_lists
from .models import Line, LineState, ListContext, ListKind
from .spacing import format_text
from .tables import format_tables

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "format_markdown",
    "split_lines",
    "format_lines",
    "classify_line",
    "renumber_lists",
    "format_text",
    "format_tables",
    # Data models
    "Line",
    "LineState",
    "ListContext",
    "ListKind",
    # Exceptions
    "NormalizeIOError",
    "InputError",
    "OutputError",
    "FileTooLargeError",
    # Version
    "__version__",
]

"""Filesystem helpers for md-normalize."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import BinaryIO

import click

from .constants import DEFAULT_MAX_FILE_SIZE
from .exceptions import FileTooLargeError, InputError, OutputError

MAX_FILE_SIZE_ENV_VAR = "MD_NORMALIZE_MAX_FILE_SIZE"
STDIN_NAME = "<stdin>"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed input size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed input size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["MD_NORMALIZE_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    env_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Return stat information for an input file.

    Args:
        filepath: Path to the file.

    Returns:
        os.stat_result: File metadata.

    Raises:
        InputError: If the path is inaccessible or not a regular file.

    Examples:
        stat_result = collect_file_stat(Path("README.md"))
    """
    try:
        stat_result = os.stat(filepath)
    except OSError as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise InputError(error_message) from error

    if not stat.S_ISREG(stat_result.st_mode):
        error_message = f"{filepath} is not a regular file."
        raise InputError(error_message)

    return stat_result


def enforce_size(size: int, max_size: int, source: str):
    """Guard against inputs that exceed the configured maximum size.

    Args:
        size: Input size in bytes.
        max_size: Maximum allowed size in bytes.
        source: Display name of the input.

    Raises:
        FileTooLargeError: If `size` exceeds `max_size`.

    Examples:
        enforce_size(os.stat("README.md").st_size, 102400, "README.md")
    """
    if size > max_size:
        raise FileTooLargeError(source, size, max_size)


def safe_open(filepath: Path) -> BinaryIO:
    """Open a file for binary reading with consistent error handling.

    Args:
        filepath: Path to the file.

    Returns:
        BinaryIO: File handle opened for reading.

    Raises:
        InputError: If the path is missing, inaccessible, or not a file.

    Examples:
        with safe_open(Path("README.md")) as handle:
            data = handle.read()
    """
    try:
        return open(filepath, "rb")
    except (
        FileNotFoundError,
        PermissionError,
        IsADirectoryError,
        NotADirectoryError,
    ) as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise InputError(error_message) from error


def decode_document(data: bytes, source: str) -> str:
    """Decode UTF-8 input and normalize line endings to ``\\n``.

    Raises:
        InputError: If `data` is not valid UTF-8.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {source}: {error}"
        raise InputError(error_message) from error

    return text.replace("\r\n", "\n").replace("\r", "\n")


def read_input(filepath: Path | None, max_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Read the document to format from a file or standard input.

    Args:
        filepath: Path to the input file, or None to read standard input.
        max_size: Maximum allowed input size in bytes.

    Returns:
        str: Decoded document with ``\\n`` line endings.

    Raises:
        InputError: If the input cannot be accessed, is too large, or is not
            valid UTF-8.

    Examples:
        text = read_input(Path("README.md"))
        text = read_input(None)  # standard input
    """
    if filepath is None:
        data = click.get_binary_stream("stdin").read()
        enforce_size(len(data), max_size, STDIN_NAME)
        return decode_document(data, STDIN_NAME)

    stat_result = collect_file_stat(filepath)
    enforce_size(stat_result.st_size, max_size, str(filepath))

    try:
        with safe_open(filepath) as file:
            data = file.read()
    except InputError:
        raise
    except OSError as error:
        error_message = f"Error reading {filepath}: {error}"
        raise InputError(error_message) from error

    # The file may have grown since it was stat'ed
    enforce_size(len(data), max_size, str(filepath))
    return decode_document(data, str(filepath))


def _default_file_permissions() -> int:
    # Temporary files are created 0o600; new outputs should honour the umask
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_output(text: str, filepath: Path | None):
    """Write the formatted document to a file or standard output.

    Files are replaced atomically through a temporary file in the destination
    directory, so a failed write leaves any existing file untouched. The
    permissions of an existing destination are preserved.

    Args:
        text: Formatted document.
        filepath: Destination path, or None to write standard output.

    Raises:
        OutputError: If the destination cannot be written.

    Examples:
        write_output("# Title\\n", Path("README.md"))
    """
    if filepath is None:
        click.echo(text, nl=False)
        return

    try:
        permissions = stat.S_IMODE(os.stat(filepath).st_mode)
    except FileNotFoundError:
        permissions = _default_file_permissions()
    except OSError as error:
        error_message = f"Error writing {filepath}: {error}"
        raise OutputError(error_message) from error

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="UTF-8",
            newline="",
            delete=False,
            dir=filepath.parent,
            prefix=f".{filepath.name}.",
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(text)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())

        os.chmod(temp_path, permissions)
        os.replace(temp_path, filepath)
        temp_path = None
    except OSError as error:
        error_message = f"Error writing {filepath}: {error}"
        raise OutputError(error_message) from error
    finally:
        if temp_path is not None:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                pass

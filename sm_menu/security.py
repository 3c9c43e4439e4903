#!/usr/bin/env python3
"""
sm-menu Security Validators
Path containment, size limits and display sanitizing for user-supplied input
"""

import unicodedata
from pathlib import Path

from .exceptions import (
    ExecutionError,
    InvalidInputError,
    MissingFileError,
    PermissionDeniedError,
)

MAX_FILE_SIZE = 100 * 1024 * 1024  # 100MB

_KEEP_CONTROL = {"\n", "\t"}


def validate_file_path(path_str: str) -> Path:
    """
    Resolve a user-supplied path and make sure it stays inside the
    current working directory.

    Args:
        path_str: Path as typed by the user

    Returns:
        Canonical absolute path of an existing file inside the working directory

    Raises:
        InvalidInputError: empty path, a null byte or a '..' component
        PermissionDeniedError: the path (or its parent) lies outside the
            working directory, or containment cannot be decided
        MissingFileError: the path is inside the working directory but does not exist
    """
    if not path_str or not path_str.strip():
        raise InvalidInputError("Path cannot be empty")
    if "\x00" in path_str:
        raise InvalidInputError("Path contains a null byte")

    path = Path(path_str)
    if ".." in path.parts:
        raise InvalidInputError("Path traversal is not allowed")

    try:
        cwd = Path.cwd().resolve()
    except OSError as e:
        raise PermissionDeniedError(f"cannot determine working directory: {e}") from e

    candidate = path if path.is_absolute() else cwd / path

    try:
        resolved = candidate.resolve(strict=True)
    except FileNotFoundError as err:
        try:
            parent = candidate.parent.resolve()
        except (OSError, RuntimeError) as e:
            raise PermissionDeniedError(path_str) from e
        if not parent.is_relative_to(cwd):
            raise PermissionDeniedError(path_str) from err
        raise MissingFileError(f"{path_str}: {err.strerror or err}") from err
    except (OSError, RuntimeError) as e:
        # symlink loops and unreadable components
        raise PermissionDeniedError(path_str) from e
    except ValueError as e:
        raise InvalidInputError(f"Malformed path: {e}") from e

    if not resolved.is_relative_to(cwd):
        raise PermissionDeniedError(path_str)

    return resolved


def validate_file_size(size: int):
    """Reject files larger than MAX_FILE_SIZE bytes"""
    if size > MAX_FILE_SIZE:
        raise ExecutionError(f"File too large: {size} bytes (max {MAX_FILE_SIZE} bytes)")


def sanitize_for_display(text: str) -> str:
    """Strip control characters except newlines and tabs"""
    return "".join(
        ch for ch in text
        if ch in _KEEP_CONTROL or unicodedata.category(ch) != "Cc"
    )

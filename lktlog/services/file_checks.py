from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

"""Input file checks shared by the crawler and the RDF converter."""

__all__ = [
    "InputFileError",
    "check_input_file",
]


class InputFileError(Exception):
    """Raised when an input file is missing or of an unsupported type."""


def check_input_file(path: Path, supported_types: Iterable[str]) -> Path:
    """Ensure ``path`` is an existing file whose extension is supported.

    Args:
        path: Input file
        supported_types: Accepted extensions, case-insensitive, without dot

    Raises:
        InputFileError: Missing file, directory, or unsupported extension
    """
    if not path.exists():
        raise InputFileError(f"input file not found: {path}")
    if not path.is_file():
        raise InputFileError(f"input path is not a file: {path}")
    supported = {t.upper() for t in supported_types}
    file_type = path.suffix.lstrip(".").upper()
    if file_type not in supported:
        raise InputFileError(
            f"unsupported input file type '{file_type or '<none>'}', use one of {sorted(supported)}"
        )
    return path

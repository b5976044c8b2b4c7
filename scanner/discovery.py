"""File discovery utilities for scanning Go package directories."""

from pathlib import Path
from typing import List, Union

from .errors import SourceAccessError


SOURCE_SUFFIX = ".go"
TEST_SUFFIX = "_test.go"


def is_source_file(name: str) -> bool:
    """Check if a file name is a non-test Go source file."""
    return name.endswith(SOURCE_SUFFIX) and not name.endswith(TEST_SUFFIX)


def list_source_files(directory: Union[str, Path]) -> List[Path]:
    """
    List the Go source files directly inside a directory.

    Subdirectories are not descended into; packages are only reached
    through the imports that reference them.

    Args:
        directory: Directory to list.

    Returns:
        Regular non-test ``.go`` files, sorted by name.

    Raises:
        SourceAccessError: If the directory cannot be listed.
    """
    directory = Path(directory)
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise SourceAccessError(f"failed to read dir {directory}: {e}", directory) from e

    return [entry for entry in entries if entry.is_file() and is_source_file(entry.name)]

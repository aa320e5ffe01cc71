"""
Directory scanner: find Script Include update files.

Lists ``<source_dir>/update/sys_script_include_*.xml``.
"""

import logging
from pathlib import Path

from snowinclude.config import (
    SOURCE_FILE_PREFIX,
    SOURCE_FILE_SUFFIX,
    UPDATE_SUBDIR,
)

logger = logging.getLogger(__name__)


class MissingDirectoryError(FileNotFoundError):
    """Raised when the source tree has no ``update`` directory."""


def is_script_include_file(filename: str) -> bool:
    """Match the CI/CD export naming convention for Script Includes."""
    return filename.startswith(SOURCE_FILE_PREFIX) and filename.endswith(
        SOURCE_FILE_SUFFIX
    )


def find_update_files(source_dir: Path) -> list[Path]:
    """
    Return the Script Include XML files directly inside ``source_dir/update``.

    Sorted by filename so repeated runs process files in the same order.
    Subdirectories are not descended into.

    Raises:
        MissingDirectoryError: ``source_dir/update`` does not exist.
    """
    update_dir = source_dir / UPDATE_SUBDIR
    if not update_dir.is_dir():
        raise MissingDirectoryError(f"Update directory not found: {update_dir}")

    files = sorted(
        (
            entry
            for entry in update_dir.iterdir()
            if entry.is_file() and is_script_include_file(entry.name)
        ),
        key=lambda p: p.name,
    )
    logger.debug("Found %d Script Include file(s) in %s", len(files), update_dir)
    return files

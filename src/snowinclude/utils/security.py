"""
Input sanitization and path safety.

Threat model:
- Path traversal from record names (``name`` → output filename)
- Reserved or control characters in record names
- Symlinks inside the output directory pointing elsewhere
"""

import os
import re
from pathlib import Path

# Filenames: strip anything dangerous
_UNSAFE_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def sanitize_filename(raw: str) -> str:
    """
    Sanitize a filename, stripping path separators.
    """
    # Windows separators are not path separators on POSIX, so normalize first
    name = os.path.basename(raw.replace("\\", "/"))

    # Strip unsafe characters
    name = _UNSAFE_FILENAME_CHARS.sub("", name)

    # No leading dots (hidden files / directory traversal)
    name = name.lstrip(".")

    if not name:
        raise ValueError(f"Filename '{raw}' is empty after sanitization.")

    return name


def is_safe_filename(raw: str) -> bool:
    """True when ``raw`` survives sanitization unchanged."""
    try:
        return sanitize_filename(raw) == raw
    except ValueError:
        return False


def validate_path_within(path: Path, root: Path) -> bool:
    """
    Ensure `path` resolves to a location within `root`.
    """
    try:
        # Textual check first: resolves '..' without touching the filesystem
        abs_path = os.path.abspath(str(path))
        abs_root = os.path.abspath(str(root))
        if os.path.commonpath([abs_path, abs_root]) != abs_root:
            return False

        # Then follow symlinks
        resolved = path.resolve()
        root_resolved = root.resolve()
        return resolved.is_relative_to(root_resolved)
    except (OSError, ValueError):
        return False

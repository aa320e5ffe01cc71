"""
File emitter: write a Script Include as an annotated ``.js`` file.
"""

from pathlib import Path

from snowinclude.config import (
    OUTPUT_ENCODING,
    OUTPUT_FILE_SUFFIX,
    RECORD_TYPE_LABEL,
)
from snowinclude.extract import ScriptInclude
from snowinclude.utils.security import is_safe_filename, validate_path_within


class UnsafeNameError(ValueError):
    """Raised when a record name cannot be used as a filename as-is."""


def render_header(record: ScriptInclude, app_name: str, source_name: str) -> str:
    """Format the comment block that opens every output file."""
    lines = [
        "/**",
        f" * App: {app_name}",
        f" * Type: {RECORD_TYPE_LABEL}",
        f" * Name: {record.name}",
        f" * API Name: {record.api_name}",
        f" * Active: {record.active}",
        f" * Source: {source_name}",
        " */",
    ]
    return "\n".join(lines) + "\n"


def render_script_file(record: ScriptInclude, app_name: str, source_name: str) -> str:
    """Header, one blank line, the stripped script body, trailing newline."""
    header = render_header(record, app_name, source_name)
    return f"{header}\n{record.script.strip()}\n"


def output_path_for(record: ScriptInclude, output_dir: Path) -> Path:
    """
    Return ``output_dir/<name>.js``.

    Raises:
        UnsafeNameError: the name carries path components, reserved
            characters, or would land outside ``output_dir``.
    """
    if not is_safe_filename(record.name):
        raise UnsafeNameError(f"Unsafe Script Include name: {record.name!r}")

    path = output_dir / f"{record.name}{OUTPUT_FILE_SUFFIX}"
    if not validate_path_within(path, output_dir):
        raise UnsafeNameError(
            f"Script Include '{record.name}' resolves outside {output_dir}"
        )
    return path


def write_script_file(
    record: ScriptInclude,
    output_dir: Path,
    app_name: str,
    source_name: str,
) -> Path:
    """
    Write the record to ``output_dir/<name>.js``, replacing any existing file.

    Returns the path written.
    """
    path = output_path_for(record, output_dir)
    content = render_script_file(record, app_name, source_name)
    path.write_text(content, encoding=OUTPUT_ENCODING, newline="\n")
    return path

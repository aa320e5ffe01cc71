"""
Normalization run: scan, extract, emit.

Iterates over the Script Include update files of a source tree and writes one
``.js`` file per record into the target application directory.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Literal

from snowinclude.config import NormalizeConfig
from snowinclude.emit import UnsafeNameError, write_script_file
from snowinclude.extract import RecordParseError, extract_script_include
from snowinclude.scan import find_update_files

logger = logging.getLogger(__name__)

FileStatus = Literal["written", "skipped", "failed"]


@dataclass
class FileResult:
    """Outcome for a single source file."""

    source: Path
    status: FileStatus
    name: str | None = None
    output: Path | None = None
    reason: str = ""


@dataclass
class NormalizeReport:
    """Outcome of a full normalization run."""

    output_dir: Path
    files: list[FileResult] = field(default_factory=list)

    def _count(self, status: FileStatus) -> int:
        return sum(1 for f in self.files if f.status == status)

    @property
    def written_count(self) -> int:
        return self._count("written")

    @property
    def skipped_count(self) -> int:
        return self._count("skipped")

    @property
    def failed_count(self) -> int:
        return self._count("failed")

    def to_dict(self) -> dict[str, Any]:
        return {
            "output_dir": str(self.output_dir),
            "total_files": len(self.files),
            "written": self.written_count,
            "skipped": self.skipped_count,
            "failed": self.failed_count,
            "details": [
                {
                    "source": f.source.name,
                    "status": f.status,
                    "name": f.name,
                    "output": str(f.output) if f.output else None,
                    "reason": f.reason,
                }
                for f in self.files
            ],
        }


def normalize_script_includes(
    config: NormalizeConfig,
    progress_callback: Callable[[str], None] | None = None,
) -> NormalizeReport:
    """
    Convert every Script Include update file under ``config.source_dir``.

    Steps:
    1. List ``update/sys_script_include_*.xml``
    2. Create ``script_includes/`` under the target app directory
    3. Per file: parse, extract the record, write ``<name>.js``

    A file that fails to parse or write is reported as failed and the run
    continues, unless ``config.strict`` is set.

    Args:
        config: Run configuration.
        progress_callback: Optional function to receive status messages.

    Returns:
        NormalizeReport with one FileResult per scanned file.

    Raises:
        MissingDirectoryError: the source tree has no ``update`` directory.
    """
    def _notify(msg: str, level: str = "info") -> None:
        if level == "warning":
            logger.warning(msg)
        elif level == "debug":
            logger.debug(msg)
        else:
            logger.info(msg)

        if progress_callback:
            progress_callback(msg)

    files = find_update_files(config.source_dir)

    output_dir = config.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    report = NormalizeReport(output_dir=output_dir)
    app_name = config.app_name
    written_by: dict[str, Path] = {}

    for src_file in files:
        try:
            record = extract_script_include(src_file.read_bytes())
            if record is None:
                _notify(f"  Skipped {src_file.name}: no complete Script Include", "debug")
                report.files.append(
                    FileResult(src_file, "skipped", reason="No complete Script Include record")
                )
                continue

            out_path = write_script_file(record, output_dir, app_name, src_file.name)
        except (RecordParseError, UnsafeNameError, OSError) as e:
            if config.strict:
                raise
            _notify(f"  Failed {src_file.name}: {e}", "warning")
            report.files.append(FileResult(src_file, "failed", reason=str(e)))
            continue

        previous = written_by.get(record.name)
        if previous is not None:
            _notify(
                f"  {out_path.name} from {src_file.name} replaces output of {previous.name}",
                "warning",
            )
        written_by[record.name] = src_file

        _notify(f"  Wrote {out_path.name} from {src_file.name}")
        report.files.append(
            FileResult(src_file, "written", name=record.name, output=out_path)
        )

    return report

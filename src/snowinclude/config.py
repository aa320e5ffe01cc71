"""
Global configuration, constants, and path resolution.

All magic strings and default values live here.
Pipeline code imports from config, never hardcodes.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

# ──────────────────────────────────────────────
# Directory Layout
# ──────────────────────────────────────────────

UPDATE_SUBDIR: Final[str] = "update"
OUTPUT_SUBDIR: Final[str] = "script_includes"

SOURCE_FILE_PREFIX: Final[str] = "sys_script_include_"
SOURCE_FILE_SUFFIX: Final[str] = ".xml"
OUTPUT_FILE_SUFFIX: Final[str] = ".js"

# ──────────────────────────────────────────────
# XML Shapes
# ──────────────────────────────────────────────

SCRIPT_INCLUDE_TABLE: Final[str] = "sys_script_include"
UPDATE_ENVELOPE_TAG: Final[str] = "record_update"

# ──────────────────────────────────────────────
# Record Fields
# ──────────────────────────────────────────────

FIELD_NAME: Final[str] = "name"
FIELD_SCRIPT: Final[str] = "script"
FIELD_API_NAME: Final[str] = "api_name"
FIELD_ACTIVE: Final[str] = "active"

DEFAULT_API_NAME: Final[str] = ""
DEFAULT_ACTIVE: Final[str] = "true"

# ──────────────────────────────────────────────
# Output
# ──────────────────────────────────────────────

RECORD_TYPE_LABEL: Final[str] = "Script Include"
OUTPUT_ENCODING: Final[str] = "utf-8"
COMPLETION_MESSAGE: Final[str] = "Script Include normalization complete"


@dataclass(frozen=True)
class NormalizeConfig:
    """Run configuration, built once at program entry."""

    source_dir: Path
    target_app_dir: Path
    strict: bool = False

    @property
    def update_dir(self) -> Path:
        return self.source_dir / UPDATE_SUBDIR

    @property
    def output_dir(self) -> Path:
        return self.target_app_dir / OUTPUT_SUBDIR

    @property
    def app_name(self) -> str:
        """Basename of the target application directory, as shown in headers."""
        # abspath so "." and trailing separators still give a real name;
        # symlinks are kept as given
        return Path(os.path.abspath(self.target_app_dir)).name

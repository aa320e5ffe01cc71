"""Shared pytest fixtures for snowinclude tests."""

from pathlib import Path
from typing import Callable

import pytest


def update_set_xml(
    name: str | None = "MyUtil",
    script: str | None = "var x = 1;",
    api_name: str | None = None,
    active: str | None = None,
) -> str:
    """Build a CI/CD update-set envelope around a Script Include record."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<record_update table="sys_script_include">\n'
        f"{_record_xml(name, script, api_name, active)}"
        "</record_update>\n"
    )


def table_export_xml(
    name: str | None = "MyUtil",
    script: str | None = "var x = 1;",
    api_name: str | None = None,
    active: str | None = None,
) -> str:
    """Build a direct table export: the record is the root element."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f"{_record_xml(name, script, api_name, active)}"
    )


def _record_xml(
    name: str | None,
    script: str | None,
    api_name: str | None,
    active: str | None,
) -> str:
    fields = ['    <client_callable>false</client_callable>\n']
    if active is not None:
        fields.append(f"    <active>{active}</active>\n")
    if api_name is not None:
        fields.append(f"    <api_name>{api_name}</api_name>\n")
    if name is not None:
        fields.append(f"    <name>{name}</name>\n")
    if script is not None:
        fields.append(f"    <script><![CDATA[{script}]]></script>\n")
    fields.append("    <sys_id>0a1b2c3d4e5f60718293a4b5c6d7e8f9</sys_id>\n")
    return (
        '  <sys_script_include action="INSERT_OR_UPDATE">\n'
        + "".join(fields)
        + "  </sys_script_include>\n"
    )


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Source tree with an empty ``update`` directory."""
    src = tmp_path / "export"
    (src / "update").mkdir(parents=True)
    return src


@pytest.fixture
def target_app_dir(tmp_path: Path) -> Path:
    """Target application directory (not created)."""
    return tmp_path / "x_app"


@pytest.fixture
def write_update_file(source_dir: Path) -> Callable[[str, str], Path]:
    """Write an XML file into ``source_dir/update`` and return its path."""

    def _write(filename: str, content: str) -> Path:
        path = source_dir / "update" / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write

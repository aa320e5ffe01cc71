"""
Record extractor: locate the Script Include inside an export document.

Two shapes are recognized, tried in order:

1. Update-set envelope::

       <record_update table="sys_script_include">
           <sys_script_include action="INSERT_OR_UPDATE">...</sys_script_include>
       </record_update>

2. Direct table export::

       <sys_script_include>...</sys_script_include>

Anything else is "no record", not an error.
"""

from dataclasses import dataclass
from typing import Callable

from lxml import etree

from snowinclude.config import (
    DEFAULT_ACTIVE,
    DEFAULT_API_NAME,
    FIELD_ACTIVE,
    FIELD_API_NAME,
    FIELD_NAME,
    FIELD_SCRIPT,
    SCRIPT_INCLUDE_TABLE,
    UPDATE_ENVELOPE_TAG,
)


class RecordParseError(ValueError):
    """Raised when an export file is not well-formed XML."""


@dataclass(frozen=True)
class ScriptInclude:
    """Fields of one Script Include record, defaults applied."""

    name: str
    script: str
    api_name: str = DEFAULT_API_NAME
    active: str = DEFAULT_ACTIVE

    @classmethod
    def from_element(cls, element: etree._Element) -> "ScriptInclude | None":
        """
        Build a record from a ``sys_script_include`` element.

        Returns None when ``name`` or ``script`` is missing or empty.
        An empty ``api_name`` or ``active`` falls back to its default.
        """
        name = _field_text(element, FIELD_NAME)
        script = _field_text(element, FIELD_SCRIPT)
        if not name or not script:
            return None

        return cls(
            name=name,
            script=script,
            api_name=_field_text(element, FIELD_API_NAME) or DEFAULT_API_NAME,
            active=_field_text(element, FIELD_ACTIVE) or DEFAULT_ACTIVE,
        )


def _field_text(element: etree._Element, field: str) -> str | None:
    """All text under ``field``, comments skipped; None if the field is absent."""
    child = element.find(field)
    if child is None:
        return None
    return "".join(child.xpath(".//text()"))


# ──────────────────────────────────────────────
# Parsing
# ──────────────────────────────────────────────


def _make_parser() -> etree.XMLParser:
    # CDATA arrives as plain text; no DTD entities or network fetches
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=True,
    )


def parse_document(content: str | bytes) -> etree._Element:
    """
    Parse one export file into an element tree and return its root.

    Raises:
        RecordParseError: content is empty or not well-formed.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    try:
        root = etree.fromstring(content, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        raise RecordParseError(f"Malformed XML: {e}") from e
    if root is None:
        raise RecordParseError("Malformed XML: document is empty")
    return root


# ──────────────────────────────────────────────
# Shape matching
# ──────────────────────────────────────────────

ShapeMatcher = Callable[[etree._Element], etree._Element | None]


def _match_update_set(root: etree._Element) -> etree._Element | None:
    if root.tag != UPDATE_ENVELOPE_TAG:
        return None
    return root.find(SCRIPT_INCLUDE_TABLE)


def _match_table_export(root: etree._Element) -> etree._Element | None:
    if root.tag != SCRIPT_INCLUDE_TABLE:
        return None
    return root


SHAPE_MATCHERS: tuple[tuple[str, ShapeMatcher], ...] = (
    ("update_set", _match_update_set),
    ("table_export", _match_table_export),
)


def find_record(root: etree._Element) -> etree._Element | None:
    """Return the Script Include element from the first matching shape."""
    for _shape, matcher in SHAPE_MATCHERS:
        record = matcher(root)
        if record is not None:
            return record
    return None


def extract_script_include(content: str | bytes) -> ScriptInclude | None:
    """
    Parse an export file and extract its Script Include.

    Returns None when the document holds no Script Include, or the record
    lacks ``name`` or ``script``.

    Raises:
        RecordParseError: content is not well-formed XML.
    """
    record = find_record(parse_document(content))
    if record is None:
        return None
    return ScriptInclude.from_element(record)

"""Low-level XML helpers for reading and writing blueprint documents."""
from __future__ import annotations

import copy
import xml.etree.ElementTree as ET
from pathlib import Path
from xml.sax.saxutils import escape

from .errors import BlueprintLoadError, BlueprintNotFoundError

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
XSI_TYPE = f"{{{XSI_NAMESPACE}}}type"
_CR_REFERENCE = "&#13;"

ET.register_namespace("xsi", XSI_NAMESPACE)


def load_xml(path: Path) -> ET.Element:
    """Parse an XML document from disk and raise BlueprintLoadError on failure."""
    try:
        data = path.read_bytes()
    except FileNotFoundError as exc:
        raise BlueprintNotFoundError(f"Blueprint file not found: {path}") from exc
    except OSError as exc:
        raise BlueprintLoadError(f"Unable to read blueprint file: {path}") from exc

    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        raise BlueprintLoadError(f"Invalid XML in {path}: {exc}") from exc


def write_xml(root: ET.Element, path: Path, indent: str | None = "  ") -> None:
    """Write an element tree with an XML declaration, optionally indented."""
    if indent:
        ET.indent(root, space=indent)
    data = ET.tostring(root, encoding="utf-8", xml_declaration=True)
    # Text CRs must be character references to survive newline normalisation.
    path.write_bytes(data.replace(b"\r", _CR_REFERENCE.encode("ascii")))


def local_name(tag: object) -> str | None:
    """Return the tag without its namespace, or None for comments and PIs."""
    if not isinstance(tag, str):
        return None
    return tag.rpartition("}")[2]


def _tostring(element: ET.Element) -> str:
    return ET.tostring(element, encoding="unicode").replace("\r", _CR_REFERENCE)


def _strip_layout(element: ET.Element) -> None:
    for node in element.iter():
        if len(node) and node.text is not None and not node.text.strip():
            node.text = None
        if node.tail is not None and not node.tail.strip():
            node.tail = None


def serialize_element(element: ET.Element) -> str:
    """Serialize an element and its subtree without layout whitespace."""
    clone = copy.deepcopy(element)
    _strip_layout(clone)
    clone.tail = None
    return _tostring(clone)


def inner_markup(element: ET.Element) -> str:
    """Serialize the content of an element (text and children), not the element itself."""
    clone = copy.deepcopy(element)
    _strip_layout(clone)
    parts = [escape(clone.text or "", {"\r": _CR_REFERENCE})]
    parts.extend(_tostring(child) for child in clone)
    return "".join(parts)


def parse_element(markup: str) -> ET.Element:
    """Parse serialized element text back into an element."""
    return ET.fromstring(markup)


def parse_inner_markup(tag: str, markup: str) -> ET.Element:
    """Rebuild an element named ``tag`` whose content is ``markup``."""
    return ET.fromstring(f"<{tag}>{markup}</{tag}>")

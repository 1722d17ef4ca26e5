"""
Configuration document parser.

Turns the XML configuration file into a generic XmlNode tree so the gesture
mapping does not depend on the markup backend.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from ..errors import DocumentInvalid
from ..models import XmlNode


def parse_document(path: Union[str, Path]) -> XmlNode:
    """
    Parse a configuration file into a node tree.

    Args:
        path: Configuration file path

    Returns:
        Root XmlNode

    Raises:
        DocumentInvalid: If the file cannot be read or is not well-formed XML
    """
    path = Path(path)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise DocumentInvalid(path, e.strerror or str(e)) from e

    return parse_bytes(data, source=path)


def parse_bytes(data: bytes, source: Union[str, Path] = "<memory>") -> XmlNode:
    """Parse raw document bytes; source is only used in error messages."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        line, column = e.position
        raise DocumentInvalid(source, str(e), line_number=line, column=column) from e

    return _to_node(root)


def _direct_text(element: ET.Element) -> Optional[str]:
    # Whitespace-only text is formatting, not content
    if element.text and element.text.strip():
        return element.text
    return None


def _to_node(root: ET.Element) -> XmlNode:
    """Convert an element tree without recursion, so nesting depth is unbounded."""
    def convert(element: ET.Element) -> XmlNode:
        return XmlNode(
            tag=element.tag,
            attributes=dict(element.attrib),
            text=_direct_text(element),
        )

    # Comments and processing instructions are dropped by the default
    # TreeBuilder, so every child here is a real element
    root_node = convert(root)
    pending = [(root, root_node)]
    while pending:
        element, node = pending.pop()
        for child in element:
            child_node = convert(child)
            node.children.append(child_node)
            pending.append((child, child_node))

    return root_node

"""
Document Manager
================

Turns ARXML files into RawElement trees.
Follows SRP: Only handles reading and parsing documents.
"""

import json
import logging
import os
from typing import Any, Dict, Optional, Union

from lxml import etree

from core.errors import DocumentLoadError
from core.raw_element import RawElement
from core.settings import DOCUMENT_EXTENSIONS

logger = logging.getLogger(__name__)


def _local_name(name: str) -> str:
    return etree.QName(name).localname if name.startswith("{") else name


def _attribute_name(name: str, nsmap: Dict[Optional[str], str]) -> str:
    if not name.startswith("{"):
        return name
    qname = etree.QName(name)
    for prefix, uri in nsmap.items():
        if prefix and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _element_text(element: Any) -> Optional[str]:
    # Direct text nodes, tails of children included, joined by single spaces
    chunks = [chunk.strip() for chunk in [element.text] + [child.tail for child in element] if chunk]
    return " ".join(chunk for chunk in chunks if chunk) or None


def convert_element(element: Any) -> RawElement:
    """
    Convert an lxml element (and its subtree) into a RawElement.

    Comments and processing instructions are dropped; namespaces are
    stripped from tags.

    Args:
        element: lxml element

    Returns:
        RawElement tree
    """
    children = [
        convert_element(child) for child in element
        if isinstance(child.tag, str)
    ]
    attributes = [
        (_attribute_name(name, element.nsmap), value)
        for name, value in element.attrib.items()
    ]
    return RawElement(_local_name(element.tag), attributes, children, _element_text(element))


class DocumentManager:
    """
    Manager responsible for loading documents.

    Follows SRP: Only handles document parsing.
    """

    def __init__(self):
        """Initialize document manager."""
        self.parser = etree.XMLParser(remove_comments=True, huge_tree=True)

    def is_supported(self, filepath: str) -> bool:
        """
        Check if the file extension is accepted.

        Args:
            filepath: Path to file

        Returns:
            True for .arxml, .xml and .json files
        """
        return os.path.splitext(filepath)[1].lower() in DOCUMENT_EXTENSIONS

    def parse_string(self, content: Union[str, bytes]) -> RawElement:
        """
        Parse XML text into a RawElement tree.

        Args:
            content: XML document text

        Returns:
            Root RawElement

        Raises:
            DocumentLoadError: If the XML is not well-formed
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        try:
            root = etree.fromstring(content, parser=self.parser)
        except etree.XMLSyntaxError as e:
            raise DocumentLoadError(f"XML parse error: {e}") from e
        return convert_element(root)

    def parse_json(self, content: str) -> RawElement:
        """
        Parse the serialized ``{nodeName, attributes, children}`` form.

        Args:
            content: JSON text

        Returns:
            Root RawElement

        Raises:
            DocumentLoadError: If the JSON is invalid or not an element tree
        """
        try:
            data = json.loads(content)
            # Stored file records wrap the tree in "parsedContent"
            if isinstance(data, dict) and "parsedContent" in data:
                data = data["parsedContent"]
            return RawElement.from_dict(data)
        except (json.JSONDecodeError, ValueError, TypeError) as e:
            raise DocumentLoadError(f"JSON parse error: {e}") from e

    def load(self, filepath: str) -> RawElement:
        """
        Load a document file.

        Args:
            filepath: Path to .arxml / .xml / .json file

        Returns:
            Root RawElement

        Raises:
            DocumentLoadError: If the file is missing, unsupported or malformed
        """
        if not os.path.isfile(filepath):
            raise DocumentLoadError(f"File not found: {filepath}", path=filepath)
        if not self.is_supported(filepath):
            raise DocumentLoadError(
                f"Unsupported file type: {filepath} (expected {', '.join(DOCUMENT_EXTENSIONS)})",
                path=filepath,
            )

        logger.info("Loading %s", filepath)
        try:
            if filepath.lower().endswith(".json"):
                with open(filepath, "r", encoding="utf-8") as f:
                    return self.parse_json(f.read())
            with open(filepath, "rb") as f:
                return self.parse_string(f.read())
        except DocumentLoadError as e:
            e.path = filepath
            raise

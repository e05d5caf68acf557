"""
Raw Element
===========

Read-only element tree handed over by the document-parsing side.

Attribute collections arrive in two shapes: a plain name/value mapping
(``dict``, lxml ``_Attrib``) or a name-indexable collection whose entries
are attribute objects or dicts (``name``/``value``, ``nodeName``/``nodeValue``)
or ``(name, value)`` pairs. Both are normalized here, once, into a plain ``dict``.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence

logger = logging.getLogger(__name__)


def _attribute_pair(item: Any) -> Optional[tuple]:
    if isinstance(item, (tuple, list)) and len(item) == 2:
        return item[0], item[1]
    for name_field, value_field in (("name", "value"), ("nodeName", "nodeValue")):
        if isinstance(item, dict):
            if name_field in item:
                return item[name_field], item.get(value_field, "")
            continue
        name = getattr(item, name_field, None)
        if name is not None:
            return name, getattr(item, value_field, "")
    return None


def normalize_attributes(attributes: Any) -> Dict[str, str]:
    """
    Normalize an attribute collection into a ``{name: value}`` dictionary.

    Args:
        attributes: Mapping, sequence of attribute objects/pairs, or None

    Returns:
        Dictionary of string names to string values
    """
    if attributes is None:
        return {}

    if hasattr(attributes, "items"):
        pairs = list(attributes.items())
    elif isinstance(attributes, (str, bytes)):
        logger.warning("Ignoring attribute collection of type %s", type(attributes).__name__)
        return {}
    else:
        try:
            items = list(attributes)
        except TypeError:
            logger.warning("Ignoring attribute collection of type %s", type(attributes).__name__)
            return {}
        pairs = []
        for item in items:
            pair = _attribute_pair(item)
            if pair is None:
                logger.debug("Dropping malformed attribute entry: %r", item)
                continue
            pairs.append(pair)

    normalized = {}
    for name, value in pairs:
        if name is None:
            continue
        normalized[str(name)] = "" if value is None else str(value)
    return normalized


class RawElement:
    """One parsed XML element: tag, attributes, children and trimmed text."""

    __slots__ = ("_tag", "_attributes", "_children", "_text")

    def __init__(
        self,
        tag: str,
        attributes: Any = None,
        children: Optional[Sequence["RawElement"]] = None,
        text: Optional[str] = None,
    ):
        self._tag = tag
        self._attributes = normalize_attributes(attributes)
        self._children = tuple(children or ())
        text = text.strip() if isinstance(text, str) else None
        self._text = text or None

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def attributes(self) -> Dict[str, str]:
        # Returned as a copy
        return dict(self._attributes)

    @property
    def children(self) -> tuple:
        return self._children

    @property
    def text(self) -> Optional[str]:
        return self._text

    def get_attribute(self, name: str) -> str:
        """Return the attribute value, or an empty string when absent."""
        return self._attributes.get(name, "")

    def has_attributes(self) -> bool:
        return bool(self._attributes)

    def find_child(self, *tags: str) -> Optional["RawElement"]:
        """Return the first direct child whose tag is one of ``tags``."""
        for child in self._children:
            if child.tag in tags:
                return child
        return None

    def iter(self) -> Iterator["RawElement"]:
        """Yield this element and its descendants in document order."""
        stack = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.children))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawElement":
        """
        Build a tree from the serialized ``{nodeName, attributes, children,
        textContent}`` form.

        Args:
            data: Serialized element

        Returns:
            RawElement tree
        """
        if not isinstance(data, dict) or not isinstance(data.get("nodeName"), str):
            raise ValueError("Serialized element needs a string 'nodeName'")
        children: List[RawElement] = [
            cls.from_dict(child) for child in data.get("children") or []
        ]
        return cls(
            data["nodeName"],
            data.get("attributes"),
            children,
            data.get("textContent"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "nodeName": self._tag,
            "attributes": dict(self._attributes),
            "children": [child.to_dict() for child in self._children],
        }
        if self._text is not None:
            data["textContent"] = self._text
        return data

    def __repr__(self):
        return f"RawElement({self._tag!r}, children={len(self._children)})"

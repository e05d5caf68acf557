from typing import Optional

from core.raw_element import RawElement
from core.settings import IDENTITY_TAGS, MULTILINGUAL_TAG


def _name_text(name_node: RawElement) -> Optional[str]:
    # <T> wraps multilingual variants
    variant = name_node.find_child(MULTILINGUAL_TAG)
    source = variant if variant is not None else name_node
    return (source.text or "").strip() or None


def resolve_identity(element: Optional[RawElement]) -> Optional[str]:
    """
    Resolve the human identity of an element from its SHORT-NAME or
    SHORT-LABEL child.

    Args:
        element: Element to inspect

    Returns:
        Trimmed identity, or None when no usable name is present
    """
    if element is None:
        return None
    for tag in IDENTITY_TAGS:
        name_node = element.find_child(tag)
        if name_node is None:
            continue
        identity = _name_text(name_node)
        if identity:
            return identity
    return None

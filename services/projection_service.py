"""
Projection Service
==================

Builds the browsable display tree of a document. Unlike the named hierarchy,
every significant element gets a node: structural containers, named
elements, and anything with children or attributes. Bookkeeping tags
(SHORT-NAME, DESC, S, T) are folded into their parent's label.

Keys are ``parent_key-TAG-ordinal`` with ``ordinal`` the element's position
among its raw siblings, so a key can be rebuilt from the ancestor chain alone.
"""

import logging
import time
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from core.classification import tag_category, tag_icon
from core.identity import resolve_identity
from core.raw_element import RawElement
from core.settings import (
    ALWAYS_SHOW_TAGS,
    BOOKKEEPING_TAGS,
    IGNORED_ATTRIBUTES,
    KEY_SEPARATOR,
    ROOT_KEY,
    TAG_ONLY_LABEL_TAGS,
)
from core.tree_walker import PruningPolicy, iter_nodes, prune_tree

logger = logging.getLogger(__name__)


class Visibility(Enum):
    SHOW = "show"
    SKIP = "skip"
    ALWAYS_SHOW = "always_show"


def default_classify(element: RawElement) -> Visibility:
    if element.tag in BOOKKEEPING_TAGS:
        return Visibility.SKIP
    if element.tag in ALWAYS_SHOW_TAGS:
        return Visibility.ALWAYS_SHOW
    return Visibility.SHOW


def make_label(identity: Optional[str], tag: str) -> str:
    if identity and tag not in TAG_ONLY_LABEL_TAGS:
        return f"{identity} ({tag})"
    return tag


def child_key(parent_key: str, tag: str, ordinal: int) -> str:
    return KEY_SEPARATOR.join((parent_key, tag, str(ordinal)))


class DisplayNode:
    """One node of the display tree."""

    def __init__(
        self,
        key: str,
        label: str,
        tag: str,
        identity: Optional[str],
        icon: str,
        category: str,
        path: List[str],
        children: List["DisplayNode"],
        source: Optional[RawElement] = None,
        is_match: bool = False,
        is_scaffold: bool = False,
    ):
        self.key = key
        self.label = label
        self.tag = tag
        self.identity = identity
        self.icon = icon
        self.category = category
        self.path = path
        self.children = children
        self.source = source
        self.is_match = is_match
        self.is_scaffold = is_scaffold

    @property
    def depth(self) -> int:
        """Number of projected ancestors."""
        return len(self.path) - 1

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def clone(
        self,
        children: List["DisplayNode"],
        is_match: bool = False,
        is_scaffold: bool = False,
    ) -> "DisplayNode":
        """Copy this node with a new child list and highlight flags."""
        return DisplayNode(
            key=self.key,
            label=self.label,
            tag=self.tag,
            identity=self.identity,
            icon=self.icon,
            category=self.category,
            path=list(self.path),
            children=children,
            source=self.source,
            is_match=is_match,
            is_scaffold=is_scaffold,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "title": self.label,
            "icon": self.icon,
            "isMatch": self.is_match,
            "isLeaf": self.is_leaf,
            "children": [child.to_dict() for child in self.children],
        }

    def __repr__(self):
        return f"DisplayNode({self.key!r}, {self.label!r}, children={len(self.children)})"


class _ProjectionState:
    __slots__ = ("key", "identity", "significant", "path")

    def __init__(self, key, identity, significant, path):
        self.key = key
        self.identity = identity
        self.significant = significant
        self.path = path


class DisplayProjectionPolicy(PruningPolicy):
    """Significance and labelling rules for the browsing tree."""

    def __init__(
        self,
        classify: Callable[[RawElement], Visibility] = default_classify,
        categories: Optional[Any] = None,
    ):
        self.classify = classify
        self.category_of = categories.get_category if categories is not None else tag_category
        self.icon_of = categories.get_icon if categories is not None else tag_icon

    def enter(self, element, context):
        visibility = self.classify(element)
        if visibility == Visibility.SKIP:
            return None

        if context is None:
            key, ancestors = ROOT_KEY, ()
        else:
            parent_key, ordinal, ancestors = context
            key = child_key(parent_key, element.tag, ordinal)

        identity = resolve_identity(element)
        has_attributes = any(name not in IGNORED_ATTRIBUTES for name in element.attributes)
        significant = (
            visibility == Visibility.ALWAYS_SHOW
            or identity is not None
            or bool(element.children)
            or has_attributes
        )
        path = ancestors + ((identity or element.tag),) if significant else ancestors
        return _ProjectionState(key, identity, significant, path)

    def is_kept(self, state):
        return state.significant

    def child_context(self, state, ordinal):
        return state.key, ordinal, state.path

    def build(self, element, state, children):
        return DisplayNode(
            key=state.key,
            label=make_label(state.identity, element.tag),
            tag=element.tag,
            identity=state.identity,
            icon=self.icon_of(element.tag),
            category=self.category_of(element.tag),
            path=list(state.path),
            children=children,
            source=element,
        )


def project(
    root: Optional[RawElement],
    classify: Callable[[RawElement], Visibility] = default_classify,
    categories: Optional[Any] = None,
) -> List[DisplayNode]:
    """
    Project a document into its display tree.

    Args:
        root: Document root element
        classify: Visibility policy per element
        categories: Object with get_category/get_icon (default: settings tables)

    Returns:
        Root DisplayNodes (usually a single AUTOSAR node)
    """
    if not isinstance(root, RawElement):
        return []

    started = time.perf_counter()
    roots = prune_tree(root, DisplayProjectionPolicy(classify, categories))
    logger.debug(
        "Display projection: %d nodes in %.1f ms",
        sum(1 for _ in iter_nodes(roots)),
        (time.perf_counter() - started) * 1000,
    )
    return roots


def find_node(roots: List[DisplayNode], key: str) -> Optional[DisplayNode]:
    """Locate a node by key, descending only into matching key prefixes."""
    nodes = roots
    while nodes:
        next_nodes = []
        for node in nodes:
            if node.key == key:
                return node
            if key.startswith(node.key + KEY_SEPARATOR):
                next_nodes = node.children
                break
        nodes = next_nodes
    return None

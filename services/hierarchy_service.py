"""
Hierarchy Service
=================

Builds the named hierarchy: the document tree pruned down to elements that
carry a SHORT-NAME or SHORT-LABEL, with per-type counts and depth.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from core.errors import AnalysisError
from core.identity import resolve_identity
from core.raw_element import RawElement
from core.settings import LOCATION_SEPARATOR, NAMED_TREE_SKIP_TAGS
from core.tree_walker import PruningPolicy, forest_depth, iter_nodes, prune_tree

logger = logging.getLogger(__name__)


class NamedElement:
    """An identity-bearing element of the named hierarchy."""

    def __init__(
        self,
        identity: str,
        tag: str,
        attributes: Dict[str, str],
        path: List[str],
        children: List["NamedElement"],
        source: Optional[RawElement] = None,
    ):
        self.identity = identity
        self.tag = tag
        self.attributes = attributes
        self.path = path
        self.children = children
        self.source = source

    @property
    def location(self) -> str:
        return LOCATION_SEPARATOR.join(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.identity,
            "type": self.tag,
            "attributes": dict(self.attributes),
            "path": list(self.path),
            "children": [child.to_dict() for child in self.children],
        }

    def __repr__(self):
        return f"NamedElement({self.identity!r}, {self.tag!r}, children={len(self.children)})"


class HierarchyAnalysis:
    """Result of :func:`build_named_tree`."""

    def __init__(
        self,
        tree: Optional[List[NamedElement]] = None,
        counts_by_type: Optional[Dict[str, int]] = None,
        total_named: int = 0,
        max_depth: int = 0,
        elements_by_type: Optional[Dict[str, List[Dict[str, str]]]] = None,
    ):
        self.tree = tree or []
        self.counts_by_type = counts_by_type or {}
        self.total_named = total_named
        self.max_depth = max_depth
        self.elements_by_type = elements_by_type or {}

    def is_empty(self) -> bool:
        return not self.tree


class NamedHierarchyPolicy(PruningPolicy):
    """Keeps elements with an identity; drops unnamed annotation wrappers."""

    def enter(self, element, context):
        identity = resolve_identity(element)
        if identity is None and element.tag in NAMED_TREE_SKIP_TAGS:
            return None
        path = (context or ()) + (element.tag,)
        return identity, path

    def is_kept(self, state):
        return state[0] is not None

    def child_context(self, state, ordinal):
        return state[1]

    def build(self, element, state, children):
        identity, path = state
        return NamedElement(
            identity=identity,
            tag=element.tag,
            attributes=element.attributes,
            path=list(path),
            children=children,
            source=element,
        )


def _summarize(tree: List[NamedElement]) -> HierarchyAnalysis:
    counts: Dict[str, int] = {}
    elements_by_type: Dict[str, List[Dict[str, str]]] = {}

    for named in iter_nodes(tree):
        counts[named.tag] = counts.get(named.tag, 0) + 1
        elements_by_type.setdefault(named.tag, []).append({
            "name": named.identity,
            "type": named.tag,
            "path": named.location,
        })

    return HierarchyAnalysis(
        tree=tree,
        counts_by_type=counts,
        total_named=sum(counts.values()),
        max_depth=forest_depth(tree),
        elements_by_type=elements_by_type,
    )


def build_named_tree(root: Optional[RawElement]) -> HierarchyAnalysis:
    """
    Build the named hierarchy of a document.

    Args:
        root: Document root element

    Returns:
        HierarchyAnalysis; empty when the root is missing or malformed

    Raises:
        AnalysisError: If the traversal fails on an unexpected document shape
    """
    if not isinstance(root, RawElement) or not isinstance(root.tag, str):
        logger.warning("No document root to analyze; returning empty hierarchy")
        return HierarchyAnalysis()

    started = time.perf_counter()
    try:
        tree = prune_tree(root, NamedHierarchyPolicy())
        analysis = _summarize(tree)
    except Exception as e:
        raise AnalysisError(str(e), stage="named hierarchy") from e

    logger.debug(
        "Named hierarchy: %d elements, %d types, depth %d in %.1f ms",
        analysis.total_named,
        len(analysis.counts_by_type),
        analysis.max_depth,
        (time.perf_counter() - started) * 1000,
    )
    return analysis

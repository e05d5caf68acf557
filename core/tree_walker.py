"""
Tree Walker
===========

Post-order pruning traversal shared by the named hierarchy and the display
projection. A policy decides, per element, whether the subtree is dropped,
whether the element is kept as a node of its own, and how that node is built.
Elements that are walked but not kept are transparent: the nodes built for
their descendants are hoisted into the nearest kept ancestor.
"""

from itertools import chain
from typing import Any, List, Optional

from core.raw_element import RawElement


class PruningPolicy:
    """
    Strategy consulted by :func:`prune_tree`.

    ``enter`` returns the per-element state (or None to drop the element and
    its subtree), ``is_kept`` decides whether the element gets a node,
    ``child_context`` derives the context handed to the child at ``ordinal``
    and ``build`` creates the node from the already-built children.
    """

    def enter(self, element: RawElement, context: Any) -> Optional[Any]:
        raise NotImplementedError

    def is_kept(self, state: Any) -> bool:
        raise NotImplementedError

    def child_context(self, state: Any, ordinal: int) -> Any:
        raise NotImplementedError

    def build(self, element: RawElement, state: Any, children: List[Any]) -> Any:
        raise NotImplementedError


def prune_tree(element: RawElement, policy: PruningPolicy, context: Any = None) -> List[Any]:
    """
    Walk ``element`` and return the nodes it contributes to its parent.

    Args:
        element: Subtree root
        policy: Pruning policy
        context: Context derived from the parent (None at the document root)

    Returns:
        ``[node]`` if the element is kept, otherwise the hoisted nodes of its
        descendants (possibly empty). Always a new list.
    """
    state = policy.enter(element, context)
    if state is None:
        return []

    children = list(
        chain.from_iterable(
            prune_tree(child, policy, policy.child_context(state, ordinal))
            for ordinal, child in enumerate(element.children)
        )
    )

    if policy.is_kept(state):
        return [policy.build(element, state, children)]
    return children


def iter_nodes(nodes: List[Any]):
    """Yield every node of a built forest in pre-order (document order)."""
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def forest_depth(nodes: List[Any]) -> int:
    """Maximum root-to-leaf edge count of a built forest (0 when empty)."""
    max_depth = 0
    stack = [(node, 0) for node in nodes]
    while stack:
        node, depth = stack.pop()
        max_depth = max(max_depth, depth)
        stack.extend((child, depth + 1) for child in node.children)
    return max_depth

"""
Filter Service
==============

Rebuilds a sparse, ancestor-closed copy of the display tree around a set of
matches. The canonical projection is never modified.
"""

from typing import Iterable, List, Set, Union

from core.settings import KEY_SEPARATOR
from core.tree_walker import iter_nodes
from services.projection_service import DisplayNode
from services.search_service import Match


def ancestor_keys(key: str) -> List[str]:
    """
    Every ``-``-delimited prefix of a key, shortest first, ending with the key.

    Tags contain dashes themselves, so some prefixes name no node; they are
    harmless members of a keep-set.
    """
    segments = key.split(KEY_SEPARATOR)
    return [KEY_SEPARATOR.join(segments[:end]) for end in range(1, len(segments) + 1)]


def _match_key(match: Union[Match, DisplayNode, str]) -> str:
    if isinstance(match, str):
        return match
    return match.key


def build_ancestor_closure(
    projection_roots: List[DisplayNode],
    matches: Iterable[Union[Match, DisplayNode, str]],
) -> List[DisplayNode]:
    """
    Build the filtered browsing tree for a match set.

    Args:
        projection_roots: Canonical display tree
        matches: Matches, matched nodes or their keys

    Returns:
        Fresh root nodes containing only the matches and their ancestors;
        matched nodes have ``is_match`` set, the rest ``is_scaffold``
    """
    match_keys: Set[str] = {_match_key(match) for match in matches}
    if not match_keys:
        return []

    keep: Set[str] = set()
    for key in match_keys:
        keep.update(ancestor_keys(key))

    def rebuild(nodes: List[DisplayNode]) -> List[DisplayNode]:
        rebuilt = []
        for node in nodes:
            if node.key not in keep:
                continue
            children = rebuild(node.children)
            is_match = node.key in match_keys
            if not is_match and not children:
                continue
            rebuilt.append(node.clone(children, is_match=is_match, is_scaffold=not is_match))
        return rebuilt

    return rebuild(projection_roots)


def collect_keys(nodes: List[DisplayNode]) -> List[str]:
    """Keys of a (possibly filtered) tree in document order, for expansion state."""
    return [node.key for node in iter_nodes(nodes)]

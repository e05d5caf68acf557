"""
Search Service
==============

Inverted indices over a display projection and the ranked, filtered,
paginated query engine on top of them.
"""

import logging
import math
from typing import Any, Dict, List, Optional

from core.classification import is_query_category
from core.settings import (
    CATEGORY_ALL,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SEARCH_MODE,
    SEARCH_MODES,
)
from core.tree_walker import iter_nodes
from services.projection_service import DisplayNode

logger = logging.getLogger(__name__)

RANK_EXACT = "exact"
RANK_CONTAINS = "contains"
_RANK_ORDER = {RANK_EXACT: 0, RANK_CONTAINS: 1}


class IndexEntry:
    """Flat index row; ``order`` is the document (pre-order) position."""

    __slots__ = ("node", "label", "key", "order")

    def __init__(self, node: DisplayNode, order: int):
        self.node = node
        self.label = node.label.lower()
        self.key = node.key
        self.order = order


class SearchIndex:
    """Lookup tables built once per display projection."""

    def __init__(self):
        self.by_title: Dict[str, List[DisplayNode]] = {}
        self.by_category: Dict[str, List[DisplayNode]] = {}
        self.paths: Dict[str, List[str]] = {}
        self.entries: List[IndexEntry] = []
        self._entries_by_key: Dict[str, IndexEntry] = {}

    def __len__(self):
        return len(self.entries)

    def add(self, node: DisplayNode) -> None:
        entry = IndexEntry(node, len(self.entries))
        self.entries.append(entry)
        self._entries_by_key[node.key] = entry
        title = (node.identity or node.tag).lower()
        self.by_title.setdefault(title, []).append(node)
        self.by_category.setdefault(node.category, []).append(node)
        self.paths[node.key] = node.path

    def entry(self, key: str) -> Optional[IndexEntry]:
        return self._entries_by_key.get(key)

    def keys(self) -> List[str]:
        return [entry.key for entry in self.entries]


class SearchIndexBuilder:
    """
    Builds a SearchIndex in bounded steps so an interactive caller can
    interleave other work between chunks.
    """

    def __init__(self, projection: List[DisplayNode]):
        self._nodes = iter_nodes(projection)
        self._index = SearchIndex()
        self.done = False

    def step(self, max_entries: Optional[int] = None) -> bool:
        """
        Index up to ``max_entries`` more nodes (all remaining when None).

        Returns:
            True once every node is indexed
        """
        added = 0
        while not self.done and (max_entries is None or added < max_entries):
            node = next(self._nodes, None)
            if node is None:
                self.done = True
                break
            self._index.add(node)
            added += 1
        return self.done

    @property
    def indexed_count(self) -> int:
        return len(self._index)

    @property
    def index(self) -> SearchIndex:
        if not self.done:
            raise RuntimeError("Search index is still being built")
        return self._index


def build_index(projection: List[DisplayNode]) -> SearchIndex:
    """
    Build the search index of a display projection.

    Args:
        projection: Root DisplayNodes

    Returns:
        SearchIndex with one entry per node, in document order
    """
    builder = SearchIndexBuilder(projection)
    builder.step()
    logger.debug("Search index: %d entries, %d titles", len(builder.index), len(builder.index.by_title))
    return builder.index


class Match:
    """A matching node and its rank class."""

    __slots__ = ("node", "rank")

    def __init__(self, node: DisplayNode, rank: str):
        self.node = node
        self.rank = rank

    @property
    def key(self) -> str:
        return self.node.key

    def __repr__(self):
        return f"Match({self.node.key!r}, {self.rank})"


class QueryResult:
    """Result envelope of :func:`query`."""

    def __init__(
        self,
        matches: List[Match],
        page: int,
        page_size: int,
        filtered: bool = True,
    ):
        self.matches = matches
        self.total_count = len(matches)
        self.page = page
        self.page_size = page_size
        self.filtered = filtered
        start = (page - 1) * page_size
        self.page_items: List[DisplayNode] = [
            match.node for match in matches[start:start + page_size]
        ]

    @property
    def page_count(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.total_count else 0

    @property
    def has_next_page(self) -> bool:
        return self.page < self.page_count


def _positive_int(value: Any, default: int) -> int:
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric paging value %r", value)
        return default


def query(
    index: SearchIndex,
    text: str,
    mode: str = DEFAULT_SEARCH_MODE,
    category: str = CATEGORY_ALL,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> QueryResult:
    """
    Search the index.

    Args:
        index: Search index
        text: Free text; matched case-insensitively as a substring of labels
        mode: "smart" (exact matches first, then shallow first) or "exact"
            (document order)
        category: Category filter, "all" disables filtering
        page: 1-based page number
        page_size: Items per page

    Returns:
        QueryResult; an empty query yields an unfiltered, zero-count result
    """
    page = _positive_int(page, 1)
    page_size = _positive_int(page_size, DEFAULT_PAGE_SIZE)

    needle = (text or "").strip().lower()
    if not needle:
        return QueryResult([], page, page_size, filtered=False)

    if mode not in SEARCH_MODES:
        logger.warning("Unknown search mode %r, using %r", mode, DEFAULT_SEARCH_MODE)
        mode = DEFAULT_SEARCH_MODE
    if not is_query_category(category):
        logger.warning("Unknown search category %r, searching all", category)
        category = CATEGORY_ALL

    if category == CATEGORY_ALL:
        candidates = index.entries
    else:
        # by_category lists are in document order
        candidates = [index.entry(node.key) for node in index.by_category.get(category, [])]
    hits = [entry for entry in candidates if needle in entry.label]

    exact_keys = {node.key for node in index.by_title.get(needle, [])}

    def rank(entry: IndexEntry) -> str:
        if entry.key in exact_keys or entry.label == needle:
            return RANK_EXACT
        return RANK_CONTAINS

    if mode == "smart":
        ranked = sorted(
            ((entry, rank(entry)) for entry in hits),
            key=lambda item: (_RANK_ORDER[item[1]], len(index.paths[item[0].key]), item[0].order),
        )
        matches = [Match(entry.node, entry_rank) for entry, entry_rank in ranked]
    else:
        matches = [Match(entry.node, rank(entry)) for entry in hits]

    return QueryResult(matches, page, page_size)

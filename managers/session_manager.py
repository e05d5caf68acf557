"""
Session Manager
===============

Holds the derived structures of the currently imported document.
Follows SRP: Only handles rebuilding, swapping and querying snapshots.

Every import rebuilds all structures into a new snapshot; the snapshot is
published only after every build succeeded, so a failed import leaves the
previous document in place.
"""

import logging
import time
from typing import Callable, List, Optional

from core.errors import AnalysisError
from core.raw_element import RawElement
from core.settings import (
    CATEGORY_ALL,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SEARCH_MODE,
    INDEX_CHUNK_SIZE,
    SEARCH_DEBOUNCE_SECONDS,
)
from managers.category_manager import CategoryManager
from services.component_service import ComponentAnalysis, extract_components
from services.filter_service import build_ancestor_closure
from services.hierarchy_service import HierarchyAnalysis, build_named_tree
from services.projection_service import DisplayNode, project
from services.search_service import (
    QueryResult,
    SearchIndex,
    SearchIndexBuilder,
    query,
)

logger = logging.getLogger(__name__)


class DocumentSnapshot:
    """All structures derived from one document."""

    def __init__(
        self,
        root: RawElement,
        hierarchy: HierarchyAnalysis,
        components: ComponentAnalysis,
        projection: List[DisplayNode],
        index: SearchIndex,
    ):
        self.root = root
        self.hierarchy = hierarchy
        self.components = components
        self.projection = projection
        self.index = index


class SearchView:
    """A query result plus the tree to browse for it."""

    def __init__(self, result: QueryResult, tree: List[DisplayNode]):
        self.result = result
        self.tree = tree


class ExplorerSession:
    """
    Current document and its derived structures.
    """

    def __init__(self, categories: Optional[CategoryManager] = None):
        self.categories = categories or CategoryManager()
        self.snapshot: Optional[DocumentSnapshot] = None

    @property
    def is_loaded(self) -> bool:
        return self.snapshot is not None

    def build_snapshot(
        self,
        root: RawElement,
        chunk_size: int = INDEX_CHUNK_SIZE,
        on_progress: Optional[Callable[[int], None]] = None,
    ) -> DocumentSnapshot:
        """
        Derive every structure from a document without publishing it.

        Args:
            root: Document root element
            chunk_size: Index entries per build step
            on_progress: Called with the number of indexed entries after each step

        Returns:
            DocumentSnapshot

        Raises:
            AnalysisError: If any build fails
        """
        started = time.perf_counter()
        hierarchy = build_named_tree(root)
        try:
            components = extract_components(root)
            projection = project(root, categories=self.categories)
            builder = SearchIndexBuilder(projection)
            while not builder.step(chunk_size):
                if on_progress:
                    on_progress(builder.indexed_count)
            index = builder.index
        except AnalysisError:
            raise
        except Exception as e:
            raise AnalysisError(str(e), stage="document build") from e

        logger.info(
            "Built snapshot: %d named elements, %d components, %d display nodes in %.1f ms",
            hierarchy.total_named,
            len(components.components),
            len(index),
            (time.perf_counter() - started) * 1000,
        )
        return DocumentSnapshot(root, hierarchy, components, projection, index)

    def load(self, root: RawElement, **kwargs) -> DocumentSnapshot:
        """
        Replace the current document.

        Raises:
            AnalysisError: If building fails; the previous snapshot is kept
        """
        try:
            snapshot = self.build_snapshot(root, **kwargs)
        except AnalysisError as e:
            logger.error("Import failed, keeping previous document: %s", e)
            raise
        self.snapshot = snapshot
        return snapshot

    def clear(self) -> None:
        """Discard the current document and everything derived from it."""
        self.snapshot = None

    def search(
        self,
        text: str,
        mode: str = DEFAULT_SEARCH_MODE,
        category: str = CATEGORY_ALL,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> SearchView:
        """
        Run a query against the current snapshot.

        Returns:
            SearchView with the ancestor-closed tree of all matches, or the
            full projection when the query is empty
        """
        if self.snapshot is None:
            return SearchView(QueryResult([], 1, max(1, page_size or 1), filtered=False), [])

        result = query(
            self.snapshot.index,
            text,
            mode=mode,
            category=category,
            page=page,
            page_size=page_size,
        )
        if not result.filtered:
            return SearchView(result, self.snapshot.projection)
        return SearchView(result, build_ancestor_closure(self.snapshot.projection, result.matches))


class QueryDebouncer:
    """
    Publishes only the most recent query once it has been quiet for
    ``delay`` seconds. Submitting a new query supersedes the pending one.
    """

    def __init__(
        self,
        session: ExplorerSession,
        delay: float = SEARCH_DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.session = session
        self.delay = delay
        self.clock = clock
        self.published: Optional[SearchView] = None
        self._pending = None
        self._submitted_at = 0.0
        self._generation = 0

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def submit(self, text: str, **params) -> int:
        """
        Schedule a query, replacing any pending one.

        Returns:
            Generation number of the scheduled query
        """
        self._generation += 1
        self._pending = (self._generation, text, params)
        self._submitted_at = self.clock()
        return self._generation

    def poll(self, now: Optional[float] = None) -> Optional[SearchView]:
        """
        Run the pending query if its delay has elapsed.

        Returns:
            The newly published view, or None if nothing was due
        """
        if self._pending is None:
            return None
        now = self.clock() if now is None else now
        if now - self._submitted_at < self.delay:
            return None
        return self._publish()

    def flush(self) -> Optional[SearchView]:
        """Run the pending query immediately."""
        if self._pending is None:
            return None
        return self._publish()

    def _publish(self) -> SearchView:
        _, text, params = self._pending
        self._pending = None
        self.published = self.session.search(text, **params)
        return self.published

"""
Services Package
================

Analysis layer for the ARXML Structure Explorer.

Services:
- hierarchy_service: Named hierarchy, counts and depth
- component_service: Component, port and connector catalogues
- projection_service: Browsable display tree
- search_service: Search index and ranked, paginated queries
- filter_service: Ancestor-closed trees for a match set
- StatisticsService: Statistics and element details
"""

from .hierarchy_service import NamedElement, HierarchyAnalysis, build_named_tree
from .component_service import ComponentAnalysis, extract_components, find_references
from .projection_service import DisplayNode, Visibility, default_classify, project
from .search_service import Match, QueryResult, SearchIndex, build_index, query
from .filter_service import build_ancestor_closure
from .statistics_service import StatisticsService

__all__ = [
    'NamedElement',
    'HierarchyAnalysis',
    'build_named_tree',
    'ComponentAnalysis',
    'extract_components',
    'find_references',
    'DisplayNode',
    'Visibility',
    'default_classify',
    'project',
    'Match',
    'QueryResult',
    'SearchIndex',
    'build_index',
    'query',
    'build_ancestor_closure',
    'StatisticsService',
]

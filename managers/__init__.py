"""
Managers Package
================

Coordination layer for the ARXML Structure Explorer.

Managers:
- CategoryManager: Tag classification tables
- DocumentManager: Document loading
- ExplorerSession: Snapshot rebuilds and queries
- QueryDebouncer: Latest-query-wins search scheduling
"""

from .category_manager import CategoryManager
from .document_manager import DocumentManager
from .session_manager import ExplorerSession, QueryDebouncer

__all__ = [
    'CategoryManager',
    'DocumentManager',
    'ExplorerSession',
    'QueryDebouncer',
]

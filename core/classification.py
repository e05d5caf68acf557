"""
Static tag classification: icon and coarse search category lookups.
"""

from typing import Dict, List, Sequence, Tuple

from core.settings import (
    CATEGORY_OTHER,
    CATEGORY_PATTERNS,
    DEFAULT_ICON,
    ICON_CATEGORIES,
    QUERY_CATEGORIES,
)


def tag_category(
    tag: str,
    patterns: List[Tuple[str, Sequence[str]]] = CATEGORY_PATTERNS,
) -> str:
    """First category whose substrings occur in ``tag``, else "other"."""
    for category, substrings in patterns:
        if any(substring in tag for substring in substrings):
            return category
    return CATEGORY_OTHER


def tag_icon(tag: str, icons: Dict[str, str] = ICON_CATEGORIES) -> str:
    return icons.get(tag, DEFAULT_ICON)


def is_query_category(category: str) -> bool:
    return category in QUERY_CATEGORIES

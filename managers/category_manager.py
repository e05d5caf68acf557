"""
Category Manager
================

Manages the static tag classification tables.
Follows SRP: Only handles tag -> icon / search-category lookups.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from core.classification import is_query_category, tag_category, tag_icon
from core.settings import (
    CATEGORY_LABELS,
    CATEGORY_PATTERNS,
    ICON_CATEGORIES,
    QUERY_CATEGORIES,
)


class CategoryManager:
    """
    Manager responsible for classifying tags.

    Follows SRP: Only handles classification table lookups.
    """

    def __init__(
        self,
        patterns: Optional[List[Tuple[str, Sequence[str]]]] = None,
        icons: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize category manager.

        Args:
            patterns: Ordered (category, tag substrings) table (default: from settings)
            icons: Tag -> icon category table (default: from settings)
        """
        self.patterns = patterns if patterns is not None else CATEGORY_PATTERNS
        self.icons = icons if icons is not None else ICON_CATEGORIES
        self._cache: Dict[str, str] = {}

    def get_category(self, tag: str) -> str:
        """
        Get the coarse search category of a tag.

        Args:
            tag: Element tag name

        Returns:
            Category key, "other" when no pattern matches
        """
        category = self._cache.get(tag)
        if category is None:
            category = tag_category(tag, self.patterns)
            self._cache[tag] = category
        return category

    def get_icon(self, tag: str) -> str:
        """
        Get icon category for a tag.

        Args:
            tag: Element tag name

        Returns:
            Icon category, default icon for unknown tags
        """
        return tag_icon(tag, self.icons)

    def validate_category(self, category: str) -> bool:
        """
        Check if category is a valid query category.

        Args:
            category: Category key

        Returns:
            True if category can be used as a query filter
        """
        return is_query_category(category)

    def get_category_label(self, category: str) -> str:
        return CATEGORY_LABELS.get(category, "Unknown")

    def get_all_categories(self) -> List[str]:
        """
        Get list of query categories.

        Returns:
            Category keys in display order
        """
        return list(QUERY_CATEGORIES)

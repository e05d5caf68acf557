"""Tests for tag classification."""

import pytest

from core.classification import is_query_category, tag_category, tag_icon
from managers.category_manager import CategoryManager


@pytest.fixture
def manager() -> CategoryManager:
    return CategoryManager()


class TestCategoryManager:
    """Tests for CategoryManager."""

    @pytest.mark.parametrize(
        "tag,category",
        [
            ("APPLICATION-SW-COMPONENT-TYPE", "component"),
            ("SW-COMPONENT-PROTOTYPE", "component"),
            ("COMPOSITION-SW-COMPONENT-TYPE", "component"),
            ("SWC-INTERNAL-BEHAVIOR", "behavior"),
            ("RUNNABLE-ENTITY", "behavior"),
            ("TIMING-EVENT", "behavior"),
            ("APPLICATION-PRIMITIVE-DATA-TYPE", "datatype"),
            ("COMPU-METHOD", "datatype"),
            ("P-PORT-PROTOTYPE", "port"),
            ("AR-PACKAGE", "other"),
        ],
    )
    def test_get_category(self, manager, tag, category):
        assert manager.get_category(tag) == category

    def test_pattern_order_decides(self):
        """The first matching pattern wins."""
        manager = CategoryManager(patterns=[("port", ("PORT",)), ("component", ("COMPONENT",))])
        assert manager.get_category("PORT-COMPONENT") == "port"

    def test_icons(self, manager):
        assert manager.get_icon("AUTOSAR") == "document"
        assert manager.get_icon("R-PORT-PROTOTYPE") == "port"
        assert manager.get_icon("UNKNOWN-TAG") == "file"

    def test_validate_category(self, manager):
        assert manager.validate_category("behavior")
        assert manager.validate_category("all")
        assert not manager.validate_category("other")

    def test_labels(self, manager):
        assert manager.get_all_categories()[0] == "all"
        assert manager.get_category_label("port") == "Ports"
        assert manager.get_category_label("nope") == "Unknown"


class TestClassificationTables:
    """Tests for the table lookups behind CategoryManager."""

    def test_module_functions_agree_with_manager(self, manager):
        for tag in ("RUNNABLE-ENTITY", "R-PORT-PROTOTYPE", "ELEMENTS"):
            assert tag_category(tag) == manager.get_category(tag)
            assert tag_icon(tag) == manager.get_icon(tag)

    def test_query_categories(self):
        assert is_query_category("all")
        assert not is_query_category("other")

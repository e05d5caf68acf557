"""Tests for the named hierarchy builder."""

import pytest

from builders import el, named
from core.errors import AnalysisError
from core.raw_element import RawElement
from core.tree_walker import iter_nodes
from services.hierarchy_service import build_named_tree


class TestBuildNamedTree:
    """Tests for build_named_tree."""

    def test_simple_chain(self, simple_document):
        """Package, component and port form a single named chain."""
        analysis = build_named_tree(simple_document)

        assert len(analysis.tree) == 1
        pkg = analysis.tree[0]
        assert (pkg.identity, pkg.tag) == ("Pkg1", "AR-PACKAGE")
        comp = pkg.children[0]
        assert (comp.identity, comp.tag) == ("CompA", "APPLICATION-SW-COMPONENT-TYPE")
        port = comp.children[0]
        assert (port.identity, port.tag) == ("PortOut", "P-PORT-PROTOTYPE")
        assert port.children == []

        assert analysis.total_named == 3
        assert analysis.counts_by_type == {
            "AR-PACKAGE": 1,
            "APPLICATION-SW-COMPONENT-TYPE": 1,
            "P-PORT-PROTOTYPE": 1,
        }
        assert analysis.max_depth == 2

    def test_paths_include_unnamed_ancestors(self, simple_document):
        port = build_named_tree(simple_document).tree[0].children[0].children[0]
        assert port.path == [
            "AUTOSAR", "AR-PACKAGES", "AR-PACKAGE", "ELEMENTS",
            "APPLICATION-SW-COMPONENT-TYPE", "PORTS", "P-PORT-PROTOTYPE",
        ]
        assert port.location.endswith("PORTS > P-PORT-PROTOTYPE")

    def test_hoisting_through_unnamed_elements(self):
        """Named descendants of unnamed elements attach to the nearest named ancestor."""
        root = named(
            "AR-PACKAGE", "Pkg",
            el("ELEMENTS", el("WRAPPER", named("A", "a"), named("B", "b"))),
            named("C", "c"),
        )
        tree = build_named_tree(root).tree

        assert [child.identity for child in tree[0].children] == ["a", "b", "c"]

    def test_unnamed_root_yields_forest(self):
        root = el("AUTOSAR", named("A", "a"), el("X", named("B", "b")))
        analysis = build_named_tree(root)

        assert [node.identity for node in analysis.tree] == ["a", "b"]
        assert analysis.max_depth == 0

    def test_annotations_are_dropped_with_subtree(self):
        root = named(
            "AR-PACKAGE", "Pkg",
            el("ANNOTATIONS", el("ANNOTATION", named("LABEL", "Hidden"))),
        )
        analysis = build_named_tree(root)

        assert analysis.total_named == 1
        assert analysis.tree[0].children == []

    def test_named_annotation_container_is_kept(self):
        root = named("AR-PACKAGE", "Pkg", named("ANNOTATIONS", "Notes"))
        assert build_named_tree(root).tree[0].children[0].identity == "Notes"

    def test_total_matches_counts_and_walk(self, connector_document):
        analysis = build_named_tree(connector_document)

        assert analysis.total_named == sum(analysis.counts_by_type.values())
        assert analysis.total_named == sum(1 for _ in iter_nodes(analysis.tree))

    def test_elements_by_type(self, simple_document):
        analysis = build_named_tree(simple_document)
        entry = analysis.elements_by_type["P-PORT-PROTOTYPE"][0]

        assert entry["name"] == "PortOut"
        assert entry["type"] == "P-PORT-PROTOTYPE"
        assert entry["path"].startswith("AUTOSAR > ")

    def test_no_named_elements(self):
        analysis = build_named_tree(el("AUTOSAR", el("AR-PACKAGES")))

        assert analysis.is_empty()
        assert analysis.total_named == 0
        assert analysis.max_depth == 0

    def test_missing_root(self):
        assert build_named_tree(None).is_empty()

    def test_malformed_child_raises_analysis_error(self):
        root = RawElement("AUTOSAR", None, ["not an element"])
        with pytest.raises(AnalysisError) as excinfo:
            build_named_tree(root)
        assert excinfo.value.stage == "named hierarchy"

    def test_source_is_not_modified(self, simple_document):
        before = simple_document.to_dict()
        build_named_tree(simple_document)
        assert simple_document.to_dict() == before

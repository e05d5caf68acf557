"""Tests for the filtered-tree reconstructor."""

from core.tree_walker import iter_nodes
from services.filter_service import ancestor_keys, build_ancestor_closure, collect_keys
from services.projection_service import find_node, project
from services.search_service import build_index, query


def root_path(roots, key):
    """Labels from the root down to ``key``, following the tree."""
    path = []
    nodes = roots
    while nodes:
        for node in nodes:
            if key == node.key or key.startswith(node.key + "-"):
                path.append(node.key)
                if node.key == key:
                    return path
                nodes = node.children
                break
        else:
            return None
    return None


class TestAncestorKeys:
    """Tests for ancestor_keys."""

    def test_prefixes(self):
        assert ancestor_keys("0-A-1") == ["0", "0-A", "0-A-1"]
        assert ancestor_keys("0") == ["0"]


class TestBuildAncestorClosure:
    """Tests for build_ancestor_closure."""

    def test_only_match_paths_survive(self, search_document):
        projection = project(search_document)
        matches = query(build_index(projection), "speed", category="port").matches
        tree = build_ancestor_closure(projection, matches)

        labels = [node.label for node in iter_nodes(tree)]
        assert labels == [
            "AUTOSAR",
            "AR-PACKAGES",
            "Pkg (AR-PACKAGE)",
            "ELEMENTS",
            "SpeedSensor (APPLICATION-SW-COMPONENT-TYPE)",
            "PORTS",
            "Speed (P-PORT-PROTOTYPE)",
        ]

    def test_match_and_scaffold_flags(self, search_document):
        projection = project(search_document)
        matches = query(build_index(projection), "speed", category="port").matches
        nodes = list(iter_nodes(build_ancestor_closure(projection, matches)))

        assert nodes[-1].is_match and not nodes[-1].is_scaffold
        assert all(node.is_scaffold and not node.is_match for node in nodes[:-1])

    def test_root_paths_match_canonical_projection(self, search_document):
        """Each match keeps its exact root path and no match-less sibling survives."""
        projection = project(search_document)
        matches = query(build_index(projection), "speed").matches
        tree = build_ancestor_closure(projection, matches)

        for match in matches:
            assert root_path(tree, match.key) == root_path(projection, match.key)

        match_keys = {m.key for m in matches}
        for node in iter_nodes(tree):
            subtree = {n.key for n in iter_nodes([node])}
            assert subtree & match_keys

    def test_matched_ancestor_keeps_matched_descendants(self, search_document):
        projection = project(search_document)
        matches = query(build_index(projection), "speed").matches
        tree = build_ancestor_closure(projection, matches)
        sensor = next(n for n in iter_nodes(tree) if n.identity == "SpeedSensor")

        assert sensor.is_match
        assert [child.tag for child in sensor.children] == ["PORTS"]

    def test_accepts_keys_and_nodes(self, search_document):
        projection = project(search_document)
        node = next(n for n in iter_nodes(projection) if n.identity == "Torque")

        by_node = collect_keys(build_ancestor_closure(projection, [node]))
        by_key = collect_keys(build_ancestor_closure(projection, [node.key]))
        assert by_node == by_key
        assert by_node[-1] == node.key

    def test_canonical_projection_not_mutated(self, search_document):
        projection = project(search_document)
        before = [(n.key, n.is_match, len(n.children)) for n in iter_nodes(projection)]
        matches = query(build_index(projection), "speed").matches
        tree = build_ancestor_closure(projection, matches)

        assert [(n.key, n.is_match, len(n.children)) for n in iter_nodes(projection)] == before
        assert tree[0] is not projection[0]
        assert find_node(projection, "0").is_match is False

    def test_no_matches(self, search_document):
        assert build_ancestor_closure(project(search_document), []) == []

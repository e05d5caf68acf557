"""Tests for the RawElement model and attribute normalization."""

import pytest

import core
from builders import el
from core.raw_element import RawElement, normalize_attributes


class _Attr:
    def __init__(self, name, value):
        self.name = name
        self.value = value


class _DomAttr:
    def __init__(self, name, value):
        self.nodeName = name
        self.nodeValue = value


class TestNormalizeAttributes:
    """Tests for normalize_attributes."""

    def test_mapping(self):
        assert normalize_attributes({"UUID": "u1", "T": 3}) == {"UUID": "u1", "T": "3"}

    def test_attribute_objects(self):
        """Both name/value and nodeName/nodeValue objects are accepted."""
        attrs = [_Attr("UUID", "u1"), _DomAttr("DEST", "PORT")]
        assert normalize_attributes(attrs) == {"UUID": "u1", "DEST": "PORT"}

    def test_serialized_attribute_dicts(self):
        attrs = [{"name": "UUID", "value": "u1"}, {"nodeName": "DEST", "nodeValue": "X"}]
        assert normalize_attributes(attrs) == {"UUID": "u1", "DEST": "X"}

    def test_pairs(self):
        assert normalize_attributes([("UUID", "u1"), ("DEST", None)]) == {"UUID": "u1", "DEST": ""}

    def test_none_and_malformed(self):
        assert normalize_attributes(None) == {}
        assert normalize_attributes("UUID=u1") == {}
        assert normalize_attributes(42) == {}
        assert normalize_attributes([object(), ("UUID", "u1")]) == {"UUID": "u1"}

    def test_shapes_agree(self):
        """Mapping and sequence forms normalize identically."""
        mapping = normalize_attributes({"UUID": "u1", "DEST": "X"})
        sequence = normalize_attributes([_Attr("UUID", "u1"), _Attr("DEST", "X")])
        assert mapping == sequence


class TestRawElement:
    """Tests for RawElement."""

    def test_text_is_trimmed(self):
        assert el("SHORT-NAME", text="  CompA \n").text == "CompA"
        assert el("SHORT-NAME", text="   ").text is None
        assert el("SHORT-NAME").text is None

    def test_attributes_are_copies(self):
        element = el("X", attrs={"UUID": "u1"})
        element.attributes["UUID"] = "changed"
        assert element.get_attribute("UUID") == "u1"
        assert element.get_attribute("MISSING") == ""
        assert element.has_attributes()

    def test_find_child(self):
        element = el("X", el("A"), el("B"), el("A", text="second"))
        assert element.find_child("B").tag == "B"
        assert element.find_child("A").text is None
        assert element.find_child("C") is None

    def test_iter_is_document_order(self):
        tree = el("R", el("A", el("A1"), el("A2")), el("B"))
        assert [node.tag for node in tree.iter()] == ["R", "A", "A1", "A2", "B"]

    def test_from_dict(self):
        data = {
            "nodeName": "AUTOSAR",
            "attributes": [{"name": "xmlns", "value": "http://autosar.org"}],
            "children": [
                {"nodeName": "SHORT-NAME", "textContent": " Root ", "children": []},
            ],
        }
        root = RawElement.from_dict(data)

        assert root.tag == "AUTOSAR"
        assert root.get_attribute("xmlns") == "http://autosar.org"
        assert root.children[0].text == "Root"

    def test_from_dict_requires_node_name(self):
        with pytest.raises(ValueError):
            RawElement.from_dict({"children": []})
        with pytest.raises(ValueError):
            RawElement.from_dict(["AUTOSAR"])

    def test_to_dict(self):
        element = el("A", el("SHORT-NAME", text="N"), attrs={"UUID": "u"})
        data = element.to_dict()
        assert data["nodeName"] == "A"
        assert data["attributes"] == {"UUID": "u"}
        assert data["children"][0]["textContent"] == "N"
        assert "textContent" not in data


class TestCoreLayout:
    """Tests for the core module layout."""

    def test_core_is_a_plain_directory(self):
        assert getattr(core, "__file__", None) is None
        assert list(core.__path__)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/core/test_components.py
"""Unit tests for the component catalogue and attribute handling.

Tests cover:
- Catalogue lookups and read-only registry
- Attribute extraction from tag attributes
- Attribute resolution with aliases, defaults and coercion
- Rejection of non-literal values

"""

import logging

import pytest

from mdxdoc.ast import JsxAttribute, SourceNode
from mdxdoc.components import CATALOGUE, ChildPolicy, ComponentRule, get_rule
from mdxdoc.components.attributes import AttributeSpec, extract_attributes, literal_attribute, resolve_attributes
from mdxdoc.components.catalogue import is_known_component
from mdxdoc.document import BLOCK_TYPES


def _element(*attributes):
    return SourceNode("jsxElement", name="Test", attributes=list(attributes))


@pytest.mark.unit
class TestCatalogue:
    """Tests for the catalogue registry."""

    def test_known_components(self):
        """Test lookups of documented components."""
        assert get_rule("Card").target_kind == "cardBlock"
        assert get_rule("Warning").target_kind == "infoBlock"
        assert get_rule("Tabs").child_component == "Tab"
        assert get_rule("Table").child_policy is ChildPolicy.FLATTEN_MARKDOWN_TABLE
        assert get_rule("Endpoint").child_policy is ChildPolicy.ATOMIC

    def test_unknown_component(self):
        """Test that unknown names have no rule."""
        assert get_rule("Chart") is None
        assert get_rule(None) is None
        assert not is_known_component("card")

    def test_child_rules_are_not_standalone(self):
        """Test that dedicated children only convert inside their parent."""
        assert not get_rule("Tab").is_block
        assert not get_rule("Code").is_block
        assert get_rule("Card").is_block

    def test_registry_is_read_only(self):
        """Test that the registry cannot be modified."""
        with pytest.raises(TypeError):
            CATALOGUE["Chart"] = ComponentRule("Chart", "cardBlock")  # type: ignore[index]

    def test_target_kinds_exist_in_schema(self):
        """Test that every rule produces a document node type."""
        for rule in CATALOGUE.values():
            if rule.target_kind is not None:
                assert rule.target_kind in BLOCK_TYPES

    def test_callout_rules_carry_their_type(self):
        """Test the fixed type attribute of callout components."""
        for name in ("Tip", "Info", "Warning", "Note", "Danger"):
            attrs = resolve_attributes(get_rule(name).attribute_map, {}, name)
            assert attrs == {"type": name.lower(), "title": ""}


@pytest.mark.unit
class TestExtractAttributes:
    """Tests for extract_attributes."""

    def test_value_forms(self):
        """Test quoted, shorthand and expression attributes."""
        node = _element(
            JsxAttribute("title", "Setup"),
            JsxAttribute("disabled"),
            JsxAttribute("count", "3", is_expression=True),
            JsxAttribute("rows", "[['a', 'b']]", is_expression=True),
        )
        assert extract_attributes(node) == {"title": "Setup", "disabled": True, "count": 3, "rows": [["a", "b"]]}

    def test_last_attribute_wins(self):
        """Test duplicate attributes."""
        node = _element(JsxAttribute("title", "first"), JsxAttribute("title", "second"))
        assert extract_attributes(node) == {"title": "second"}


@pytest.mark.unit
class TestResolveAttributes:
    """Tests for resolve_attributes."""

    def test_defaults_fill_missing_attributes(self):
        """Test that every target is present."""
        attrs = resolve_attributes(get_rule("Card").attribute_map, {}, "Card")
        assert attrs == {"title": "", "icon": "", "iconAlign": "left", "href": ""}

    def test_alias_lookup(self):
        """Test that aliases are read after the primary source name."""
        attrs = resolve_attributes(get_rule("Tab").attribute_map, {"label": "Python"}, "Tab")
        assert attrs["label"] == "Python"
        attrs = resolve_attributes(get_rule("Tab").attribute_map, {"title": "Go", "label": "Python"}, "Tab")
        assert attrs["label"] == "Go"

    def test_bool_coercion(self):
        """Test boolean values written as strings."""
        spec = (AttributeSpec("flag", "flag", False, kind="bool"),)
        assert resolve_attributes(spec, {"flag": "true"}, "X") == {"flag": True}
        assert resolve_attributes(spec, {"flag": "no"}, "X") == {"flag": False}
        assert resolve_attributes(spec, {"flag": "maybe"}, "X") == {"flag": False}

    def test_int_coercion(self):
        """Test integer values and fallbacks."""
        spec = (AttributeSpec("count", "count", 2, kind="int"),)
        assert resolve_attributes(spec, {"count": "4"}, "X") == {"count": 4}
        assert resolve_attributes(spec, {"count": 3.0}, "X") == {"count": 3}
        assert resolve_attributes(spec, {"count": "many"}, "X") == {"count": 2}
        assert resolve_attributes(spec, {"count": True}, "X") == {"count": 2}

    def test_empty_string_falls_back(self):
        """Test that an empty string takes the default for string kinds."""
        attrs = resolve_attributes(get_rule("Step").attribute_map, {"title": ""}, "Step")
        assert attrs == {"title": "Step"}

    def test_list_defaults_are_copied(self):
        """Test that documents never share a list default."""
        specs = get_rule("Table").attribute_map
        first = resolve_attributes(specs, {}, "Table")
        second = resolve_attributes(specs, {}, "Table")
        first["rowsPerPageOptions"].append(100)
        assert second["rowsPerPageOptions"] == [5, 10, 25, 50]

    def test_opaque_value_rejected(self, caplog):
        """Test that non-literal values are ignored with a warning."""
        node = _element(JsxAttribute("title", "someVariable", is_expression=True))
        with caplog.at_level(logging.WARNING, logger="mdxdoc"):
            attrs = resolve_attributes(get_rule("Card").attribute_map, extract_attributes(node), "Card")
        assert attrs["title"] == ""
        assert "Ignoring non-literal value for `title` on <Card>" in caplog.text

    def test_literal_attribute(self):
        """Test literal_attribute on missing and literal values."""
        assert literal_attribute({}, "data", "Table") is None
        assert literal_attribute({"data": [1]}, "data", "Table") == [1]

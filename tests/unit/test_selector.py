"""Unit tests for base selector parsing."""

import pytest

from icon_font_generator.core.selector import Selector, parse_selector


class TestParseSelector:
    """Tests for parse_selector."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value):
        """Test that no selector yields no tag and no classes."""
        assert parse_selector(value) == Selector(tag=None, class_names=[])

    def test_tag_only(self):
        """Test a bare tag."""
        assert parse_selector("span") == Selector(tag="span", class_names=[])

    def test_tag_with_classes(self):
        """Test a tag followed by class names."""
        assert parse_selector("span.foo.bar") == Selector(tag="span", class_names=["foo", "bar"])

    def test_classes_only(self):
        """Test that a selector starting with a class has an empty tag."""
        assert parse_selector(".foo") == Selector(tag="", class_names=["foo"])

    def test_attribute_in_tag(self):
        """Test that attribute brackets are part of the tag."""
        selector = parse_selector("i[data-icon='x'].glyph")
        assert selector.tag == "i[data-icon='x']"
        assert selector.class_names == ["glyph"]

    def test_malformed_selector_is_lenient(self):
        """Test that unexpected characters are skipped, not errors."""
        selector = parse_selector("#main .icon")
        assert selector.tag == ""
        assert selector.class_names == ["icon"]

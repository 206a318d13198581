"""
Tests for StyleRegistry class.

This module contains unit tests for style deduplication.
"""

import xml.etree.ElementTree as ET

import pytest

from odt_composer.exceptions import StyleError
from odt_composer.styles import (
    Color,
    ParagraphStyle,
    StyleRegistry,
    TableCellStyle,
    TableColumnStyle,
)
from odt_composer.utils.enums import DirectionType, HorizontalAlignment, Typeface


def style_names(registry):
    """Return the style:name of every written style element."""
    return [element.get("style:name") for element in registry.automatic_styles]


class TestStyleRegistry:
    """Test cases for StyleRegistry class."""
    
    @pytest.fixture
    def registry(self):
        """Create StyleRegistry instance."""
        return StyleRegistry()
    
    def test_init(self, registry):
        """Test StyleRegistry initialization."""
        assert len(registry) == 0
        assert registry.get_names() == []
        assert registry.automatic_styles.tag == "office:automatic-styles"
    
    def test_equal_styles_share_name(self, registry):
        """Test that independently built equal styles resolve to one record."""
        first = ParagraphStyle()
        first.set_font_size(10)
        first.set_font_name("Arial")
        first.set_typeface(Typeface.BOLD)
        
        second = ParagraphStyle()
        second.set_typeface(Typeface.BOLD)
        second.set_font_name("Arial")
        second.set_font_size(10)
        
        name_first = registry.resolve(first)
        name_second = registry.resolve(second)
        
        assert name_first == name_second
        assert style_names(registry) == [name_first]
        assert len(registry) == 1
    
    def test_resolution_order_independent(self):
        """Test that resolution order does not change names."""
        a = TableCellStyle(border={DirectionType.TOP: "1pt solid #000000"})
        b = TableCellStyle(padding={DirectionType.ALL: "1pt"})
        
        forward, backward = StyleRegistry(), StyleRegistry()
        forward_names = [forward.resolve(a), forward.resolve(b)]
        backward_names = [backward.resolve(b), backward.resolve(a)]
        
        assert forward_names == list(reversed(backward_names))
    
    def test_different_styles_get_different_names(self, registry):
        """Test that different content yields different names."""
        left = ParagraphStyle()
        left.set_horizontal_alignment(HorizontalAlignment.LEFT)
        right = ParagraphStyle()
        right.set_horizontal_alignment(HorizontalAlignment.RIGHT)
        
        assert registry.resolve(left) != registry.resolve(right)
        assert len(registry.automatic_styles) == 2
    
    def test_family_is_part_of_identity(self, registry):
        """Test that empty styles of different families do not collide."""
        paragraph_name = registry.resolve(ParagraphStyle())
        column_name = registry.resolve(TableColumnStyle())
        
        assert paragraph_name != column_name
        assert paragraph_name.startswith("P")
        assert column_name.startswith("Col")
    
    def test_resolve_is_idempotent(self, registry):
        """Test that resolving the same instance twice registers once."""
        style = ParagraphStyle()
        style.set_color(Color.from_hex("#ff0000"))
        
        assert registry.resolve(style) == registry.resolve(style)
        assert len(registry.automatic_styles) == 1
    
    def test_mutation_after_resolve_keeps_first_record(self, registry):
        """Test that the first written record is not changed retroactively."""
        style = ParagraphStyle()
        style.set_font_size(10)
        first_name = registry.resolve(style)
        first_element = registry.automatic_styles[0]
        
        style.set_font_size(12)
        second_name = registry.resolve(style)
        
        assert first_name != second_name
        text_properties = [child for child in first_element if child.tag == "style:text-properties"][0]
        assert text_properties.get("fo:font-size") == "10pt"
        assert len(registry.automatic_styles) == 2
    
    def test_collision_raises(self, registry, monkeypatch):
        """Test that a name bound to a different property set is a failure."""
        first = ParagraphStyle()
        first.set_font_size(10)
        second = ParagraphStyle()
        second.set_font_size(11)
        
        monkeypatch.setattr(ParagraphStyle, "get_name", lambda self: "Pfixed")
        registry.resolve(first)
        
        with pytest.raises(StyleError):
            registry.resolve(second)
    
    def test_existing_destination_entry_not_duplicated(self):
        """Test that a pre-existing entry in the destination is reused."""
        style = ParagraphStyle()
        container = ET.Element("office:automatic-styles")
        existing = ET.SubElement(container, "style:style")
        existing.set("style:name", style.get_name())
        
        registry = StyleRegistry(container)
        name = registry.resolve(style)
        
        assert name == style.get_name()
        assert len(container) == 1
        assert name in registry
    
    def test_lookup(self, registry):
        """Test lookup of registered and unknown names."""
        style = TableColumnStyle()
        name = registry.resolve(style)
        
        assert registry.lookup(name) == style.canonical_form()
        assert registry.lookup("unknown") is None

"""
Tests for Meta class.
"""

import xml.etree.ElementTree as ET
from datetime import datetime

import pytest

from odt_composer.metadata import Meta


def child_texts(element):
    """Return (tag, text) of every child."""
    return [(child.tag, child.text) for child in element]


class TestMeta:
    """Test cases for Meta class."""
    
    @pytest.fixture
    def meta(self):
        """Create Meta instance with a fixed creation date."""
        meta = Meta()
        meta.set_creation_date(datetime(2024, 5, 1, 12, 30, 15, 123456))
        return meta
    
    def test_defaults(self):
        """Test default values."""
        meta = Meta()
        
        assert meta.get_generator() == "odt-composer"
        assert meta.get_title() is None
        assert meta.get_keywords() == []
        assert meta.get_editing_cycles() == 1
        assert isinstance(meta.get_creation_date(), datetime)
    
    def test_minimal_output(self, meta):
        """Test that only generator, creation date and cycles are written by default."""
        element = meta.to_xml(ET.Element("office:document"))
        
        assert element.tag == "office:meta"
        assert child_texts(element) == [
            ("meta:generator", "odt-composer"),
            ("meta:creation-date", "2024-05-01T12:30:15"),
            ("meta:editing-cycles", "1"),
        ]
    
    def test_full_output(self, meta):
        """Test that all set fields are written."""
        meta.set_title("Report")
        meta.set_description("Monthly")
        meta.set_subject("Sales")
        meta.add_keyword("a")
        meta.add_keyword("b")
        meta.set_initial_creator("Alice")
        meta.set_creator("Bob")
        meta.set_printed_by("Carol")
        meta.set_date(datetime(2024, 5, 2))
        meta.set_print_date(datetime(2024, 5, 3))
        meta.set_language("de-DE")
        meta.set_editing_cycles(4)
        
        element = meta.to_xml(ET.Element("office:document"))
        
        assert child_texts(element) == [
            ("meta:generator", "odt-composer"),
            ("dc:title", "Report"),
            ("dc:description", "Monthly"),
            ("dc:subject", "Sales"),
            ("meta:keyword", "a"),
            ("meta:keyword", "b"),
            ("meta:initial-creator", "Alice"),
            ("dc:creator", "Bob"),
            ("meta:printed-by", "Carol"),
            ("meta:creation-date", "2024-05-01T12:30:15"),
            ("dc:date", "2024-05-02T00:00:00"),
            ("meta:print-date", "2024-05-03T00:00:00"),
            ("dc:language", "de-DE"),
            ("meta:editing-cycles", "4"),
        ]
    
    def test_keywords(self, meta):
        """Test keyword list management."""
        meta.add_keyword("x")
        meta.add_keyword("y")
        
        assert meta.remove_keyword("x") is True
        assert meta.remove_keyword("missing") is False
        assert meta.get_keywords() == ["y"]
        
        meta.clear_keywords()
        assert meta.get_keywords() == []
    
    @pytest.mark.parametrize("cycles", [0, -1])
    def test_invalid_editing_cycles(self, meta, cycles):
        """Test editing cycles validation."""
        with pytest.raises(ValueError):
            meta.set_editing_cycles(cycles)

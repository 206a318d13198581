"""
Tests for FlatXmlExporter and TextDocument serialization.
"""

import pytest

from odt_composer import TextDocument
from odt_composer.exceptions import ExportError
from odt_composer.export import FlatXmlExporter
from odt_composer.styles import ParagraphStyle
from odt_composer.utils.enums import FontPitch


class TestFlatXmlExporter:
    """Test cases for FlatXmlExporter class."""
    
    def test_init_requires_document(self):
        """Test that a document is required."""
        with pytest.raises(ValueError):
            FlatXmlExporter(None)
    
    def test_root_element(self, document, parse_xml, ns):
        """Test root attributes and namespace declarations."""
        content = document.to_string()
        root = parse_xml(content)
        
        assert content.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert root.tag == f"{{{ns['office']}}}document"
        assert root.get(f"{{{ns['office']}}}mimetype") == "application/vnd.oasis.opendocument.text"
        assert root.get(f"{{{ns['office']}}}version") == "1.2"
    
    def test_section_order(self, document, parse_xml, ns):
        """Test metadata, fonts, automatic styles and body order."""
        document.declare_font("Arial", "Arial")
        document.add_paragraph("x")
        
        root = parse_xml(document.to_string())
        
        office = ns["office"]
        assert [child.tag for child in root] == [
            f"{{{office}}}meta",
            f"{{{office}}}font-face-decls",
            f"{{{office}}}automatic-styles",
            f"{{{office}}}body",
        ]
    
    def test_no_font_section_without_fonts(self, document, parse_xml, ns):
        """Test that the font section is omitted when no font is declared."""
        root = parse_xml(document.to_string())
        
        assert root.find("office:font-face-decls", ns) is None
    
    def test_font_family_quoting(self, document, parse_xml, ns):
        """Test that family names with spaces are quoted."""
        document.declare_font("Ubuntu Mono", "Ubuntu Mono", FontPitch.FIXED)
        document.declare_font("Arial", "Arial")
        
        root = parse_xml(document.to_string())
        faces = root.findall("office:font-face-decls/style:font-face", ns)
        
        assert [face.get(f"{{{ns['svg']}}}font-family") for face in faces] == ["'Ubuntu Mono'", "Arial"]
        assert faces[0].get(f"{{{ns['style']}}}font-pitch") == "fixed"
    
    def test_body_order(self, document, parse_xml, ns):
        """Test that body nodes keep their order."""
        document.add_heading("H", 1)
        document.add_paragraph("A")
        document.add_paragraph("B")
        
        root = parse_xml(document.to_string())
        text = root.find("office:body/office:text", ns)
        
        assert [child.text for child in text] == ["H", "A", "B"]
        assert text[0].tag == f"{{{ns['text']}}}h"
    
    def test_styles_deduplicated(self, document, parse_xml, ns):
        """Test that equal styles are written once."""
        for _ in range(3):
            style = ParagraphStyle()
            style.set_font_size(10)
            document.add_paragraph("x", style)
        
        root = parse_xml(document.to_string())
        styles = root.findall("office:automatic-styles/style:style", ns)
        paragraphs = root.findall("office:body/office:text/text:p", ns)
        
        assert len(styles) == 1
        name = styles[0].get(f"{{{ns['style']}}}name")
        assert {p.get(f"{{{ns['text']}}}style-name") for p in paragraphs} == {name}
    
    def test_empty_table_suppressed(self, document, parse_xml, ns):
        """Test that a table without rows is not written."""
        document.add_table(2)
        table = document.add_table(2)
        table.add_row()
        
        root = parse_xml(document.to_string())
        
        assert root.findall(".//table:table", ns) == []
        assert root.findall("office:automatic-styles/style:style", ns) == []
    
    def test_repeated_export_is_stable(self, document):
        """Test that each export runs a fresh pass."""
        style = ParagraphStyle()
        style.set_font_size(9)
        document.add_paragraph("x", style)
        
        assert document.to_string() == document.to_string()
    
    def test_save_flat(self, document, temp_dir, parse_xml, ns):
        """Test writing the document to a file."""
        document.add_paragraph("saved")
        path = document.save_flat(temp_dir / "out" / "doc.fodt")
        
        root = parse_xml(path.read_text(encoding="utf-8"))
        
        assert root.find("office:body/office:text/text:p", ns).text == "saved"
    
    def test_save_flat_pretty(self, document, temp_dir):
        """Test indented output."""
        document.add_paragraph("saved")
        path = document.save_flat_pretty(temp_dir / "doc.fodt")
        
        assert "\n\t<office:meta>" in path.read_text(encoding="utf-8")
    
    def test_export_failure_raises(self, document, temp_dir):
        """Test that write failures surface as ExportError."""
        blocker = temp_dir / "file"
        blocker.write_text("x")
        
        with pytest.raises(ExportError):
            document.save_flat(blocker / "doc.fodt")


class TestTextDocument:
    """Test cases for TextDocument class."""
    
    def test_add_methods(self, document):
        """Test the convenience add methods."""
        heading = document.add_heading("Title", 2)
        paragraph = document.add_paragraph("Text")
        items = document.add_list()
        table = document.add_table(3)
        
        assert document.get_all() == [heading, paragraph, items, table]
        assert heading.get_level() == 2
        assert table.num_cols == 3
    
    def test_declare_font(self, document):
        """Test font bookkeeping."""
        font = document.declare_font("Arial", "Arial")
        
        assert document.get_fonts() == [font]
        assert font.pitch is FontPitch.VARIABLE

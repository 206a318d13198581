"""
Text document for ODT output.

The document is the root of the element tree and owns the metadata and the
font declarations. Serialization happens in one pass over the whole tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .export.xml_exporter import FlatXmlExporter
from .metadata.meta import Meta
from .models.base import Node
from .models.list import List as ListNode
from .models.paragraph import Heading, Paragraph
from .models.table import Table
from .styles.paragraph_style import ParagraphStyle
from .utils.enums import FontPitch, NodeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FontDeclaration:
    """A declared font: style name, font family and pitch."""

    name: str
    family: str
    pitch: FontPitch


class TextDocument(Node):
    """
    Represents an ODT text document.
    
    Examples:
        >>> doc = TextDocument()
        >>> doc.add_heading("Report", 1)
        >>> doc.add_paragraph("Body")
        >>> xml = doc.to_string()
    """

    kind = NodeKind.DOCUMENT

    def __init__(self):
        super().__init__()
        self._meta = Meta()
        self._fonts: List[FontDeclaration] = []

    def get_meta(self) -> Meta:
        """Return the metadata of the document."""
        return self._meta

    def declare_font(self, name: str, family: str, pitch: FontPitch = FontPitch.VARIABLE) -> FontDeclaration:
        """
        Declare a font to be used in the document.
        
        There is no check whether the font exists on the target system.
        
        Args:
            name: Font name referenced by paragraph styles
            family: Font family name
            pitch: Font pitch
        """
        font = FontDeclaration(name, family, FontPitch(pitch))
        self._fonts.append(font)
        logger.debug(f"Declared font {name} ({family})")
        return font

    def get_fonts(self) -> List[FontDeclaration]:
        return list(self._fonts)

    def add_heading(self, text: Optional[str] = None, level: int = 1,
                    style: Optional[ParagraphStyle] = None) -> Heading:
        """Add a heading at the end of the document."""
        return self.append(Heading(text, level, style))

    def add_paragraph(self, text: Optional[str] = None,
                      style: Optional[ParagraphStyle] = None) -> Paragraph:
        """Add a paragraph at the end of the document."""
        return self.append(Paragraph(text, style))

    def add_list(self) -> ListNode:
        """Add an empty list at the end of the document."""
        return self.append(ListNode())

    def add_table(self, num_cols: int) -> Table:
        """Add an empty table with the given number of columns."""
        return self.append(Table(num_cols))

    def to_string(self, pretty: bool = False) -> str:
        """Return the document in flat open document XML format."""
        return FlatXmlExporter(self).to_string(pretty=pretty)

    def save_flat(self, file_path: Union[str, Path]) -> Path:
        """Save the document in flat open document XML format."""
        return FlatXmlExporter(self).export(file_path)

    def save_flat_pretty(self, file_path: Union[str, Path]) -> Path:
        """Save the document in flat open document XML format, indented."""
        return FlatXmlExporter(self).export(file_path, pretty=True)

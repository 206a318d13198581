"""
ODT Composer - programmatic generation of OpenDocument text documents.

This package builds an element tree of headings, paragraphs, lists, tables and
images and serializes it as a flat OpenDocument text file (.fodt). It handles:

- Content-addressed automatic styles, each distinct style written once
- Table layout with border presets for single and multi-row blocks
- Conversion of simple HTML markup into document nodes
- Document metadata and font declarations

Main Components:
- TextDocument: Root of the element tree
- DocumentBuilder: Imperative report helper
- Models: Element tree nodes
- Styles: Paragraph, table, column, cell and image styles
- Engine: Table layout engine
- Parser: Markup converter
- Export: Flat XML serializer
"""

from .builder import DocumentBuilder
from .config import BuilderOptions
from .document import FontDeclaration, TextDocument
from .engine import TableLayoutEngine
from .exceptions import (
    ExportError,
    MediaError,
    OdtComposerError,
    StyleError,
    TableStateError,
)
from .export import FlatXmlExporter
from .metadata import Meta
from .models import (
    Heading,
    Image,
    List,
    ListItem,
    Node,
    Paragraph,
    Table,
    TableCell,
    TableColumn,
    TableRow,
)
from .parser import MarkupConverter, convert_markup
from .styles import (
    Color,
    ImageStyle,
    ParagraphStyle,
    StyleRegistry,
    TabStop,
    TableCellStyle,
    TableColumnStyle,
    TableStyle,
)
from .utils.enums import (
    AnchorType,
    DirectionType,
    FontPitch,
    HorizontalAlignment,
    TabStopType,
    TableAlignment,
    TextTransformation,
    Typeface,
    ValueType,
    VerticalAlignment,
)

__version__ = "1.0.0"

__all__ = [
    # Document
    "TextDocument",
    "FontDeclaration",
    "DocumentBuilder",
    "BuilderOptions",
    "Meta",

    # Element tree
    "Node",
    "Heading",
    "Paragraph",
    "List",
    "ListItem",
    "Table",
    "TableColumn",
    "TableRow",
    "TableCell",
    "Image",

    # Styles
    "Color",
    "ImageStyle",
    "ParagraphStyle",
    "StyleRegistry",
    "TabStop",
    "TableStyle",
    "TableColumnStyle",
    "TableCellStyle",

    # Engines
    "TableLayoutEngine",
    "MarkupConverter",
    "convert_markup",
    "FlatXmlExporter",

    # Enumerations
    "AnchorType",
    "DirectionType",
    "FontPitch",
    "HorizontalAlignment",
    "TabStopType",
    "TableAlignment",
    "TextTransformation",
    "Typeface",
    "ValueType",
    "VerticalAlignment",

    # Exceptions
    "OdtComposerError",
    "TableStateError",
    "StyleError",
    "MediaError",
    "ExportError",
]

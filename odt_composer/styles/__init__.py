"""
Styles module for ODT documents.

Content-addressed automatic styles and the registry that deduplicates them.
"""

from .base import Style
from .color import Color
from .image_style import ImageStyle
from .paragraph_style import ParagraphStyle
from .registry import StyleRegistry
from .tab_stop import TabStop
from .table_style import TableCellStyle, TableColumnStyle, TableStyle

__all__ = [
    "Style",
    "StyleRegistry",
    "Color",
    "ImageStyle",
    "ParagraphStyle",
    "TabStop",
    "TableStyle",
    "TableColumnStyle",
    "TableCellStyle",
]

"""
Paragraph style for ODT documents.

Handles text properties (color, font, size, typeface, transformation) and
paragraph properties (alignment, page break, keep together, tab stops).
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Tuple, Union

from ..utils.enums import HorizontalAlignment, StyleFamily, TextTransformation, Typeface
from ..utils.odf_names import OdfAttribute, OdfElement
from ..utils.units import format_length
from .base import Style
from .color import Color
from .tab_stop import TabStop

logger = logging.getLogger(__name__)


class ParagraphStyle(Style):
    """
    Represents the style of a paragraph or heading.
    
    Only properties that were set are written.
    """

    family = StyleFamily.PARAGRAPH
    name_prefix = "P"

    def __init__(self):
        """Initialize paragraph style without any property set."""
        self._color: Optional[Color] = None
        self._font_name: Optional[str] = None
        self._font_size: Optional[float] = None
        self._typeface = Typeface.NORMAL
        self._alignment = HorizontalAlignment.DEFAULT
        self._page_break_before = False
        self._keep_together = False
        self._text_transformation = TextTransformation.NONE
        self._tab_stops: List[TabStop] = []

    def set_color(self, color: Optional[Color]) -> None:
        self._color = color

    def get_color(self) -> Optional[Color]:
        return self._color

    def set_font_name(self, name: Optional[str]) -> None:
        """
        Set the font name.
        
        The font must be declared on the document to be displayed properly.
        """
        self._font_name = name

    def get_font_name(self) -> Optional[str]:
        return self._font_name

    def set_font_size(self, size: Union[int, float]) -> None:
        """
        Set the font size in points.
        
        Args:
            size: Font size; must be positive
        """
        if size is None or size <= 0:
            raise ValueError(f"Font size must be positive, got {size!r}")
        self._font_size = size

    def get_font_size(self) -> Optional[float]:
        return self._font_size

    def set_typeface(self, typeface: Typeface) -> None:
        self._typeface = Typeface(typeface)

    def get_typeface(self) -> Typeface:
        return self._typeface

    def set_horizontal_alignment(self, alignment: HorizontalAlignment) -> None:
        self._alignment = HorizontalAlignment(alignment)

    def get_horizontal_alignment(self) -> HorizontalAlignment:
        return self._alignment

    def set_page_break_before(self, page_break: bool = True) -> None:
        self._page_break_before = bool(page_break)

    def get_page_break_before(self) -> bool:
        return self._page_break_before

    def set_keep_together(self, keep_together: bool = True) -> None:
        self._keep_together = bool(keep_together)

    def get_keep_together(self) -> bool:
        return self._keep_together

    def set_text_transformation(self, transformation: TextTransformation) -> None:
        self._text_transformation = TextTransformation(transformation)

    def get_text_transformation(self) -> TextTransformation:
        return self._text_transformation

    def add_tab_stop(self, tab_stop: TabStop) -> TabStop:
        """Add a tab stop; stops are kept ordered by position."""
        self._tab_stops.append(tab_stop)
        self._tab_stops.sort(key=lambda stop: stop.get_position())
        return tab_stop

    def get_tab_stops(self) -> List[TabStop]:
        return list(self._tab_stops)

    def clear_tab_stops(self) -> None:
        self._tab_stops = []

    def get_properties(self) -> Dict[str, Dict[str, str]]:
        paragraph: Dict[str, str] = {}
        if self._alignment is not HorizontalAlignment.DEFAULT:
            paragraph[OdfAttribute.FO_TEXT_ALIGN] = self._alignment.value
        if self._page_break_before:
            paragraph[OdfAttribute.FO_BREAK_BEFORE] = "page"
        if self._keep_together:
            paragraph[OdfAttribute.FO_KEEP_TOGETHER] = "always"

        text: Dict[str, str] = {}
        if self._color is not None:
            text[OdfAttribute.FO_COLOR] = self._color.to_hex()
        if self._font_name:
            text[OdfAttribute.STYLE_FONT_NAME] = self._font_name
        if self._font_size is not None:
            text[OdfAttribute.FO_FONT_SIZE] = format_length(self._font_size, 'pt')
        if self._typeface in (Typeface.BOLD, Typeface.BOLD_ITALIC):
            text[OdfAttribute.FO_FONT_WEIGHT] = "bold"
        if self._typeface in (Typeface.ITALIC, Typeface.BOLD_ITALIC):
            text[OdfAttribute.FO_FONT_STYLE] = "italic"
        if self._text_transformation is not TextTransformation.NONE:
            text[OdfAttribute.FO_TEXT_TRANSFORM] = self._text_transformation.value

        properties: Dict[str, Dict[str, str]] = {}
        if paragraph or self._tab_stops:
            properties[OdfElement.STYLE_PARAGRAPH_PROPERTIES] = paragraph
        if text:
            properties[OdfElement.STYLE_TEXT_PROPERTIES] = text
        return properties

    def canonical_items(self) -> List[Tuple[str, str]]:
        items = super().canonical_items()
        for index, tab_stop in enumerate(self._tab_stops):
            items.append((f"{OdfElement.STYLE_TAB_STOP}/{index}", tab_stop.canonical_value()))
        return sorted(items)

    def write_element(self, container: ET.Element, name: str) -> ET.Element:
        style_element = super().write_element(container, name)
        if self._tab_stops:
            paragraph_properties = next(
                child for child in style_element if child.tag == OdfElement.STYLE_PARAGRAPH_PROPERTIES
            )
            tab_stops_element = ET.SubElement(paragraph_properties, OdfElement.STYLE_TAB_STOPS)
            for tab_stop in self._tab_stops:
                tab_stop.to_xml(tab_stops_element)
        return style_element

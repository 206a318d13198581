"""Paragraph and heading models for ODT documents."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING, Optional

from ..styles.paragraph_style import ParagraphStyle
from ..utils.enums import NodeKind
from ..utils.odf_names import OdfAttribute, OdfElement
from .base import Node

if TYPE_CHECKING:
    from ..styles.registry import StyleRegistry

logger = logging.getLogger(__name__)

_SPECIAL_TEXT = re.compile(r'(\n|\t| {2,})')


class Paragraph(Node):
    """
    Represents a paragraph of text.
    
    The text is terminal content; inline nodes such as images may be appended
    as children and are written after the text.
    """

    kind = NodeKind.PARAGRAPH

    def __init__(self, text: Optional[str] = None, style: Optional[ParagraphStyle] = None):
        """
        Initialize paragraph.
        
        Args:
            text: Text content of the paragraph
            style: Paragraph style; no style attribute is written when omitted
        """
        super().__init__()
        self._text = text or ""
        self._style = style

    def add_text(self, text: str) -> None:
        """Append text to the end of the paragraph."""
        self._text += text

    def set_text(self, text: str) -> None:
        self._text = text or ""

    def get_text(self) -> str:
        return self._text

    def set_style(self, style: Optional[ParagraphStyle]) -> None:
        self._style = style

    def get_style(self) -> Optional[ParagraphStyle]:
        return self._style

    def write_attributes(self, element: ET.Element, registry: StyleRegistry) -> None:
        if self._style is not None:
            element.set(OdfAttribute.TEXT_STYLE_NAME, registry.resolve(self._style))

    def write_children(self, element: ET.Element, registry: StyleRegistry) -> None:
        write_text(element, self._text)
        super().write_children(element, registry)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(text={self._text[:20]!r})"


class Heading(Paragraph):
    """Represents a heading with an outline level starting at 1."""

    kind = NodeKind.HEADING

    def __init__(self, text: Optional[str] = None, level: int = 1,
                 style: Optional[ParagraphStyle] = None):
        super().__init__(text, style)
        self._level = 1
        self.set_level(level)

    def set_level(self, level: int) -> None:
        if not isinstance(level, int) or level < 1:
            raise ValueError(f"Heading level must be an integer >= 1, got {level!r}")
        self._level = level

    def get_level(self) -> int:
        return self._level

    def write_attributes(self, element: ET.Element, registry: StyleRegistry) -> None:
        element.set(OdfAttribute.TEXT_OUTLINE_LEVEL, str(self._level))
        super().write_attributes(element, registry)


def write_text(element: ET.Element, text: str) -> None:
    """
    Write text into element using ODF whitespace elements.
    
    Newlines become text:line-break, tabs text:tab and runs of spaces one
    space followed by text:s with the remaining count.
    """
    last: Optional[ET.Element] = None

    def put(chunk: str) -> None:
        if last is None:
            element.text = (element.text or "") + chunk
        else:
            last.tail = (last.tail or "") + chunk

    for part in _SPECIAL_TEXT.split(text):
        if not part:
            continue
        if part == "\n":
            last = ET.SubElement(element, OdfElement.TEXT_LINE_BREAK)
        elif part == "\t":
            last = ET.SubElement(element, OdfElement.TEXT_TAB)
        elif part.startswith("  "):
            put(" ")
            last = ET.SubElement(element, OdfElement.TEXT_S)
            last.set(OdfAttribute.TEXT_C, str(len(part) - 1))
        else:
            put(part)

"""Tab stops of a paragraph style."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from ..utils.enums import TabStopType
from ..utils.odf_names import OdfAttribute, OdfElement
from ..utils.units import format_length


class TabStop:
    """
    A tab stop used to align text in a paragraph.
    
    Positions are given in centimeters relative to the left margin; negative
    positions are clamped to 0.
    """

    def __init__(self, position: float, tab_type: TabStopType = TabStopType.LEFT):
        self._position = 0.0
        self._type = TabStopType(tab_type)
        self.set_position(position)

    def set_position(self, position: float) -> None:
        self._position = max(position, 0)

    def get_position(self) -> float:
        return self._position

    def set_type(self, tab_type: TabStopType) -> None:
        self._type = TabStopType(tab_type)

    def get_type(self) -> TabStopType:
        return self._type

    def canonical_value(self) -> str:
        """Return position and type as one comparable string."""
        return f"{format_length(self._position, 'cm')} {self._type.value}"

    def to_xml(self, parent: ET.Element) -> ET.Element:
        """
        Emit the tab stop into a style:tab-stops element.
        
        Args:
            parent: The style:tab-stops element
        """
        element = ET.SubElement(parent, OdfElement.STYLE_TAB_STOP)
        element.set(OdfAttribute.STYLE_POSITION, format_length(self._position, 'cm'))
        if self._type is not TabStopType.LEFT:
            element.set(OdfAttribute.STYLE_TYPE, self._type.value)
        return element

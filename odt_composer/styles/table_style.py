"""
Table, table column and table cell styles.

Handles table width and alignment, column widths, and cell borders, padding
and vertical alignment.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional, Union

from ..utils.enums import DirectionType, StyleFamily, TableAlignment, VerticalAlignment
from ..utils.odf_names import OdfAttribute, OdfElement
from ..utils.units import format_number
from .base import Style

logger = logging.getLogger(__name__)


class TableStyle(Style):
    """Represents the style of a table. Defaults to full width within the margins."""

    family = StyleFamily.TABLE
    name_prefix = "Tbl"

    def __init__(self):
        self._width = "100%"
        self._relative_width = 0
        self._alignment = TableAlignment.MARGINS

    def set_width(self, width: str) -> None:
        """Set the absolute width as a length string, e.g. '16cm'."""
        self._width = width or ""

    def get_width(self) -> str:
        return self._width

    def set_relative_width(self, width: Union[int, float]) -> None:
        if width < 0:
            raise ValueError(f"Relative width must not be negative, got {width}")
        self._relative_width = width

    def get_relative_width(self) -> Union[int, float]:
        return self._relative_width

    def set_alignment(self, alignment: TableAlignment) -> None:
        self._alignment = TableAlignment(alignment)

    def get_alignment(self) -> TableAlignment:
        return self._alignment

    def get_properties(self) -> Dict[str, Dict[str, str]]:
        table: Dict[str, str] = {}
        if self._width:
            table[OdfAttribute.STYLE_WIDTH] = self._width
        if self._relative_width:
            table[OdfAttribute.STYLE_REL_WIDTH] = f"{format_number(self._relative_width)}%"
        table[OdfAttribute.TABLE_ALIGN] = self._alignment.value
        return {OdfElement.STYLE_TABLE_PROPERTIES: table}


class TableColumnStyle(Style):
    """
    Represents the style of a table column.
    
    A column uses exactly one width mode: absolute, relative or optimal.
    Setting one mode resets the others; optimal width is the default.
    """

    family = StyleFamily.TABLE_COLUMN
    name_prefix = "Col"

    def __init__(self):
        self._width = ""
        self._relative_width = 0
        self._use_optimal_width = True

    def set_width(self, width: str) -> None:
        """Set the absolute width as a length string, e.g. '3.4cm'."""
        self._width = width or ""
        self._relative_width = 0
        self._use_optimal_width = False

    def get_width(self) -> str:
        return self._width

    def set_relative_width(self, width: Union[int, float]) -> None:
        if width < 0:
            raise ValueError(f"Relative width must not be negative, got {width}")
        self._relative_width = width
        self._width = ""
        self._use_optimal_width = False

    def get_relative_width(self) -> Union[int, float]:
        return self._relative_width

    def set_use_optimal_width(self, use_optimal: bool = True) -> None:
        self._use_optimal_width = bool(use_optimal)
        self._width = ""
        self._relative_width = 0

    def get_use_optimal_width(self) -> bool:
        return self._use_optimal_width

    def get_properties(self) -> Dict[str, Dict[str, str]]:
        column: Dict[str, str] = {}
        if self._width:
            column[OdfAttribute.STYLE_COLUMN_WIDTH] = self._width
        if self._relative_width:
            # Relative column widths are unitless proportions followed by '*'.
            column[OdfAttribute.STYLE_REL_COLUMN_WIDTH] = f"{format_number(self._relative_width)}*"
        if self._use_optimal_width:
            column[OdfAttribute.STYLE_USE_OPTIMAL_COLUMN_WIDTH] = "true"
        return {OdfElement.STYLE_TABLE_COLUMN_PROPERTIES: column}


class TableCellStyle(Style):
    """
    Represents the style of a table cell.
    
    Borders and padding are kept per side; DirectionType.ALL maps to the
    shorthand attribute (fo:border, fo:padding).
    """

    family = StyleFamily.TABLE_CELL
    name_prefix = "Cell"

    def __init__(self, vertical_alignment: VerticalAlignment = VerticalAlignment.TOP,
                 border: Optional[Mapping[DirectionType, str]] = None,
                 padding: Optional[Mapping[DirectionType, str]] = None):
        """
        Initialize table cell style.
        
        Args:
            vertical_alignment: Vertical alignment of the cell content
            border: Initial border spec per side, e.g. {TOP: '1pt solid #000000'}
            padding: Initial padding per side, e.g. {LEFT: '1.5mm'}
        """
        self._vertical_alignment = VerticalAlignment(vertical_alignment)
        self._border: Dict[DirectionType, str] = {}
        self._padding: Dict[DirectionType, str] = {}
        for where, value in (border or {}).items():
            self.add_border(where, value)
        for where, value in (padding or {}).items():
            self.add_padding(where, value)

    def set_vertical_alignment(self, alignment: VerticalAlignment) -> None:
        self._vertical_alignment = VerticalAlignment(alignment)

    def get_vertical_alignment(self) -> VerticalAlignment:
        return self._vertical_alignment

    def add_border(self, where: DirectionType, border: str) -> None:
        self._border[DirectionType(where)] = border

    def reset_border(self) -> None:
        self._border = {}

    def get_border(self) -> Dict[DirectionType, str]:
        return dict(self._border)

    def add_padding(self, where: DirectionType, padding: str) -> None:
        self._padding[DirectionType(where)] = padding

    def reset_padding(self) -> None:
        self._padding = {}

    def get_padding(self) -> Dict[DirectionType, str]:
        return dict(self._padding)

    def get_properties(self) -> Dict[str, Dict[str, str]]:
        cell: Dict[str, str] = {OdfAttribute.STYLE_VERTICAL_ALIGN: self._vertical_alignment.value}
        cell.update(_side_attributes(OdfAttribute.FO_BORDER, self._border))
        cell.update(_side_attributes(OdfAttribute.FO_PADDING, self._padding))
        return {OdfElement.STYLE_TABLE_CELL_PROPERTIES: cell}


def _side_attributes(base: str, values: Mapping[DirectionType, str]) -> Dict[str, str]:
    attributes = {}
    for where in DirectionType:
        if where not in values:
            continue
        key = base if where is DirectionType.ALL else f"{base}-{where.value}"
        attributes[key] = values[where]
    return attributes

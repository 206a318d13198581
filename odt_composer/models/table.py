"""
Table models for ODT documents.

A table holds one column definition per column and rows of cells. Tables
and rows without content are not written.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING, List, Optional, Union

from ..styles.table_style import TableCellStyle, TableColumnStyle, TableStyle
from ..utils.enums import NodeKind, ValueType
from ..utils.odf_names import OdfAttribute
from .base import Node
from .paragraph import Paragraph

if TYPE_CHECKING:
    from ..styles.registry import StyleRegistry

logger = logging.getLogger(__name__)


class TableColumn(Node):
    """Column definition of a table; carries the column style."""

    kind = NodeKind.TABLE_COLUMN

    def __init__(self, style: Optional[TableColumnStyle] = None):
        super().__init__()
        self._style = style or TableColumnStyle()

    def get_style(self) -> TableColumnStyle:
        return self._style

    def set_style(self, style: TableColumnStyle) -> None:
        self._style = style

    def write_attributes(self, element: ET.Element, registry: StyleRegistry) -> None:
        element.set(OdfAttribute.TABLE_STYLE_NAME, registry.resolve(self._style))


class TableCell(Node):
    """Represents a table cell. Any node may be appended as cell content."""

    kind = NodeKind.TABLE_CELL

    def __init__(self, content: Union[str, Paragraph, None] = None,
                 value_type: ValueType = ValueType.STRING,
                 style: Optional[TableCellStyle] = None):
        """
        Initialize table cell.
        
        Args:
            content: Text of the cell or a predefined paragraph
            value_type: Value type written as office:value-type
            style: Cell style; a default cell style is used when omitted
        """
        super().__init__()
        self._value_type = ValueType(value_type)
        self._style = style or TableCellStyle()

        if isinstance(content, Paragraph):
            self.append(content)
        elif content:
            self.append(Paragraph(content))

    def get_value_type(self) -> ValueType:
        return self._value_type

    def set_value_type(self, value_type: ValueType) -> None:
        self._value_type = ValueType(value_type)

    def get_style(self) -> TableCellStyle:
        return self._style

    def set_style(self, style: TableCellStyle) -> None:
        self._style = style

    def write_attributes(self, element: ET.Element, registry: StyleRegistry) -> None:
        element.set(OdfAttribute.OFFICE_VALUE_TYPE, self._value_type.value)
        element.set(OdfAttribute.TABLE_STYLE_NAME, registry.resolve(self._style))


class TableRow(Node):
    """Represents a table row; only a container for cells."""

    kind = NodeKind.TABLE_ROW

    def add_cell(self, content: Union[str, Paragraph, None] = None,
                 value_type: ValueType = ValueType.STRING,
                 style: Optional[TableCellStyle] = None) -> TableCell:
        """Add a new cell at the end of the row."""
        cell = TableCell(content, value_type, style)
        self.append(cell)
        return cell

    def get_cell(self, position: int) -> Optional[TableCell]:
        """Return the cell at position or None for an invalid position."""
        return self.get(position)

    def get_cells(self) -> List[TableCell]:
        return self.get_all()

    def remove_cell_at(self, position: int) -> Optional[TableCell]:
        return self.remove_at(position)

    def to_xml(self, parent: ET.Element, registry: StyleRegistry) -> Optional[ET.Element]:
        if not self.has_children():
            return None
        return super().to_xml(parent, registry)


class Table(Node):
    """Represents a table with a fixed number of columns."""

    kind = NodeKind.TABLE

    def __init__(self, num_cols: int, style: Optional[TableStyle] = None):
        """
        Initialize table.
        
        Args:
            num_cols: Number of columns; one column definition is created per column
            style: Table style; a default table style is used when omitted
        """
        super().__init__()
        if not isinstance(num_cols, int) or num_cols < 0:
            raise ValueError(f"Number of columns must be a non-negative integer, got {num_cols!r}")

        self._style = style or TableStyle()
        self._columns: List[TableColumn] = []
        for _ in range(num_cols):
            column = TableColumn()
            column.parent = self
            self._columns.append(column)

    @property
    def num_cols(self) -> int:
        return len(self._columns)

    def get_column(self, position: int) -> Optional[TableColumn]:
        if 0 <= position < len(self._columns):
            return self._columns[position]
        return None

    def get_columns(self) -> List[TableColumn]:
        return list(self._columns)

    def get_style(self) -> TableStyle:
        return self._style

    def set_style(self, style: TableStyle) -> None:
        self._style = style

    def add_row(self) -> TableRow:
        """Add a new empty row at the end of the table."""
        row = TableRow()
        self.append(row)
        logger.debug(f"Added row to table. Total rows: {self.size()}")
        return row

    def get_row(self, position: int) -> Optional[TableRow]:
        """Return the row at position or None for an invalid position."""
        return self.get(position)

    def get_rows(self) -> List[TableRow]:
        return self.get_all()

    def remove_row_at(self, position: int) -> Optional[TableRow]:
        return self.remove_at(position)

    def to_xml(self, parent: ET.Element, registry: StyleRegistry) -> Optional[ET.Element]:
        if not self.has_children():
            return None
        return super().to_xml(parent, registry)

    def write_attributes(self, element: ET.Element, registry: StyleRegistry) -> None:
        element.set(OdfAttribute.TABLE_STYLE_NAME, registry.resolve(self._style))

    def write_children(self, element: ET.Element, registry: StyleRegistry) -> None:
        for column in self._columns:
            column.to_xml(element, registry)
        super().write_children(element, registry)

    def __repr__(self) -> str:
        return f"Table(columns={self.num_cols}, rows={self.size()})"

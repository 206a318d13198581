"""
Table layout engine.

Tracks the table currently under construction and assigns a border style to
every cell from its row position (relative to a multi-row span) and its
column position.

Multi-row span counter ``multi``:
    < 0  first row of a span (TOP)
    > 1  intermediate row (MIDDLE)
    == 1 last row (BOTTOM)
    == 0 no span (SINGLE)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Sequence, Tuple, Union

from ..exceptions import TableStateError
from ..models.table import Table, TableCell, TableRow
from ..styles.table_style import TableCellStyle
from ..utils.enums import BorderWeight, ColumnType, DirectionType, RowType

logger = logging.getLogger(__name__)

# Edge order: top, left, bottom, right.
BorderPreset = Tuple[BorderWeight, BorderWeight, BorderWeight, BorderWeight]

_N = BorderWeight.NONE
_T = BorderWeight.THIN
_K = BorderWeight.THICK

BORDER_PRESETS: Dict[Tuple[RowType, ColumnType], BorderPreset] = {
    (RowType.SINGLE, ColumnType.FIRST): (_K, _K, _K, _T),
    (RowType.SINGLE, ColumnType.MIDDLE): (_K, _N, _K, _T),
    (RowType.SINGLE, ColumnType.LAST): (_K, _N, _K, _K),
    (RowType.TOP, ColumnType.FIRST): (_K, _K, _N, _T),
    (RowType.TOP, ColumnType.MIDDLE): (_K, _N, _N, _T),
    (RowType.TOP, ColumnType.LAST): (_K, _N, _N, _K),
    (RowType.MIDDLE, ColumnType.FIRST): (_N, _K, _N, _T),
    (RowType.MIDDLE, ColumnType.MIDDLE): (_N, _N, _N, _T),
    (RowType.MIDDLE, ColumnType.LAST): (_N, _N, _N, _K),
    (RowType.BOTTOM, ColumnType.FIRST): (_N, _K, _K, _T),
    (RowType.BOTTOM, ColumnType.MIDDLE): (_N, _N, _K, _T),
    (RowType.BOTTOM, ColumnType.LAST): (_N, _N, _K, _K),
}

_EDGES = (DirectionType.TOP, DirectionType.LEFT, DirectionType.BOTTOM, DirectionType.RIGHT)


def advance_span(multi: int, span: int = 0) -> int:
    """
    Return the span counter for a newly started row.
    
    Args:
        multi: Counter of the previous row
        span: Length of a span starting with this row, 0 for none
    """
    if span > 0:
        return -span
    if multi != 0:
        return abs(multi) - 1
    return 0


def classify_row(multi: int) -> RowType:
    """Return the row type for a span counter value."""
    if multi < 0:
        return RowType.TOP
    if multi > 1:
        return RowType.MIDDLE
    if multi == 1:
        return RowType.BOTTOM
    return RowType.SINGLE


def classify_column(current_col: int, num_cols: int) -> ColumnType:
    """Return the column type for a 1-based column index."""
    if current_col == 1:
        return ColumnType.FIRST
    if current_col == num_cols:
        return ColumnType.LAST
    return ColumnType.MIDDLE


@dataclass
class TableBuildContext:
    """Cursor over the table under construction; not part of the tree."""

    table: Table
    num_cols: int
    lines: bool = True
    padding: Dict[DirectionType, str] = field(default_factory=dict)
    row: Optional[TableRow] = None
    cell: Optional[TableCell] = None
    current_col: int = 0
    multi: int = 0

    @property
    def row_type(self) -> RowType:
        return classify_row(self.multi)

    @property
    def column_type(self) -> ColumnType:
        return classify_column(self.current_col, self.num_cols)


class TableLayoutEngine:
    """
    Stateful helper for building one table at a time.
    
    States: closed (no context) and open (a build context exists).
    """

    def __init__(self, thin_border: str = "0.5pt solid #000000",
                 thick_border: str = "1pt solid #000000"):
        """
        Initialize table layout engine.
        
        Args:
            thin_border: Border spec used for THIN edges
            thick_border: Border spec used for THICK edges
        """
        self._border_specs = {
            BorderWeight.NONE: "none",
            BorderWeight.THIN: thin_border,
            BorderWeight.THICK: thick_border,
        }
        self.context: Optional[TableBuildContext] = None

    @property
    def is_open(self) -> bool:
        return self.context is not None

    def begin(self, table: Table, lines: bool = True,
              padding: Optional[Mapping[DirectionType, str]] = None) -> TableBuildContext:
        """
        Open a build context for table.
        
        Opening while another table is open discards the previous context;
        the previous table stays in the tree.
        
        Args:
            table: Table already attached to the tree
            lines: Whether cells get border styles
            padding: Cell padding per side for this table
        """
        if self.context is not None:
            logger.warning("Adding table while table is not closed")

        self.context = TableBuildContext(
            table=table,
            num_cols=table.num_cols,
            lines=lines,
            padding=dict(padding or {}),
        )
        logger.debug(f"Opened table with {table.num_cols} columns (lines={lines})")
        return self.context

    def start_row(self, multi: int = 0, header: bool = False) -> TableRow:
        """
        Start a new row in the open table.
        
        Args:
            multi: If > 0, start a multi-row span of that many rows
            header: Header rows never take part in spans
            
        Returns:
            The new row
        """
        context = self._require_context("add row")
        context.row = context.table.add_row()
        context.cell = None
        context.current_col = 0
        if header:
            context.multi = 0
        else:
            context.multi = advance_span(context.multi, multi)
        logger.debug(f"Started {context.row_type.value} row (multi={context.multi})")
        return context.row

    def next_column(self) -> Optional[TableCell]:
        """
        Add the next cell to the current row.
        
        Returns:
            The new cell, or None if the declared column count is exhausted
        """
        context = self._require_context("add column")
        if context.row is None:
            raise TableStateError("Tried to add column without row started")

        if context.current_col >= context.num_cols:
            logger.warning(f"Ignoring column beyond declared column count {context.num_cols}")
            return None

        context.current_col += 1
        context.cell = context.row.add_cell(style=self.cell_style(context))
        return context.cell

    def cell_style(self, context: TableBuildContext) -> TableCellStyle:
        """Return the cell style for the cursor position of context."""
        border: Dict[DirectionType, str] = {}
        if context.lines:
            preset = BORDER_PRESETS[(context.row_type, context.column_type)]
            border = {edge: self._border_specs[weight] for edge, weight in zip(_EDGES, preset)}
        return TableCellStyle(border=border, padding=context.padding)

    def set_column_widths(self, widths: Sequence[str]) -> None:
        """Set absolute column widths; excess values are ignored."""
        context = self._require_context("set column widths")
        for column, width in zip(context.table.get_columns(), widths):
            column.get_style().set_width(width)

    def set_relative_column_widths(self, widths: Sequence[Union[int, float]]) -> None:
        """Set relative column widths; excess values are ignored."""
        context = self._require_context("set column widths")
        for column, width in zip(context.table.get_columns(), widths):
            column.get_style().set_relative_width(width)

    def end(self) -> Optional[Table]:
        """Close the build context and return the table it referenced."""
        if self.context is None:
            return None
        table = self.context.table
        self.context = None
        logger.debug(f"Closed table with {table.size()} rows")
        return table

    def _require_context(self, action: str) -> TableBuildContext:
        if self.context is None:
            raise TableStateError(f"Tried to {action} without table declared")
        return self.context

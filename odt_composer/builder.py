"""
Document builder - writes a report as if it was typed from top to bottom.

The builder keeps the current insertion target (the document, or the table
cell opened last) and the active default paragraph style as its own state.
Tables are driven through the TableLayoutEngine; markup through the
markup converter.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .config import BuilderOptions
from .document import TextDocument
from .engine.table_layout import TableLayoutEngine
from .media.image_probe import probe_image_size
from .models.base import Node
from .models.image import Image
from .models.paragraph import Heading, Paragraph
from .models.table import Table, TableCell
from .parser.markup_converter import convert_markup
from .styles.image_style import ImageStyle
from .styles.paragraph_style import ParagraphStyle
from .utils.enums import DirectionType, Typeface

logger = logging.getLogger(__name__)


class DocumentBuilder:
    """
    Imperative helper for generating reports.
    
    Examples:
        >>> builder = DocumentBuilder()
        >>> builder.add_heading("Attributes")
        >>> builder.begin_table(2)
        >>> builder.add_head_row(["Name", "Value"])
        >>> builder.add_row(["width", "12"])
        >>> builder.end_table()
        >>> builder.document.save_flat("report.fodt")
    """

    def __init__(self, options: Optional[BuilderOptions] = None,
                 document: Optional[TextDocument] = None):
        """
        Initialize document builder.
        
        Args:
            options: Fonts, paragraph styles and table defaults
            document: Document to write on; a new one is created when omitted
        """
        self.options = options or BuilderOptions()
        self.document = document or TextDocument()
        self.target: Node = self.document
        self.tables = TableLayoutEngine(self.options.thin_border, self.options.thick_border)

        for name, family, pitch in self.options.fonts:
            self.document.declare_font(name, family, pitch)

        self.standard_style = _paragraph_style(self.options.standard_font, self.options.standard_font_size)
        self.table_style = _paragraph_style(self.options.table_font, self.options.table_font_size)
        self.header_style = _paragraph_style(self.options.header_font, self.options.header_font_size,
                                             self.options.header_typeface)
        self.code_style = _paragraph_style(self.options.code_font, self.options.code_font_size)
        self.default_style: ParagraphStyle = self.standard_style

    def add_paragraph(self, text: Optional[str] = None,
                      style: Optional[ParagraphStyle] = None) -> Paragraph:
        """
        Add a paragraph to the current target.
        
        Args:
            text: Text of the paragraph
            style: Paragraph style; the active default style when omitted
        """
        return self.target.append(Paragraph(text, style or self.default_style))

    def add_code_paragraph(self, text: Optional[str] = None) -> Paragraph:
        """Add a paragraph in code style to the current target."""
        return self.add_paragraph(text, self.code_style)

    def add_heading(self, text: Optional[str] = None, level: int = 1) -> Heading:
        return self.target.append(Heading(text, level, self.default_style))

    def begin_table(self, num_cols: int, lines: bool = True, padding: Optional[str] = None,
                    pad_left: Optional[str] = None, pad_top: Optional[str] = None,
                    pad_right: Optional[str] = None, pad_bottom: Optional[str] = None) -> Table:
        """
        Start a table. Use add_head_row() or add_row() to start a row.
        
        Args:
            num_cols: Number of columns
            lines: Whether cells get borders from the layout presets
            padding: Overall cell padding; BuilderOptions.padding when None, no padding when ''
            pad_left: Left cell padding
            pad_top: Top cell padding
            pad_right: Right cell padding
            pad_bottom: Bottom cell padding
            
        Returns:
            The new table, appended to the document
        """
        if padding is None:
            padding = self.options.padding

        pad: Dict[DirectionType, str] = {}
        for where, value in ((DirectionType.ALL, padding), (DirectionType.LEFT, pad_left),
                             (DirectionType.TOP, pad_top), (DirectionType.RIGHT, pad_right),
                             (DirectionType.BOTTOM, pad_bottom)):
            if value:
                pad[where] = value

        table = self.document.add_table(num_cols)
        self.tables.begin(table, lines=lines, padding=pad)
        self.default_style = self.table_style
        logger.debug(f"Table padding: {pad}")
        return table

    def set_table_col_widths_rel(self, widths: Sequence[Union[int, float]]) -> None:
        """
        Set relative column widths of the open table.
        
        Excess values are ignored, missing values are not set.
        
        Raises:
            TableStateError: If no table is open
        """
        self.tables.set_relative_column_widths(widths)

    def set_table_col_widths(self, widths: Sequence[str]) -> None:
        """
        Set absolute column widths of the open table, e.g. ['3.4cm', '2cm'].
        
        Excess values are ignored, missing values are not set.
        
        Raises:
            TableStateError: If no table is open
        """
        self.tables.set_column_widths(widths)

    def add_head_row(self, data: Iterable[str] = ()) -> Optional[TableCell]:
        """
        Add a header row; it never takes part in a multi-row span.
        
        Args:
            data: Header entries, one per column; without data only the first
                column is added
                
        Returns:
            The current cell, which is also the current target
        """
        self.tables.start_row(header=True)
        self.default_style = self.header_style
        return self._fill_row(data)

    def add_row(self, data: Iterable[str] = (), multi: int = 0) -> Optional[TableCell]:
        """
        Add a body row.
        
        Args:
            data: Cell entries, one per column; without data only the first
                column is added
            multi: If not 0, start a multi-row span of that many rows, framed
                by thick lines with only vertical lines inside
                
        Returns:
            The current cell, which is also the current target
        """
        self.tables.start_row(multi=multi)
        self.default_style = self.table_style
        return self._fill_row(data)

    def add_column(self) -> Optional[TableCell]:
        """
        Move to the next column of the current row.
        
        Columns beyond the declared count are ignored; the target stays on
        the last cell.
        """
        cell = self.tables.next_column()
        if cell is not None:
            self.target = cell
        return cell

    def end_table(self) -> Optional[Table]:
        """Close the table; the document becomes the target again."""
        table = self.tables.end()
        self.default_style = self.standard_style
        self.target = self.document
        return table

    def add_html(self, markup: Optional[str], level: int = 1) -> List[Node]:
        """
        Add headings, paragraphs and lists from markup to the current target.
        
        Args:
            markup: HTML fragment, or plain text added as one paragraph
            level: Outline level of h1; h2 gets level + 1 and so on
        """
        return convert_markup(markup, self.target, level, self.default_style)

    def add_image_data(self, data: Union[bytes, str], width: float,
                       height: Optional[float] = None) -> Image:
        """
        Add an image inside a new paragraph of the current target.
        
        Args:
            data: Raw image bytes or a base64 data URL
            width: Width in centimeters
            height: Height in centimeters; derived from the image aspect ratio when omitted
        """
        if height is None:
            pixel_width, pixel_height = probe_image_size(data)
            height = width * pixel_height / pixel_width

        paragraph = self.add_paragraph()
        image = Image(data, ImageStyle(width, height))
        paragraph.append(image)
        return image

    def _fill_row(self, data: Iterable[str]) -> Optional[TableCell]:
        values = list(data)
        if not values:
            return self.add_column()

        for position, value in enumerate(values):
            if self.add_column() is None:
                logger.warning(f"Skipping {len(values) - position} values beyond the column count")
                break
            self.add_paragraph(value)
        return self.tables.context.cell

    def save_flat(self, file_path: Union[str, Path], pretty: bool = False) -> Path:
        if self.tables.is_open:
            logger.warning("Saving document while table is not closed")
        if pretty:
            return self.document.save_flat_pretty(file_path)
        return self.document.save_flat(file_path)


def _paragraph_style(font_name: str, font_size: float,
                     typeface: Typeface = Typeface.NORMAL) -> ParagraphStyle:
    style = ParagraphStyle()
    style.set_font_name(font_name)
    style.set_font_size(font_size)
    style.set_typeface(typeface)
    return style

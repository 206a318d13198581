"""Common enumerations used across the ODT composer models and styles."""

from __future__ import annotations

from enum import Enum


class NodeKind(str, Enum):
    """Closed set of element tree node kinds."""

    DOCUMENT = "document"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    LIST_ITEM = "list_item"
    TABLE = "table"
    TABLE_COLUMN = "table_column"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    IMAGE = "image"


class StyleFamily(str, Enum):
    """Style families written into the automatic styles section."""

    PARAGRAPH = "paragraph"
    TABLE = "table"
    TABLE_COLUMN = "table-column"
    TABLE_CELL = "table-cell"


class ValueType(str, Enum):
    """Value types of table cells (office:value-type)."""

    FLOAT = "float"
    TIME = "time"
    DATE = "date"
    PERCENTAGE = "percentage"
    CURRENCY = "currency"
    BOOLEAN = "boolean"
    STRING = "string"


class DirectionType(str, Enum):
    """Sides a border or padding applies to; ALL is the shorthand attribute."""

    ALL = "all"
    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"


class VerticalAlignment(str, Enum):
    """Vertical alignment of table cell content."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"
    AUTOMATIC = "automatic"


class HorizontalAlignment(str, Enum):
    """Horizontal alignment of paragraph text."""

    DEFAULT = "default"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"
    START = "start"
    END = "end"


class TableAlignment(str, Enum):
    """Horizontal alignment of a table on the page."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    MARGINS = "margins"


class Typeface(str, Enum):
    """Font weight and posture combinations."""

    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold-italic"


class TextTransformation(str, Enum):
    """Case transformations applied when text is displayed."""

    NONE = "none"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    CAPITALIZE = "capitalize"


class TabStopType(str, Enum):
    """Alignment of text at a tab stop."""

    CENTER = "center"
    CHAR = "char"
    LEFT = "left"
    RIGHT = "right"


class FontPitch(str, Enum):
    """Pitch of a declared font."""

    FIXED = "fixed"
    VARIABLE = "variable"


class AnchorType(str, Enum):
    """Anchoring of an image frame relative to the text."""

    AS_CHAR = "as-char"
    CHAR = "char"
    PARAGRAPH = "paragraph"


class RowType(str, Enum):
    """Position of a table row relative to a multi-row span."""

    SINGLE = "single"
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class ColumnType(str, Enum):
    """Position of a table column within its row."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"


class BorderWeight(str, Enum):
    """Border line weights used by the table border presets."""

    NONE = "none"
    THIN = "thin"
    THICK = "thick"

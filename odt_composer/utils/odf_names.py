"""
Element and attribute names of the OpenDocument flat XML format.

Names are written as literal prefixed strings; the namespace declarations
live on the root element.
"""

from __future__ import annotations

from typing import Dict

from .enums import NodeKind

NAMESPACES: Dict[str, str] = {
    'dc': 'http://purl.org/dc/elements/1.1/',
    'draw': 'urn:oasis:names:tc:opendocument:xmlns:drawing:1.0',
    'fo': 'urn:oasis:names:tc:opendocument:xmlns:xsl-fo-compatible:1.0',
    'meta': 'urn:oasis:names:tc:opendocument:xmlns:meta:1.0',
    'office': 'urn:oasis:names:tc:opendocument:xmlns:office:1.0',
    'style': 'urn:oasis:names:tc:opendocument:xmlns:style:1.0',
    'svg': 'urn:oasis:names:tc:opendocument:xmlns:svg-compatible:1.0',
    'table': 'urn:oasis:names:tc:opendocument:xmlns:table:1.0',
    'text': 'urn:oasis:names:tc:opendocument:xmlns:text:1.0',
    'xlink': 'http://www.w3.org/1999/xlink',
}

OFFICE_MIMETYPE = "application/vnd.oasis.opendocument.text"
OFFICE_VERSION = "1.2"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


class OdfElement:
    """Element names."""

    OFFICE_DOCUMENT = "office:document"
    OFFICE_META = "office:meta"
    OFFICE_FONT_FACE_DECLS = "office:font-face-decls"
    OFFICE_AUTOMATIC_STYLES = "office:automatic-styles"
    OFFICE_BODY = "office:body"
    OFFICE_TEXT = "office:text"
    OFFICE_BINARY_DATA = "office:binary-data"

    STYLE_STYLE = "style:style"
    STYLE_FONT_FACE = "style:font-face"
    STYLE_TEXT_PROPERTIES = "style:text-properties"
    STYLE_PARAGRAPH_PROPERTIES = "style:paragraph-properties"
    STYLE_TABLE_PROPERTIES = "style:table-properties"
    STYLE_TABLE_COLUMN_PROPERTIES = "style:table-column-properties"
    STYLE_TABLE_CELL_PROPERTIES = "style:table-cell-properties"
    STYLE_TAB_STOPS = "style:tab-stops"
    STYLE_TAB_STOP = "style:tab-stop"

    TEXT_H = "text:h"
    TEXT_P = "text:p"
    TEXT_LIST = "text:list"
    TEXT_LIST_ITEM = "text:list-item"
    TEXT_LINE_BREAK = "text:line-break"
    TEXT_TAB = "text:tab"
    TEXT_S = "text:s"

    TABLE_TABLE = "table:table"
    TABLE_COLUMN = "table:table-column"
    TABLE_ROW = "table:table-row"
    TABLE_CELL = "table:table-cell"

    DRAW_FRAME = "draw:frame"
    DRAW_IMAGE = "draw:image"


class OdfAttribute:
    """Attribute names."""

    FO_BREAK_BEFORE = "fo:break-before"
    FO_KEEP_TOGETHER = "fo:keep-together"
    FO_COLOR = "fo:color"
    FO_FONT_SIZE = "fo:font-size"
    FO_FONT_STYLE = "fo:font-style"
    FO_FONT_WEIGHT = "fo:font-weight"
    FO_TEXT_ALIGN = "fo:text-align"
    FO_TEXT_TRANSFORM = "fo:text-transform"
    FO_BORDER = "fo:border"
    FO_PADDING = "fo:padding"

    OFFICE_MIMETYPE = "office:mimetype"
    OFFICE_VERSION = "office:version"
    OFFICE_VALUE_TYPE = "office:value-type"

    STYLE_FAMILY = "style:family"
    STYLE_FONT_NAME = "style:font-name"
    STYLE_FONT_PITCH = "style:font-pitch"
    STYLE_NAME = "style:name"
    STYLE_POSITION = "style:position"
    STYLE_TYPE = "style:type"
    STYLE_WIDTH = "style:width"
    STYLE_REL_WIDTH = "style:rel-width"
    STYLE_COLUMN_WIDTH = "style:column-width"
    STYLE_REL_COLUMN_WIDTH = "style:rel-column-width"
    STYLE_USE_OPTIMAL_COLUMN_WIDTH = "style:use-optimal-column-width"
    STYLE_VERTICAL_ALIGN = "style:vertical-align"

    SVG_FONT_FAMILY = "svg:font-family"
    SVG_HEIGHT = "svg:height"
    SVG_WIDTH = "svg:width"

    TEXT_ANCHOR_TYPE = "text:anchor-type"
    TEXT_OUTLINE_LEVEL = "text:outline-level"
    TEXT_STYLE_NAME = "text:style-name"
    TEXT_C = "text:c"

    TABLE_ALIGN = "table:align"
    TABLE_STYLE_NAME = "table:style-name"


# Every node kind maps to exactly one output element.
NODE_ELEMENT_NAMES: Dict[NodeKind, str] = {
    NodeKind.DOCUMENT: OdfElement.OFFICE_TEXT,
    NodeKind.HEADING: OdfElement.TEXT_H,
    NodeKind.PARAGRAPH: OdfElement.TEXT_P,
    NodeKind.LIST: OdfElement.TEXT_LIST,
    NodeKind.LIST_ITEM: OdfElement.TEXT_LIST_ITEM,
    NodeKind.TABLE: OdfElement.TABLE_TABLE,
    NodeKind.TABLE_COLUMN: OdfElement.TABLE_COLUMN,
    NodeKind.TABLE_ROW: OdfElement.TABLE_ROW,
    NodeKind.TABLE_CELL: OdfElement.TABLE_CELL,
    NodeKind.IMAGE: OdfElement.DRAW_FRAME,
}

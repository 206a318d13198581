"""
Flat XML exporter for ODT documents.

Walks the element tree depth-first in child order and writes, in this
order: metadata, font declarations (only if any font was declared),
automatic styles (filled while the body is written), body.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import TYPE_CHECKING, Union

from ..exceptions import ExportError
from ..styles.registry import StyleRegistry
from ..utils.odf_names import (
    NAMESPACES,
    OFFICE_MIMETYPE,
    OFFICE_VERSION,
    XML_DECLARATION,
    OdfAttribute,
    OdfElement,
)

if TYPE_CHECKING:
    from ..document import TextDocument

logger = logging.getLogger(__name__)


class FlatXmlExporter:
    """
    Serializes a text document into the flat open document format.
    
    Every call to build() runs a fresh serialization pass with its own
    style registry.
    """

    def __init__(self, document: TextDocument, encoding: str = 'utf-8'):
        """
        Initialize flat XML exporter.
        
        Args:
            document: Document to export
            encoding: Encoding of written files
        """
        if document is None:
            raise ValueError("Document cannot be None")

        self.document = document
        self.encoding = encoding
        self.registry: StyleRegistry = StyleRegistry()

    def build(self) -> ET.Element:
        """
        Build the office:document element tree.
        
        Returns:
            Root element of the serialized document
        """
        root = ET.Element(OdfElement.OFFICE_DOCUMENT)
        for prefix, uri in NAMESPACES.items():
            root.set(f"xmlns:{prefix}", uri)
        root.set(OdfAttribute.OFFICE_MIMETYPE, OFFICE_MIMETYPE)
        root.set(OdfAttribute.OFFICE_VERSION, OFFICE_VERSION)

        self.document.get_meta().to_xml(root)
        self._write_font_faces(root)

        automatic_styles = ET.SubElement(root, OdfElement.OFFICE_AUTOMATIC_STYLES)
        self.registry = StyleRegistry(automatic_styles)

        body = ET.SubElement(root, OdfElement.OFFICE_BODY)
        self.document.to_xml(body, self.registry)

        logger.debug(f"Serialized document with {len(self.registry)} automatic styles")
        return root

    def to_string(self, pretty: bool = False) -> str:
        """
        Return the serialized document including the XML declaration.
        
        Args:
            pretty: Indent the output; whitespace inside paragraphs may change
        """
        root = self.build()
        if pretty:
            ET.indent(root, space="\t")
        return XML_DECLARATION + ET.tostring(root, encoding='unicode')

    def export(self, output_path: Union[str, Path], pretty: bool = False) -> Path:
        """
        Export document to a .fodt file.
        
        Args:
            output_path: Output file path
            pretty: Indent the output
            
        Returns:
            Path of the written file
            
        Raises:
            ExportError: If the file cannot be written
        """
        output_path = Path(output_path)
        content = self.to_string(pretty=pretty)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding=self.encoding) as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to export document to {output_path}: {e}")
            raise ExportError(f"Cannot write {output_path}", str(e)) from e

        logger.info(f"Document exported to flat XML: {output_path}")
        return output_path

    def _write_font_faces(self, root: ET.Element) -> None:
        fonts = self.document.get_fonts()
        if not fonts:
            return

        declarations = ET.SubElement(root, OdfElement.OFFICE_FONT_FACE_DECLS)
        for font in fonts:
            font_face = ET.SubElement(declarations, OdfElement.STYLE_FONT_FACE)
            font_face.set(OdfAttribute.STYLE_NAME, font.name)
            family = f"'{font.family}'" if " " in font.family else font.family
            font_face.set(OdfAttribute.SVG_FONT_FAMILY, family)
            font_face.set(OdfAttribute.STYLE_FONT_PITCH, font.pitch.value)

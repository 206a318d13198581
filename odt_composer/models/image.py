"""Image model for ODT documents."""

from __future__ import annotations

import base64
import logging
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING, Optional, Tuple, Union

from ..media.image_probe import decode_image_data
from ..styles.image_style import ImageStyle
from ..utils.enums import NodeKind
from ..utils.odf_names import OdfElement
from .base import Node

if TYPE_CHECKING:
    from ..styles.registry import StyleRegistry

logger = logging.getLogger(__name__)


class Image(Node):
    """
    Represents an image embedded into the document.
    
    The image bytes are written base64 encoded inside the frame.
    """

    kind = NodeKind.IMAGE

    def __init__(self, data: Union[bytes, str], style: Optional[ImageStyle] = None):
        """
        Initialize image.
        
        Args:
            data: Raw image bytes or a base64 data URL
            style: Size and anchoring of the frame
        """
        super().__init__()
        self._data = decode_image_data(data)
        self._style = style or ImageStyle()

    def get_data(self) -> bytes:
        return self._data

    def get_style(self) -> ImageStyle:
        return self._style

    def set_style(self, style: ImageStyle) -> None:
        self._style = style

    def get_size(self) -> Tuple[Optional[float], Optional[float]]:
        """Return (width, height) in centimeters."""
        return self._style.get_width(), self._style.get_height()

    def write_attributes(self, element: ET.Element, registry: StyleRegistry) -> None:
        for attribute, value in self._style.get_frame_attributes().items():
            element.set(attribute, value)

    def write_children(self, element: ET.Element, registry: StyleRegistry) -> None:
        image_element = ET.SubElement(element, OdfElement.DRAW_IMAGE)
        binary_element = ET.SubElement(image_element, OdfElement.OFFICE_BINARY_DATA)
        binary_element.text = base64.b64encode(self._data).decode('ascii')

    def __repr__(self) -> str:
        return f"Image(bytes={len(self._data)})"

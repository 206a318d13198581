"""Geometry and anchoring of an image frame."""

from __future__ import annotations

from typing import Dict, Optional, Union

from ..utils.enums import AnchorType
from ..utils.odf_names import OdfAttribute
from ..utils.units import format_length

Number = Union[int, float]


class ImageStyle:
    """
    Size (in centimeters) and anchor type of an image.
    
    Written directly on the draw:frame; not an automatic style.
    """

    def __init__(self, width: Optional[Number] = None, height: Optional[Number] = None,
                 anchor_type: AnchorType = AnchorType.AS_CHAR):
        self._width: Optional[Number] = None
        self._height: Optional[Number] = None
        self._anchor_type = AnchorType(anchor_type)
        if width is not None:
            self.set_width(width)
        if height is not None:
            self.set_height(height)

    def set_width(self, width: Number) -> None:
        if width <= 0:
            raise ValueError(f"Image width must be positive, got {width}")
        self._width = width

    def get_width(self) -> Optional[Number]:
        return self._width

    def set_height(self, height: Number) -> None:
        if height <= 0:
            raise ValueError(f"Image height must be positive, got {height}")
        self._height = height

    def get_height(self) -> Optional[Number]:
        return self._height

    def set_anchor_type(self, anchor_type: AnchorType) -> None:
        self._anchor_type = AnchorType(anchor_type)

    def get_anchor_type(self) -> AnchorType:
        return self._anchor_type

    def get_frame_attributes(self) -> Dict[str, str]:
        """Return the draw:frame attributes described by this style."""
        attributes = {OdfAttribute.TEXT_ANCHOR_TYPE: self._anchor_type.value}
        if self._width is not None:
            attributes[OdfAttribute.SVG_WIDTH] = format_length(self._width, 'cm')
        if self._height is not None:
            attributes[OdfAttribute.SVG_HEIGHT] = format_length(self._height, 'cm')
        return attributes

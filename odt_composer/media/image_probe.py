"""
Image size probing.

Reads pixel dimensions from opaque image bytes with Pillow so callers can
keep the aspect ratio when only one dimension is given.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
from typing import Tuple, Union

from PIL import Image, UnidentifiedImageError

from ..exceptions import MediaError

logger = logging.getLogger(__name__)


def decode_image_data(data: Union[bytes, bytearray, str]) -> bytes:
    """
    Return raw image bytes.
    
    Args:
        data: Raw bytes or a data URL ('data:image/png;base64,...')
        
    Returns:
        Decoded image bytes
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)

    if isinstance(data, str) and data.startswith('data:'):
        header, _, payload = data.partition(',')
        if not payload or not header.endswith(';base64'):
            raise MediaError("Unsupported data URL", header)
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise MediaError("Invalid base64 payload in data URL", str(e)) from e

    raise ValueError("Image data must be bytes or a base64 data URL")


def probe_image_size(data: Union[bytes, bytearray, str]) -> Tuple[int, int]:
    """
    Return (width, height) in pixels of the given image.
    
    Args:
        data: Raw bytes or a data URL
        
    Returns:
        Tuple of width and height
        
    Raises:
        MediaError: If the bytes are not a readable image
    """
    raw = decode_image_data(data)
    try:
        with Image.open(io.BytesIO(raw)) as img:
            width, height = img.size
    except (UnidentifiedImageError, OSError) as e:
        raise MediaError("Cannot determine image size", str(e)) from e

    logger.debug(f"Probed image size: {width}x{height}")
    return width, height

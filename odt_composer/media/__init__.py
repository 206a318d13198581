"""Media helpers for ODT documents."""

from .image_probe import decode_image_data, probe_image_size

__all__ = ["decode_image_data", "probe_image_size"]

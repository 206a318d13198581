"""Color value used by paragraph styles."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_PATTERN = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


@dataclass(frozen=True)
class Color:
    """An RGB color."""

    red: int
    green: int
    blue: int

    def __post_init__(self):
        for channel in (self.red, self.green, self.blue):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"Color channel must be an integer between 0 and 255, got {channel!r}")

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        """Create a color from its red, green and blue channels."""
        return cls(red, green, blue)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """
        Create a color from a hex string.
        
        Args:
            value: '#RRGGBB', 'RRGGBB' or the short '#RGB' form
        """
        match = _HEX_PATTERN.match(value or '')
        if not match:
            raise ValueError(f"Invalid hex color: {value!r}")

        digits = match.group(1)
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        """Return the color as '#rrggbb'."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

"""Configuration of the document builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .utils.enums import FontPitch, Typeface

FontSpec = Tuple[str, str, FontPitch]


@dataclass(frozen=True)
class BuilderOptions:
    """
    Defaults used by DocumentBuilder.

    Attributes:
        fonts: Fonts declared on the document as (name, family, pitch).
        standard_font / standard_font_size: Paragraphs outside of tables.
        table_font / table_font_size: Paragraphs in table body rows.
        header_font / header_font_size / header_typeface: Paragraphs in table header rows.
        code_font / code_font_size: Code paragraphs.
        thin_border / thick_border: Border specs of the table layout presets.
        padding: Default cell padding of a new table.
    """

    fonts: Tuple[FontSpec, ...] = (
        ("Ubuntu Mono", "monospace", FontPitch.VARIABLE),
        ("Arial", "Arial", FontPitch.VARIABLE),
    )
    standard_font: str = "Arial"
    standard_font_size: float = 10
    table_font: str = "Arial"
    table_font_size: float = 8
    header_font: str = "Arial"
    header_font_size: float = 12
    header_typeface: Typeface = Typeface.BOLD
    code_font: str = "Ubuntu Mono"
    code_font_size: float = 6
    thin_border: str = "0.5pt solid #000000"
    thick_border: str = "1pt solid #000000"
    padding: str = "1pt"

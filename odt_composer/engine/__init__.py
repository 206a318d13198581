"""Layout engines for ODT documents."""

from .table_layout import (
    BORDER_PRESETS,
    TableBuildContext,
    TableLayoutEngine,
    advance_span,
    classify_column,
    classify_row,
)

__all__ = [
    "BORDER_PRESETS",
    "TableBuildContext",
    "TableLayoutEngine",
    "advance_span",
    "classify_column",
    "classify_row",
]

"""
Unit helpers for ODF lengths.
"""

from typing import Union


def format_number(value: Union[int, float]) -> str:
    """Format a number without a trailing '.0' for integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        return format(value, ".6g")
    return str(value)


def format_length(value: Union[int, float], unit: str) -> str:
    """
    Format a length for an ODF attribute.
    
    Args:
        value: Numeric length
        unit: Unit suffix (cm, mm, pt, ...)
        
    Returns:
        Length string like '2.5cm'
    """
    return f"{format_number(value)}{unit}"

"""
Models module for the ODT element tree.

This module contains the node classes that make up a text document.
"""

from .base import Node
from .image import Image
from .list import List, ListItem
from .paragraph import Heading, Paragraph
from .table import Table, TableCell, TableColumn, TableRow

__all__ = [
    "Node",
    "Heading",
    "Paragraph",
    "List",
    "ListItem",
    "Table",
    "TableColumn",
    "TableRow",
    "TableCell",
    "Image",
]

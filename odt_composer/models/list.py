"""List models for ODT documents."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING, List as ListType, Optional, Union

from ..styles.paragraph_style import ParagraphStyle
from ..utils.enums import NodeKind
from .base import Node
from .paragraph import Paragraph

if TYPE_CHECKING:
    from ..styles.registry import StyleRegistry

logger = logging.getLogger(__name__)

ItemContent = Union[str, Paragraph, "ListItem", None]


class ListItem(Node):
    """
    Represents a list item.
    
    Holds a paragraph and optionally nested lists.
    """

    kind = NodeKind.LIST_ITEM

    def __init__(self, content: Union[str, Paragraph, None] = None,
                 style: Optional[ParagraphStyle] = None):
        """
        Initialize list item.
        
        Args:
            content: Text of the item or a predefined paragraph
            style: Paragraph style used when content is a string
        """
        super().__init__()
        if isinstance(content, Paragraph):
            self.append(content)
        elif content is not None:
            self.append(Paragraph(content, style))

    def get_paragraph(self) -> Optional[Paragraph]:
        """Return the first paragraph of the item or None."""
        return next(self.iter_children(Paragraph), None)

    def get_text(self) -> str:
        paragraph = self.get_paragraph()
        return paragraph.get_text() if paragraph is not None else ""

    def add_list(self) -> List:
        """Add a nested list at the end of this item."""
        nested = List()
        self.append(nested)
        return nested

    def get_lists(self) -> ListType[List]:
        return list(self.iter_children(List))


class List(Node):
    """Represents an unordered list of items."""

    kind = NodeKind.LIST

    def add_item(self, item: ItemContent = None, style: Optional[ParagraphStyle] = None) -> ListItem:
        """
        Add an item at the end of the list.
        
        Args:
            item: Text, paragraph or list item
            style: Paragraph style used when item is a string
            
        Returns:
            The added list item
        """
        return self.insert_item(self.size(), item, style)

    def insert_item(self, position: int, item: ItemContent = None,
                    style: Optional[ParagraphStyle] = None) -> ListItem:
        """Insert an item at position (clamped to the list bounds)."""
        if not isinstance(item, ListItem):
            item = ListItem(item, style)
        self.insert(position, item)
        return item

    def get_item(self, position: int) -> Optional[ListItem]:
        """Return the item at position or None for an invalid position."""
        return self.get(position)

    def get_items(self) -> ListType[ListItem]:
        return self.get_all()

    def remove_item_at(self, position: int) -> Optional[ListItem]:
        """Remove the item at position; None if there is no such item."""
        return self.remove_at(position)

    def to_xml(self, parent: ET.Element, registry: StyleRegistry) -> Optional[ET.Element]:
        if not self.has_children():
            return None
        return super().to_xml(parent, registry)

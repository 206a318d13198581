"""
Base node class for the ODT element tree.

Every node owns an ordered sequence of child nodes. Insertion order is the
serialization order; a node belongs to at most one parent at a time.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING, Iterator, List, Optional, Type

from ..utils.enums import NodeKind
from ..utils.odf_names import NODE_ELEMENT_NAMES

if TYPE_CHECKING:
    from ..styles.registry import StyleRegistry

logger = logging.getLogger(__name__)


class Node:
    """Element tree node with ordered children and a uniform XML emit."""

    kind: NodeKind = NodeKind.DOCUMENT

    def __init__(self):
        """Initialize node without parent and children."""
        self.parent: Optional[Node] = None
        self._children: List[Node] = []

    @property
    def element_name(self) -> str:
        """Output element name for this node kind."""
        return NODE_ELEMENT_NAMES[self.kind]

    def append(self, child: Node) -> Node:
        """
        Append child at the end of this node's children.

        A child that is still attached elsewhere is detached from its old
        parent first.

        Args:
            child: Node to append

        Returns:
            The appended node
        """
        return self.insert(len(self._children), child)

    def insert(self, position: int, child: Node) -> Node:
        """
        Insert child at the given position.

        Positions beyond the end append; negative positions insert at the
        front.

        Args:
            position: Target index (starting from 0)
            child: Node to insert

        Returns:
            The inserted node
        """
        self._check_child(child)

        if child.parent is not None:
            child.parent.remove(child)

        position = min(max(position, 0), len(self._children))
        self._children.insert(position, child)
        child.parent = self
        logger.debug(f"{self.kind.value}: inserted {child.kind.value} at {position}")
        return child

    def get(self, position: int) -> Optional[Node]:
        """Return the child at position or None for an invalid position."""
        if 0 <= position < len(self._children):
            return self._children[position]
        return None

    def get_all(self) -> List[Node]:
        """Return a copy of the list of children."""
        return list(self._children)

    def iter_children(self, type_filter: Optional[Type[Node]] = None) -> Iterator[Node]:
        """Iterate over children, optionally filtered by type."""
        for child in self._children:
            if type_filter is None or isinstance(child, type_filter):
                yield child

    def remove_at(self, position: int) -> Optional[Node]:
        """
        Detach and return the child at position.

        Returns:
            The removed node or None if there is no child at position
        """
        if not 0 <= position < len(self._children):
            return None

        child = self._children.pop(position)
        child.parent = None
        logger.debug(f"{self.kind.value}: removed {child.kind.value} at {position}")
        return child

    def remove(self, child: Node) -> bool:
        """Detach child if it is a direct child of this node."""
        for position, existing in enumerate(self._children):
            if existing is child:
                self.remove_at(position)
                return True
        return False

    def clear(self) -> None:
        """Remove all children."""
        while self.remove_at(0) is not None:
            pass

    def has_children(self) -> bool:
        """Check whether this node has at least one child."""
        return len(self._children) > 0

    def size(self) -> int:
        """Return the number of children."""
        return len(self._children)

    def to_xml(self, parent: ET.Element, registry: StyleRegistry) -> Optional[ET.Element]:
        """
        Emit this node as a sub element of parent.

        Args:
            parent: Element the output is appended to
            registry: Style registry of the current serialization pass

        Returns:
            The created element or None if the node suppresses its output
        """
        element = ET.SubElement(parent, self.element_name)
        self.write_attributes(element, registry)
        self.write_children(element, registry)
        return element

    def write_attributes(self, element: ET.Element, registry: StyleRegistry) -> None:
        """Set node specific attributes on element."""

    def write_children(self, element: ET.Element, registry: StyleRegistry) -> None:
        """Emit all children in insertion order."""
        for child in self._children:
            child.to_xml(element, registry)

    def _check_child(self, child: Node) -> None:
        if not isinstance(child, Node):
            raise TypeError(f"Expected a Node, got {type(child).__name__}")

        # Appending an ancestor would create a cycle.
        ancestor: Optional[Node] = self
        while ancestor is not None:
            if ancestor is child:
                raise ValueError("A node cannot be appended to itself or its descendants")
            ancestor = ancestor.parent

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(children={len(self._children)})"

"""
Base style class for automatic styles.

A style is identified by its property values only. The canonical name is a
SHA-256 digest over the style family and the sorted (property, value) pairs,
so two styles with the same content always share one name regardless of the
order in which their properties were set.
"""

from __future__ import annotations

import hashlib
import json
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import Dict, List, Tuple

from ..utils.enums import StyleFamily
from ..utils.odf_names import OdfAttribute, OdfElement

CanonicalForm = Tuple[str, Tuple[Tuple[str, str], ...]]


class Style(ABC):
    """Abstract content-addressed style."""

    family: StyleFamily
    name_prefix: str = "S"

    @abstractmethod
    def get_properties(self) -> Dict[str, Dict[str, str]]:
        """
        Return the property groups of this style.
        
        Returns:
            Mapping of property element name to its attributes
        """

    def canonical_items(self) -> List[Tuple[str, str]]:
        """Return the sorted (property, value) pairs describing this style."""
        items = []
        for group, attributes in self.get_properties().items():
            for attribute, value in attributes.items():
                items.append((f"{group}/{attribute}", value))
        return sorted(items)

    def canonical_form(self) -> CanonicalForm:
        """Return the family together with the canonical items."""
        return self.family.value, tuple(self.canonical_items())

    def get_name(self) -> str:
        """
        Return the canonical name of the style.
        
        The name reflects the current configuration; equal styles feature
        equal names.
        """
        family, items = self.canonical_form()
        payload = json.dumps([family, [list(item) for item in items]], ensure_ascii=False)
        digest = hashlib.sha256(payload.encode('utf-8')).hexdigest()
        return f"{self.name_prefix}{digest}"

    def write_element(self, container: ET.Element, name: str) -> ET.Element:
        """
        Create the style element inside the automatic styles container.
        
        Args:
            container: The office:automatic-styles element
            name: Canonical name of the style
            
        Returns:
            The newly created style:style element
        """
        style_element = ET.SubElement(container, OdfElement.STYLE_STYLE)
        style_element.set(OdfAttribute.STYLE_NAME, name)
        style_element.set(OdfAttribute.STYLE_FAMILY, self.family.value)

        for group, attributes in self.get_properties().items():
            group_element = ET.SubElement(style_element, group)
            for attribute, value in attributes.items():
                group_element.set(attribute, value)

        return style_element

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return self.canonical_form() == other.canonical_form()

    # Styles are mutable; equality is by content.
    __hash__ = None

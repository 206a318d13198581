"""
Style registry for one serialization pass.

Resolves style instances to canonical names and writes each distinct style
exactly once into the automatic styles section. First write wins: once a
name is registered, later resolutions return the name without touching the
registered element.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional

from ..exceptions import StyleError
from ..utils.odf_names import OdfAttribute, OdfElement
from .base import CanonicalForm, Style

logger = logging.getLogger(__name__)


class StyleRegistry:
    """Document scoped table of deduplicated style records."""

    def __init__(self, automatic_styles: Optional[ET.Element] = None):
        """
        Initialize registry.
        
        Args:
            automatic_styles: Destination office:automatic-styles element;
                a detached element is created when omitted
        """
        if automatic_styles is None:
            automatic_styles = ET.Element(OdfElement.OFFICE_AUTOMATIC_STYLES)
        self.automatic_styles = automatic_styles
        self._records: Dict[str, CanonicalForm] = {}

    def resolve(self, style: Style) -> str:
        """
        Return the canonical name of style, registering it on first sight.
        
        Args:
            style: Style instance to resolve
            
        Returns:
            Canonical style name
            
        Raises:
            StyleError: If the name is already bound to different properties
        """
        name = style.get_name()
        canonical = style.canonical_form()

        registered = self._records.get(name)
        if registered is not None:
            if registered != canonical:
                raise StyleError("Style name collision", f"{name} is bound to different properties")
            return name

        if self._exists_style(name):
            logger.debug(f"Style {name} already present in destination table")
        else:
            style.write_element(self.automatic_styles, name)
            logger.debug(f"Registered {canonical[0]} style {name}")

        self._records[name] = canonical
        return name

    def lookup(self, name: str) -> Optional[CanonicalForm]:
        """Return the registered canonical form for name or None."""
        return self._records.get(name)

    def get_names(self) -> List[str]:
        """Return registered names in registration order."""
        return list(self._records)

    def _exists_style(self, name: str) -> bool:
        for existing in self.automatic_styles:
            if existing.get(OdfAttribute.STYLE_NAME) == name:
                return True
        return False

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

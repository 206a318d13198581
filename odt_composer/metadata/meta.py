"""
Document metadata.

Handles the office:meta section: generator, title, description, subject,
keywords, creators, dates, language and editing cycles.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import List, Optional

from ..utils.odf_names import OdfElement

logger = logging.getLogger(__name__)

GENERATOR = "odt-composer"


class Meta:
    """
    Metadata record of a text document.
    
    The generator and creation date are always written; other fields only
    when set.
    """

    def __init__(self):
        """Initialize metadata with generator, creation date and one editing cycle."""
        self._generator = GENERATOR
        self._title: Optional[str] = None
        self._description: Optional[str] = None
        self._subject: Optional[str] = None
        self._keywords: List[str] = []
        self._initial_creator: Optional[str] = None
        self._creator: Optional[str] = None
        self._printed_by: Optional[str] = None
        self._creation_date = datetime.now()
        self._date: Optional[datetime] = None
        self._print_date: Optional[datetime] = None
        self._language: Optional[str] = None
        self._editing_cycles = 1

    def set_generator(self, generator: str) -> None:
        self._generator = generator

    def get_generator(self) -> str:
        return self._generator

    def set_title(self, title: Optional[str]) -> None:
        self._title = title

    def get_title(self) -> Optional[str]:
        return self._title

    def set_description(self, description: Optional[str]) -> None:
        self._description = description

    def get_description(self) -> Optional[str]:
        return self._description

    def set_subject(self, subject: Optional[str]) -> None:
        self._subject = subject

    def get_subject(self) -> Optional[str]:
        return self._subject

    def add_keyword(self, keyword: str) -> None:
        """Add a keyword; duplicates are ignored."""
        if keyword and keyword not in self._keywords:
            self._keywords.append(keyword)

    def remove_keyword(self, keyword: str) -> bool:
        if keyword in self._keywords:
            self._keywords.remove(keyword)
            return True
        return False

    def clear_keywords(self) -> None:
        self._keywords = []

    def get_keywords(self) -> List[str]:
        return list(self._keywords)

    def set_initial_creator(self, creator: Optional[str]) -> None:
        self._initial_creator = creator

    def get_initial_creator(self) -> Optional[str]:
        return self._initial_creator

    def set_creator(self, creator: Optional[str]) -> None:
        self._creator = creator

    def get_creator(self) -> Optional[str]:
        return self._creator

    def set_printed_by(self, printed_by: Optional[str]) -> None:
        self._printed_by = printed_by

    def get_printed_by(self) -> Optional[str]:
        return self._printed_by

    def set_creation_date(self, creation_date: datetime) -> None:
        self._creation_date = creation_date

    def get_creation_date(self) -> datetime:
        return self._creation_date

    def set_date(self, date: Optional[datetime]) -> None:
        self._date = date

    def get_date(self) -> Optional[datetime]:
        return self._date

    def set_print_date(self, print_date: Optional[datetime]) -> None:
        self._print_date = print_date

    def get_print_date(self) -> Optional[datetime]:
        return self._print_date

    def set_language(self, language: Optional[str]) -> None:
        """Set the language as an RFC 3066 tag, e.g. 'de-DE'."""
        self._language = language

    def get_language(self) -> Optional[str]:
        return self._language

    def set_editing_cycles(self, cycles: int) -> None:
        if not isinstance(cycles, int) or cycles < 1:
            raise ValueError(f"Editing cycles must be a positive integer, got {cycles!r}")
        self._editing_cycles = cycles

    def get_editing_cycles(self) -> int:
        return self._editing_cycles

    def to_xml(self, parent: ET.Element) -> ET.Element:
        """
        Emit the office:meta section.
        
        Args:
            parent: The office:document element
            
        Returns:
            The office:meta element
        """
        meta_element = ET.SubElement(parent, OdfElement.OFFICE_META)

        def add(name: str, value: Optional[str]) -> None:
            if value:
                ET.SubElement(meta_element, name).text = value

        add("meta:generator", self._generator)
        add("dc:title", self._title)
        add("dc:description", self._description)
        add("dc:subject", self._subject)
        for keyword in self._keywords:
            add("meta:keyword", keyword)
        add("meta:initial-creator", self._initial_creator)
        add("dc:creator", self._creator)
        add("meta:printed-by", self._printed_by)
        add("meta:creation-date", _format_date(self._creation_date))
        add("dc:date", _format_date(self._date))
        add("meta:print-date", _format_date(self._print_date))
        add("dc:language", self._language)
        add("meta:editing-cycles", str(self._editing_cycles))

        return meta_element


def _format_date(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.replace(microsecond=0).isoformat()

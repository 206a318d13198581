"""Export module for ODT documents."""

from .xml_exporter import FlatXmlExporter

__all__ = ["FlatXmlExporter"]

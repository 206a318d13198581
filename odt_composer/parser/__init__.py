"""Markup parsing for ODT documents."""

from .markup_converter import HtmlEventTokenizer, MarkupConverter, convert_markup

__all__ = ["HtmlEventTokenizer", "MarkupConverter", "convert_markup"]

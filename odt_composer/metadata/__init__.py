"""Metadata module for ODT documents."""

from .meta import Meta

__all__ = ["Meta"]

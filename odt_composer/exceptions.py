"""Custom exceptions for ODT Composer."""

from typing import Optional


class OdtComposerError(Exception):
    """Base exception for ODT Composer errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class TableStateError(OdtComposerError):
    """Exception raised when the table cursor is used outside an open table."""

    pass


class StyleError(OdtComposerError):
    """Exception raised during style canonicalization."""

    pass


class MediaError(OdtComposerError):
    """Exception raised during image processing."""

    pass


class ExportError(OdtComposerError):
    """Exception raised when the serialized document cannot be written."""

    pass

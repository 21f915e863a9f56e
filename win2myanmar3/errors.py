"""
Conversion errors raised by the document converters and the host surface.

The text engine itself never raises; these classify what can go wrong
around it so a caller can tell a bad path from a bad file from a stop
request without retrying.
"""


class ConversionError(Exception):
    """Base class for document conversion failures."""

    def __init__(self, message: str, source: str = None):
        super().__init__(message)
        self.source = source


class DocumentIOError(ConversionError, OSError):
    """Raised when a source cannot be read or a target cannot be written."""
    pass


class UnsupportedFormatError(ConversionError, ValueError):
    """Raised when no converter handles the file's extension."""
    pass


class MalformedDocumentError(ConversionError):
    """Raised when a document container cannot be parsed."""
    pass


class ConversionCancelled(ConversionError):
    """Raised when a caller asks a batch to stop."""
    pass

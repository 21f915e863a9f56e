"""
Plain Text Converter

Converts a whole .txt file as a single run. Legacy Win-font text saved
as plain text is often in an 8-bit code page, so the input encoding is
configurable; the output is always UTF-8.
"""

import os

from ..engine import convert_win_to_unicode
from ..errors import DocumentIOError, MalformedDocumentError


class TextConverter:
    """Converts plain text files from Win encoding to Unicode."""

    SUPPORTED_EXTENSIONS = {".txt"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in TextConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(source: str, target: str, encoding: str = "utf-8") -> int:
        """
        Convert a text file and write the result to ``target``.

        Returns:
            The number of runs converted (1, or 0 for an empty file)
        """
        if not os.path.isfile(source):
            raise DocumentIOError(f"File not found: {source}", source=source)

        try:
            with open(source, "r", encoding=encoding, newline="") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise MalformedDocumentError(
                f"Cannot decode {os.path.basename(source)} as {encoding}: {e}",
                source=source,
            ) from e
        except OSError as e:
            raise DocumentIOError(f"Cannot read {source}: {e}", source=source) from e

        converted = convert_win_to_unicode(content)

        try:
            with open(target, "w", encoding="utf-8", newline="") as f:
                f.write(converted)
        except OSError as e:
            raise DocumentIOError(f"Cannot write {target}: {e}", source=source) from e

        return 1 if content else 0

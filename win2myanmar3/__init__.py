"""
Win2Myanmar3 - Win Innwa to Myanmar3 Unicode Converter

Converts text typed in the Win Innwa legacy font, where each glyph sits
on an ASCII/Latin-1 code point and marks are typed in visual order, into
Unicode Myanmar text in standard storage order. Plain text files and
Word, Excel and PowerPoint documents are converted run by run.
"""

__version__ = "1.0.0"

from .core import ConversionResult, ProgressReport, Win2Myanmar3
from .engine import convert_win_to_unicode

__all__ = ["convert_win_to_unicode", "Win2Myanmar3", "ConversionResult", "ProgressReport"]

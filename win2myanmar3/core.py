"""
Win2Myanmar3 Core

The orchestrator that routes files to the right converter. Supports plain
text and Office documents, single files or whole directories, and plain
strings for direct conversion.

Only text set in the legacy font is rewritten; layout, formatting and
every other run are carried over untouched.
"""

import os
import sys
from dataclasses import dataclass
from typing import Callable, Optional

from .converters.office_converter import OfficeConverter
from .converters.text_converter import TextConverter
from .engine import convert_win_to_unicode
from .errors import (
    ConversionCancelled,
    ConversionError,
    DocumentIOError,
    UnsupportedFormatError,
)

DEFAULT_SOURCE_FONT = OfficeConverter.DEFAULT_SOURCE_FONT
TARGET_FONT = OfficeConverter.TARGET_FONT


@dataclass(frozen=True)
class ProgressReport:
    """Progress of a directory batch, sent after each file."""
    completed: int
    total: int
    message: str

    @property
    def percentage(self) -> float:
        if self.total == 0:
            return 100.0
        return self.completed * 100.0 / self.total


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of converting one file.
    """
    source: str
    target: Optional[str]
    runs_converted: int = 0
    error: Optional[str] = None  # set when the file was skipped

    @property
    def ok(self) -> bool:
        return self.error is None


class Win2Myanmar3:
    """
    Main conversion host.

    Accepts text, files or directories and writes the converted copies
    into ``output_dir``.
    """

    def __init__(
        self,
        source_font: str = DEFAULT_SOURCE_FONT,
        target_font: str = TARGET_FONT,
        output_dir: str = None,
        encoding: str = "utf-8",
    ):
        self.source_font = source_font
        self.target_font = target_font
        self.encoding = encoding
        self.output_dir = output_dir or os.path.join(os.getcwd(), "win2myanmar3_output")
        os.makedirs(self.output_dir, exist_ok=True)

    @staticmethod
    def convert_text(text: str) -> str:
        """Convert a string of legacy text directly."""
        return convert_win_to_unicode(text)

    def convert(self, source: str) -> list:
        """
        Convert a file or every supported file in a directory.

        Args:
            source: File or directory path

        Returns:
            A list of ConversionResult, one per file attempted
        """
        source = source.strip()

        if os.path.isdir(source):
            print(f"[DIR] Converting all supported files in: {source}")
            return self.convert_directory(source)

        return [self.convert_file(source)]

    def convert_file(self, source: str, target: str = None) -> ConversionResult:
        """
        Convert a single file.

        Args:
            source: Path of a .txt, .docx, .xlsx or .pptx file
            target: Output path (default: output_dir/<basename>)

        Returns:
            A ConversionResult with the number of runs converted
        """
        if not (TextConverter.can_handle(source) or OfficeConverter.can_handle(source)):
            _, ext = os.path.splitext(source)
            raise UnsupportedFormatError(
                f"Unsupported format: {ext or '(no extension)'}\n"
                f"Supported: {', '.join(sorted(_supported_extensions()))}",
                source=source,
            )
        if not os.path.isfile(source):
            raise DocumentIOError(f"File not found: {source}", source=source)

        target = target or os.path.join(self.output_dir, os.path.basename(source))
        if os.path.abspath(target) == os.path.abspath(source):
            raise DocumentIOError(
                f"Refusing to overwrite the source file: {source}", source=source
            )

        _, ext = os.path.splitext(source.lower())
        print(f"[{ext.upper().lstrip('.')}] Converting: {source}")

        if TextConverter.can_handle(source):
            runs = TextConverter.convert(source, target, encoding=self.encoding)
        else:
            runs = OfficeConverter.convert(
                source, target,
                source_font=self.source_font,
                target_font=self.target_font,
            )

        print(f"[SAVED] {target} ({runs} runs converted)")
        return ConversionResult(source=source, target=target, runs_converted=runs)

    def convert_directory(
        self,
        dir_path: str,
        progress: Callable[[ProgressReport], None] = None,
        cancel=None,
    ) -> list:
        """
        Convert every supported file in a directory.

        Files that fail are reported and skipped. ``cancel`` is any object
        with ``is_set()`` (usually a ``threading.Event``); it is checked
        before each file and stops the batch with ConversionCancelled.
        """
        if not os.path.isdir(dir_path):
            raise DocumentIOError(f"Not a directory: {dir_path}", source=dir_path)

        supported_exts = _supported_extensions()
        files = []
        for filename in sorted(os.listdir(dir_path)):
            file_path = os.path.join(dir_path, filename)
            _, ext = os.path.splitext(filename.lower())
            if os.path.isfile(file_path) and ext in supported_exts:
                files.append(file_path)

        results = []
        for index, file_path in enumerate(files, start=1):
            if cancel is not None and cancel.is_set():
                raise ConversionCancelled(
                    f"Cancelled after {index - 1} of {len(files)} files", source=file_path
                )

            try:
                result = self.convert_file(file_path)
                message = f"Converted {os.path.basename(file_path)}"
            except ConversionError as e:
                print(f"[ERROR] Failed to convert {os.path.basename(file_path)}: {e}", file=sys.stderr)
                result = ConversionResult(source=file_path, target=None, error=str(e))
                message = f"Failed {os.path.basename(file_path)}"
            results.append(result)

            if progress is not None:
                progress(ProgressReport(completed=index, total=len(files), message=message))

        return results

    @staticmethod
    def supported_formats() -> dict:
        """Return a dictionary of all supported formats."""
        return {
            "Plain Text": sorted(TextConverter.SUPPORTED_EXTENSIONS),
            "Office Documents": sorted(OfficeConverter.SUPPORTED_EXTENSIONS),
        }


def _supported_extensions() -> set:
    return TextConverter.SUPPORTED_EXTENSIONS | OfficeConverter.SUPPORTED_EXTENSIONS

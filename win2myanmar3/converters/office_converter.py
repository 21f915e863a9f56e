"""
Office Document Converter

Converts the legacy-font text inside Word (.docx), Excel (.xlsx) and
PowerPoint (.pptx) documents in place. Only runs set in the source font
family are touched: their text goes through the engine and their font is
switched to the Unicode target font. Everything else in the document,
including formatting of the converted runs, is left as it was.
"""

import os
import zipfile
from copy import copy

from ..engine import convert_win_to_unicode
from ..errors import DocumentIOError, MalformedDocumentError, UnsupportedFormatError


class OfficeConverter:
    """Converts Office documents (.docx, .xlsx, .pptx) from Win fonts to Unicode."""

    SUPPORTED_EXTENSIONS = {".docx", ".xlsx", ".pptx"}

    DEFAULT_SOURCE_FONT = "Win Innwa"
    TARGET_FONT = "Myanmar Text"

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in OfficeConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(
        source: str,
        target: str,
        source_font: str = DEFAULT_SOURCE_FONT,
        target_font: str = TARGET_FONT,
    ) -> int:
        """
        Convert the ``source_font`` runs of an Office document.

        Args:
            source: Path of the document to read
            target: Path to write the converted document to
            source_font: Font family whose runs hold legacy text
            target_font: Font family given to the converted runs

        Returns:
            The number of runs (or cells) converted
        """
        if not os.path.isfile(source):
            raise DocumentIOError(f"File not found: {source}", source=source)

        _, ext = os.path.splitext(source.lower())

        if ext == ".docx":
            return _convert_docx(source, target, source_font, target_font)
        elif ext == ".xlsx":
            return _convert_xlsx(source, target, source_font, target_font)
        elif ext == ".pptx":
            return _convert_pptx(source, target, source_font, target_font)
        else:
            raise UnsupportedFormatError(f"Unsupported Office format: {ext}", source=source)


# ──────────────────────────────────────────────────────────────
# WORD
# ──────────────────────────────────────────────────────────────

def _convert_docx(source: str, target: str, source_font: str, target_font: str) -> int:
    """Convert the legacy-font runs of a Word document."""
    try:
        from docx import Document
        from docx.opc.exceptions import PackageNotFoundError
    except ImportError:
        raise RuntimeError("python-docx is not installed. Run: pip install python-docx")

    try:
        doc = Document(source)
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError) as e:
        raise MalformedDocumentError(f"Not a valid Word document: {source}", source=source) from e
    except OSError as e:
        raise DocumentIOError(f"Cannot read {source}: {e}", source=source) from e

    converted = 0
    for paragraph in _iter_docx_paragraphs(doc):
        for run in paragraph.runs:
            if source_font in _docx_run_fonts(run):
                run.text = convert_win_to_unicode(run.text)
                run.font.name = target_font
                converted += 1

    _save(doc, target, source)
    return converted


def _docx_run_fonts(run) -> set:
    """Return the ascii and hAnsi font names set directly on a run."""
    from docx.oxml.ns import qn

    rpr = run._element.rPr
    if rpr is None or rpr.rFonts is None:
        return set()
    return {rpr.rFonts.get(qn("w:ascii")), rpr.rFonts.get(qn("w:hAnsi"))}


def _iter_docx_paragraphs(doc):
    """Yield every paragraph of the body, its tables, headers and footers."""
    yield from _iter_block_paragraphs(doc)

    for section in doc.sections:
        for part in (
            section.header, section.first_page_header, section.even_page_header,
            section.footer, section.first_page_footer, section.even_page_footer,
        ):
            # A linked part has no content of its own; touching it would
            # create an empty definition.
            if not part.is_linked_to_previous:
                yield from _iter_block_paragraphs(part)


def _iter_block_paragraphs(container):
    """Yield the paragraphs of a block container, descending into tables."""
    yield from container.paragraphs
    for table in container.tables:
        for row in table.rows:
            for cell in row.cells:
                yield from _iter_block_paragraphs(cell)


# ──────────────────────────────────────────────────────────────
# EXCEL
# ──────────────────────────────────────────────────────────────

def _convert_xlsx(source: str, target: str, source_font: str, target_font: str) -> int:
    """Convert string cells and rich-text blocks set in the legacy font."""
    try:
        from openpyxl import load_workbook
        from openpyxl.utils.exceptions import InvalidFileException
    except ImportError:
        raise RuntimeError("openpyxl is not installed. Run: pip install openpyxl")

    try:
        wb = load_workbook(source, rich_text=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError) as e:
        raise MalformedDocumentError(f"Not a valid Excel workbook: {source}", source=source) from e
    except OSError as e:
        raise DocumentIOError(f"Cannot read {source}: {e}", source=source) from e

    converted = 0
    for ws in wb.worksheets:
        for row in ws.iter_rows():
            for cell in row:
                converted += _convert_xlsx_cell(cell, source_font, target_font)

    _save(wb, target, source)
    wb.close()
    return converted


def _convert_xlsx_cell(cell, source_font: str, target_font: str) -> int:
    """Convert one cell in place and return how many pieces of text changed."""
    from openpyxl.cell.rich_text import CellRichText, TextBlock

    # Formulas, numbers and dates are never legacy text
    if cell.data_type != "s" or cell.value is None:
        return 0

    cell_in_font = cell.font is not None and cell.font.name == source_font
    value = cell.value
    converted = 0

    if isinstance(value, CellRichText):
        parts = []
        for part in value:
            if isinstance(part, TextBlock):
                if part.font.rFont == source_font:
                    font = copy(part.font)
                    font.rFont = target_font
                    part = TextBlock(font, convert_win_to_unicode(part.text))
                    converted += 1
            elif cell_in_font:
                # Plain pieces inherit the cell font
                part = convert_win_to_unicode(part)
                converted += 1
            parts.append(part)
        if converted:
            cell.value = CellRichText(parts)
    elif cell_in_font:
        cell.value = convert_win_to_unicode(value)
        converted = 1

    if cell_in_font:
        font = copy(cell.font)
        font.name = target_font
        cell.font = font

    return converted


# ──────────────────────────────────────────────────────────────
# POWERPOINT
# ──────────────────────────────────────────────────────────────

def _convert_pptx(source: str, target: str, source_font: str, target_font: str) -> int:
    """Convert the legacy-font runs on every slide of a presentation."""
    try:
        from pptx import Presentation
        from pptx.exc import PackageNotFoundError
    except ImportError:
        raise RuntimeError("python-pptx is not installed. Run: pip install python-pptx")

    try:
        prs = Presentation(source)
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError) as e:
        raise MalformedDocumentError(f"Not a valid PowerPoint file: {source}", source=source) from e
    except OSError as e:
        raise DocumentIOError(f"Cannot read {source}: {e}", source=source) from e

    converted = 0
    for slide in prs.slides:
        for paragraph in _iter_pptx_paragraphs(slide.shapes):
            for run in paragraph.runs:
                if run.font.name == source_font:
                    run.text = convert_win_to_unicode(run.text)
                    run.font.name = target_font
                    converted += 1

    _save(prs, target, source)
    return converted


def _iter_pptx_paragraphs(shapes):
    """Yield the paragraphs of text frames and table cells, through groups."""
    from pptx.shapes.group import GroupShape

    for shape in shapes:
        if isinstance(shape, GroupShape):
            yield from _iter_pptx_paragraphs(shape.shapes)
        elif shape.has_text_frame:
            yield from shape.text_frame.paragraphs
        elif shape.has_table:
            for row in shape.table.rows:
                for cell in row.cells:
                    yield from cell.text_frame.paragraphs


def _save(document, target: str, source: str) -> None:
    """Save a python-docx, openpyxl or python-pptx document to ``target``."""
    try:
        document.save(target)
    except OSError as e:
        raise DocumentIOError(f"Cannot write {target}: {e}", source=source) from e

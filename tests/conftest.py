"""
Pytest configuration and shared fixtures.
"""

import sys
import threading
from pathlib import Path
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from win2myanmar3.core import DEFAULT_SOURCE_FONT, Win2Myanmar3
from tests.fixtures.sample_texts import SAMPLE_PARAGRAPH


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "documents: mark as building Office documents")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def output_dir(tmp_path):
    """Directory that converted files are written to."""
    return tmp_path / "out"


@pytest.fixture
def host(output_dir):
    """Create a conversion host writing into a temporary directory."""
    return Win2Myanmar3(output_dir=str(output_dir))


@pytest.fixture
def cancel_event():
    """Create an unset cancellation event."""
    return threading.Event()


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def txt_file(tmp_path):
    """Create a UTF-8 text file holding legacy text."""
    path = tmp_path / "notes.txt"
    path.write_text(SAMPLE_PARAGRAPH + "\n", encoding="utf-8")
    return path


@pytest.fixture
def docx_file(tmp_path):
    """
    Create a Word document with legacy runs in the body, a table cell and
    the header, next to a run in another font.
    """
    from docx import Document

    doc = Document()

    paragraph = doc.add_paragraph()
    legacy = paragraph.add_run("jrefrm")
    legacy.font.name = DEFAULT_SOURCE_FONT
    english = paragraph.add_run(" Myanmar")
    english.font.name = "Arial"

    table = doc.add_table(rows=1, cols=2)
    cell_run = table.cell(0, 0).paragraphs[0].add_run("usm;")
    cell_run.font.name = DEFAULT_SOURCE_FONT
    table.cell(0, 1).paragraphs[0].add_run("usm;")

    header_run = doc.sections[0].header.paragraphs[0].add_run("u")
    header_run.font.name = DEFAULT_SOURCE_FONT

    path = tmp_path / "letter.docx"
    doc.save(str(path))
    return path


@pytest.fixture
def xlsx_file(tmp_path):
    """
    Create a workbook with legacy cells, a rich-text cell, a formula and a
    number.
    """
    from openpyxl import Workbook
    from openpyxl.cell.rich_text import CellRichText, TextBlock
    from openpyxl.cell.text import InlineFont
    from openpyxl.styles import Font

    wb = Workbook()
    ws = wb.active
    ws.title = "Budget"

    ws["A1"] = "jrefrm"
    ws["A1"].font = Font(name=DEFAULT_SOURCE_FONT, bold=True)
    ws["A2"] = "jrefrm"
    ws["A3"] = "=SUM(B3:C3)"
    ws["A3"].font = Font(name=DEFAULT_SOURCE_FONT)
    ws["A4"] = 42
    ws["A4"].font = Font(name=DEFAULT_SOURCE_FONT)
    ws["B1"] = CellRichText(
        TextBlock(InlineFont(rFont=DEFAULT_SOURCE_FONT), "usm;"),
        "total",
    )

    path = tmp_path / "budget.xlsx"
    wb.save(str(path))
    return path


@pytest.fixture
def pptx_file(tmp_path):
    """
    Create a presentation with legacy runs in a text box, a table and a
    group shape.
    """
    from pptx import Presentation
    from pptx.util import Inches

    prs = Presentation()
    slide = prs.slides.add_slide(prs.slide_layouts[6])

    textbox = slide.shapes.add_textbox(Inches(1), Inches(1), Inches(4), Inches(1))
    paragraph = textbox.text_frame.paragraphs[0]
    legacy = paragraph.add_run()
    legacy.text = "jrefrm"
    legacy.font.name = DEFAULT_SOURCE_FONT
    english = paragraph.add_run()
    english.text = "Myanmar"

    table = slide.shapes.add_table(1, 1, Inches(1), Inches(2), Inches(4), Inches(1)).table
    cell_run = table.cell(0, 0).text_frame.paragraphs[0].add_run()
    cell_run.text = "usm;"
    cell_run.font.name = DEFAULT_SOURCE_FONT

    group = slide.shapes.add_group_shape()
    grouped = group.shapes.add_textbox(Inches(1), Inches(4), Inches(4), Inches(1))
    grouped_run = grouped.text_frame.paragraphs[0].add_run()
    grouped_run.text = "u"
    grouped_run.font.name = DEFAULT_SOURCE_FONT

    path = tmp_path / "slides.pptx"
    prs.save(str(path))
    return path

"""
Unit tests for the conversion host.
"""

import os

import pytest

from win2myanmar3.core import (
    DEFAULT_SOURCE_FONT,
    TARGET_FONT,
    ConversionResult,
    ProgressReport,
    Win2Myanmar3,
)
from win2myanmar3.errors import (
    ConversionCancelled,
    DocumentIOError,
    MalformedDocumentError,
    UnsupportedFormatError,
)
from tests.fixtures.sample_texts import SAMPLE_PARAGRAPH, SAMPLE_PARAGRAPH_UNICODE


class TestProgressReport:
    """Tests for ProgressReport."""

    def test_percentage(self):
        """Test percentage of a running batch."""
        report = ProgressReport(completed=1, total=4, message="Converted a.txt")
        assert report.percentage == 25.0

    def test_percentage_of_empty_batch(self):
        """Test an empty batch counts as complete."""
        assert ProgressReport(completed=0, total=0, message="").percentage == 100.0


class TestConversionResult:
    """Tests for ConversionResult."""

    def test_ok_without_error(self):
        """Test a successful result."""
        assert ConversionResult(source="a.txt", target="out/a.txt", runs_converted=1).ok

    def test_not_ok_with_error(self):
        """Test a failed result."""
        result = ConversionResult(source="a.txt", target=None, error="boom")
        assert not result.ok
        assert result.runs_converted == 0


class TestWin2Myanmar3:
    """Tests for the Win2Myanmar3 host."""

    def test_defaults(self, host, output_dir):
        """Test default fonts and that the output directory is created."""
        assert host.source_font == DEFAULT_SOURCE_FONT == "Win Innwa"
        assert host.target_font == TARGET_FONT == "Myanmar Text"
        assert host.encoding == "utf-8"
        assert output_dir.is_dir()

    def test_convert_text(self, host):
        """Test direct string conversion."""
        assert host.convert_text(SAMPLE_PARAGRAPH) == SAMPLE_PARAGRAPH_UNICODE

    def test_convert_txt_file(self, host, txt_file, output_dir):
        """Test converting a text file into the output directory."""
        result = host.convert_file(str(txt_file))

        assert result.ok
        assert result.runs_converted == 1
        assert result.target == os.path.join(str(output_dir), "notes.txt")
        with open(result.target, encoding="utf-8") as f:
            assert f.read() == SAMPLE_PARAGRAPH_UNICODE + "\n"

    def test_convert_file_explicit_target(self, host, txt_file, tmp_path):
        """Test converting to a caller-chosen path."""
        target = tmp_path / "converted.txt"
        result = host.convert_file(str(txt_file), str(target))

        assert result.target == str(target)
        assert target.read_text(encoding="utf-8") == SAMPLE_PARAGRAPH_UNICODE + "\n"

    def test_source_is_not_modified(self, host, txt_file):
        """Test that the source file is left as it was."""
        host.convert_file(str(txt_file))
        assert txt_file.read_text(encoding="utf-8") == SAMPLE_PARAGRAPH + "\n"

    def test_empty_text_file(self, host, tmp_path):
        """Test an empty text file converts to an empty file."""
        source = tmp_path / "empty.txt"
        source.write_text("", encoding="utf-8")

        result = host.convert_file(str(source))

        assert result.runs_converted == 0
        assert os.path.getsize(result.target) == 0

    def test_legacy_encoding(self, tmp_path, output_dir):
        """Test reading a text file saved in an 8-bit code page."""
        source = tmp_path / "old.txt"
        source.write_bytes("ƒ u".encode("cp1252"))
        host = Win2Myanmar3(output_dir=str(output_dir), encoding="cp1252")

        result = host.convert_file(str(source))

        with open(result.target, encoding="utf-8") as f:
            assert f.read() == "\u1041\u2044\u1042 \u1000"

    def test_undecodable_text_file(self, host, tmp_path):
        """Test a text file that is not valid in the configured encoding."""
        source = tmp_path / "bad.txt"
        source.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(MalformedDocumentError) as exc_info:
            host.convert_file(str(source))
        assert exc_info.value.source == str(source)

    def test_missing_file(self, host, tmp_path):
        """Test a source that does not exist."""
        with pytest.raises(DocumentIOError):
            host.convert_file(str(tmp_path / "missing.txt"))

    def test_unsupported_format(self, host, tmp_path):
        """Test a file type no converter handles."""
        source = tmp_path / "scan.pdf"
        source.write_bytes(b"%PDF-1.4")

        with pytest.raises(UnsupportedFormatError) as exc_info:
            host.convert_file(str(source))
        assert isinstance(exc_info.value, ValueError)

    def test_refuses_to_overwrite_source(self, host, txt_file):
        """Test that the target may not be the source."""
        with pytest.raises(DocumentIOError):
            host.convert_file(str(txt_file), str(txt_file))
        assert txt_file.read_text(encoding="utf-8") == SAMPLE_PARAGRAPH + "\n"

    def test_convert_routes_files(self, host, txt_file):
        """Test convert() on a single file."""
        results = host.convert(str(txt_file))
        assert len(results) == 1
        assert results[0].ok

    def test_supported_formats(self):
        """Test the list of supported formats."""
        formats = Win2Myanmar3.supported_formats()
        assert formats["Plain Text"] == [".txt"]
        assert formats["Office Documents"] == [".docx", ".pptx", ".xlsx"]


class TestConvertDirectory:
    """Tests for directory batches."""

    @pytest.fixture
    def batch_dir(self, tmp_path):
        """Create a directory with two text files, a broken one and an unsupported one."""
        folder = tmp_path / "batch"
        folder.mkdir()
        (folder / "a.txt").write_text("u", encoding="utf-8")
        (folder / "b.txt").write_text("jrefrm", encoding="utf-8")
        (folder / "c.docx").write_bytes(b"not a zip file")
        (folder / "readme.md").write_text("# notes", encoding="utf-8")
        (folder / "sub").mkdir()
        return folder

    def test_converts_supported_files(self, host, batch_dir, output_dir):
        """Test that every supported file is attempted and failures are skipped."""
        results = host.convert_directory(str(batch_dir))

        assert [os.path.basename(r.source) for r in results] == ["a.txt", "b.txt", "c.docx"]
        assert [r.ok for r in results] == [True, True, False]
        assert (output_dir / "a.txt").read_text(encoding="utf-8") == "\u1000"
        assert not (output_dir / "readme.md").exists()

    def test_failure_is_reported(self, host, batch_dir, capsys):
        """Test that a failed file is reported on stderr."""
        host.convert_directory(str(batch_dir))
        assert "[ERROR] Failed to convert c.docx" in capsys.readouterr().err

    def test_progress_reports(self, host, batch_dir):
        """Test one progress report per file."""
        reports = []
        host.convert_directory(str(batch_dir), progress=reports.append)

        assert [(r.completed, r.total) for r in reports] == [(1, 3), (2, 3), (3, 3)]
        assert reports[-1].percentage == 100.0
        assert reports[0].message == "Converted a.txt"
        assert reports[2].message == "Failed c.docx"

    def test_cancel_before_start(self, host, batch_dir, cancel_event, output_dir):
        """Test that a set cancel event stops the batch before any file."""
        cancel_event.set()

        with pytest.raises(ConversionCancelled):
            host.convert_directory(str(batch_dir), cancel=cancel_event)
        assert not (output_dir / "a.txt").exists()

    def test_cancel_during_batch(self, host, batch_dir, cancel_event, output_dir):
        """Test cancelling from the progress callback stops after the current file."""
        def progress(report):
            cancel_event.set()

        with pytest.raises(ConversionCancelled):
            host.convert_directory(str(batch_dir), progress=progress, cancel=cancel_event)
        assert (output_dir / "a.txt").exists()
        assert not (output_dir / "b.txt").exists()

    def test_convert_routes_directories(self, host, batch_dir):
        """Test convert() on a directory."""
        assert len(host.convert(str(batch_dir))) == 3

    def test_not_a_directory(self, host, tmp_path):
        """Test a missing directory."""
        with pytest.raises(DocumentIOError):
            host.convert_directory(str(tmp_path / "nowhere"))

"""
Unit tests for feedback file readers.
"""

import pytest
from odfdo import Document, Header, Paragraph

from feedback_analysis.config import ConfigError
from feedback_analysis.sources import get_feedback_reader, read_feedback_text


def test_text_reader_normalizes_newlines_and_bom(tmp_path):
    """Test UTF-8 text reading."""
    path = tmp_path / "survey.txt"
    path.write_bytes("\ufeffFirst answer\r\nSecond answer\rThird".encode("utf-8"))

    assert read_feedback_text(path) == "First answer\nSecond answer\nThird"


def test_markdown_is_read_as_text(tmp_path):
    """Test that .md files use the text reader."""
    path = tmp_path / "notes.md"
    path.write_text("# Interview\nThe export is slow.", encoding="utf-8")

    assert read_feedback_text(path) == "# Interview\nThe export is slow."


def test_odt_reader_one_line_per_paragraph(tmp_path):
    """Test plain text extraction from ODT documents."""
    path = tmp_path / "interview.odt"
    doc = Document("text")
    doc.body.append(Header(1, "Customer interview"))
    doc.body.append(Paragraph("The export   is slow."))
    doc.body.append(Paragraph(""))
    doc.body.append(Paragraph("I love the reporting feature."))
    doc.save(path)

    text = read_feedback_text(path)

    assert text.splitlines()[-3:] == [
        "Customer interview",
        "The export is slow.",
        "I love the reporting feature.",
    ]


def test_broken_odt_raises_config_error(tmp_path):
    """Test that parser failures surface as ConfigError."""
    path = tmp_path / "broken.odt"
    path.write_text("not a zip file", encoding="utf-8")

    with pytest.raises(ConfigError):
        read_feedback_text(path)


def test_unsupported_suffix(tmp_path):
    """Test the error for unknown formats."""
    with pytest.raises(ConfigError, match="Unsupported feedback format"):
        get_feedback_reader(tmp_path / "survey.pdf")

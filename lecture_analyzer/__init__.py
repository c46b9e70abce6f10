"""Lecture note analyzer: extract text, pick keywords and summary, lay out a PDF."""

__version__ = "0.1.0"

from lecture_analyzer.errors import (
    LectureAnalyzerError, ExternalToolFailure, IoError, ConfigurationError,
)
from lecture_analyzer.layout import (
    PageGeometry, StyleSpec, TextBlock, Fragment, Page, Cursor, Document,
    LayoutEngine, wrap_text, max_chars_for,
)
from lecture_analyzer.pdf_loader import extract_text, extract_all
from lecture_analyzer.analyze import summarize
from lecture_analyzer.links import suggest_links
from lecture_analyzer.export import render_pdf, write_pdf, export_to_pdf

__all__ = [
    "LectureAnalyzerError", "ExternalToolFailure", "IoError", "ConfigurationError",
    "PageGeometry", "StyleSpec", "TextBlock", "Fragment", "Page", "Cursor",
    "Document", "LayoutEngine", "wrap_text", "max_chars_for",
    "extract_text", "extract_all", "summarize", "suggest_links",
    "render_pdf", "write_pdf", "export_to_pdf",
]

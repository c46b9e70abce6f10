"""Shared fixtures: A4 geometry and a tiny reportlab PDF writer."""

import pytest
from reportlab.pdfgen import canvas

from lecture_analyzer.layout import Document, LayoutEngine, PageGeometry


@pytest.fixture
def geometry():
    return PageGeometry(width=210, height=297, margin_left=20, margin_right=20,
                        margin_top=17, margin_bottom=17, line_height=9)


@pytest.fixture
def engine(geometry):
    return LayoutEngine(Document(geometry=geometry))


@pytest.fixture
def make_pdf(tmp_path):
    def _make(name, lines):
        path = tmp_path / name
        c = canvas.Canvas(str(path))
        y = 800
        for line in lines:
            c.drawString(72, y, line)
            y -= 14
        c.showPage()
        c.save()
        return path
    return _make

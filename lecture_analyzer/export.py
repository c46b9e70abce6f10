# ─── lecture_analyzer/export.py ───────────────────────────────────────────────
import io
import logging
import os
import pathlib
import tempfile
from typing import Sequence

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from .config import Config
from .errors import IoError
from .layout import Document, LayoutEngine
from .output_format import render_summary

log = logging.getLogger(__name__)


def render_pdf(document: Document) -> bytes:
    """Serialize a laid-out Document. Read-only with respect to the Document."""
    g = document.geometry
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(g.width * mm, g.height * mm), invariant=1)
    c.setTitle(document.title)
    for page in document.pages:
        for frag in page.fragments:
            c.setFont(document.fonts[frag.style.weight], frag.style.size)
            c.drawString(frag.x * mm, frag.y * mm, frag.text)
        c.showPage()
    if not document.pages:
        c.showPage()            # a PDF needs at least one page
    c.save()
    return buf.getvalue()


def write_pdf(document: Document, path) -> pathlib.Path:
    """Render in memory, then swap the finished file into place."""
    target = pathlib.Path(path)
    try:
        data = render_pdf(document)
    except (KeyError, ValueError, TypeError, OSError) as e:
        # unknown font, unencodable text, ...; nothing has touched the disk yet
        raise IoError(f"Failed to render PDF for {target}: {e!r}") from e
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp",
                                        dir=str(target.parent))
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as e:
        raise IoError(f"Failed to create PDF file {target}: {e}") from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
    log.info("Wrote %s (%d page%s)", target, document.page_count,
             "" if document.page_count == 1 else "s")
    return target


def export_to_pdf(path, keywords: Sequence[str], summary: Sequence[str],
                  links: Sequence[str]) -> Document:
    document = Document(geometry=Config.page_geometry())
    engine = LayoutEngine(document)
    render_summary(engine, keywords, summary, links)
    write_pdf(document, path)
    return document

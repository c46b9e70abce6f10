import json
import pathlib
import sys
import tempfile
import time

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from .analyze import summarize
from .config import Config
from .export import render_pdf
from .layout import Document, LayoutEngine, wrap_text
from .links import suggest_links
from .output_format import render_summary
from .pdf_loader import extract_text

TOPICS = ("gradient descent", "regularization", "backpropagation",
          "convolution", "attention", "entropy")


def _paragraph(lecture: int, topic: str) -> str:
    """A few sentences of uneven length so the summary has something to rank."""
    return (f"Lecture {lecture} introduces {topic}. "
            f"We derive {topic} from first principles and compare it with the methods "
            f"covered in lecture {max(1, lecture - 1)}. "
            f"Exercises on {topic} are due next week! "
            f"Why does {topic} matter for model training?")


def synth_pdf(path: str, lectures=50, chars_per_line=80):
    """One lecture per page: a bold heading followed by wrapped paragraphs."""
    width, height = A4
    c = canvas.Canvas(path, pagesize=A4)
    for n in range(1, lectures + 1):
        text = c.beginText(72, height - 80)
        text.setFont("Helvetica-Bold", 16)
        text.textLine(f"Lecture {n}")
        text.setFont("Helvetica", 11)
        text.setLeading(14)
        for topic in TOPICS:
            for line in wrap_text(_paragraph(n, topic), chars_per_line):
                text.textLine(line)
            text.textLine("")
        c.drawText(text)
        c.showPage()
    c.save()


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    lectures = int(argv[0]) if argv else 50
    with tempfile.TemporaryDirectory() as tmp:
        src = pathlib.Path(tmp) / "benchmark.pdf"
        synth_pdf(str(src), lectures)
        t0 = time.time()
        text = extract_text(src, backend="pymupdf")
        t1 = time.time()
        keywords, summary = summarize(text, summary_sentences=max(3, lectures))
        links = suggest_links(keywords)
        t2 = time.time()
        doc = Document(geometry=Config.page_geometry())
        render_summary(LayoutEngine(doc), keywords, summary, links)
        t3 = time.time()
        data = render_pdf(doc)
        t4 = time.time()
    print(json.dumps({
        "timings_sec": {
            "extract":  round(t1 - t0, 3),
            "analyze":  round(t2 - t1, 3),
            "layout":   round(t3 - t2, 3),
            "finalize": round(t4 - t3, 3),
            "total":    round(t4 - t0, 3),
        },
        "input_pages": lectures,
        "output_pages": doc.page_count,
        "output_bytes": len(data),
    }, indent=2))


if __name__ == "__main__":
    main()

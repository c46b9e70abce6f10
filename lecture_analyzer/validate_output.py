import argparse
import pathlib
import sys

import fitz                       # PyMuPDF

from .config import Config

EXPECTED_HEADINGS = (Config.DOCUMENT_TITLE, "Keywords:", "Summary:", "Links:")


def validate(path):
    path = pathlib.Path(path)
    try:
        doc = fitz.open(str(path))
    except (RuntimeError, ValueError) as e:
        return False, f"Cannot open PDF: {e}"
    with doc:
        if doc.page_count < 1:
            return False, "Document has no pages."
        text = "\n".join(page.get_text() for page in doc)
    pos = 0
    for heading in EXPECTED_HEADINGS:
        found = text.find(heading, pos)
        if found < 0:
            return False, f"Missing or out-of-order heading {heading!r}."
        pos = found + len(heading)
    return True, "OK"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m lecture_analyzer.validate_output",
        description="Check that an exported lecture summary PDF has its headings in order",
    )
    parser.add_argument("pdfs", nargs="+", help="Exported PDF files")
    args = parser.parse_args(argv)

    failures = 0
    for pdf in map(pathlib.Path, args.pdfs):
        ok, msg = validate(pdf)
        failures += not ok
        print(f"{'✓' if ok else '✗'} {pdf.name}: {msg}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())

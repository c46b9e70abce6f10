# lecture_analyzer/pdf_loader.py
import logging
import pathlib
import subprocess
import tempfile
from typing import Iterable, Optional

import fitz                       # PyMuPDF

from .config import Config
from .errors import ConfigurationError, ExternalToolFailure, IoError

log = logging.getLogger(__name__)


# ───────── backends ──────────────────────────────────────────────────────────
def _extract_pdftotext(pdf_path: pathlib.Path) -> str:
    """Run `pdftotext -layout` into a scratch dir and read the result back."""
    with tempfile.TemporaryDirectory(prefix="lecture-") as tmp:
        txt_path = pathlib.Path(tmp) / (pdf_path.name + ".txt")
        cmd = [Config.PDFTOTEXT_BIN, "-layout", str(pdf_path), str(txt_path)]
        try:
            proc = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            raise ExternalToolFailure(f"Failed to run pdftotext on {pdf_path}: {e}") from e
        if proc.returncode != 0:
            detail = proc.stderr.decode("utf-8", errors="replace").strip()
            raise ExternalToolFailure(
                f"pdftotext failed for {pdf_path} (exit {proc.returncode})"
                + (f": {detail}" if detail else ""))
        try:
            raw = txt_path.read_bytes()
        except OSError as e:
            raise IoError(f"Failed to read extracted text from {txt_path}: {e}") from e

    # invalid UTF-8 becomes U+FFFD instead of aborting the run
    return raw.decode("utf-8", errors="replace")


def _extract_pymupdf(pdf_path: pathlib.Path) -> str:
    try:
        doc = fitz.open(str(pdf_path))
    except (RuntimeError, ValueError) as e:     # fitz.FileDataError is a RuntimeError
        raise IoError(f"Failed to open {pdf_path}: {e}") from e
    with doc:
        return "".join(page.get_text() for page in doc)


_BACKENDS = {
    "pdftotext": _extract_pdftotext,
    "pymupdf":   _extract_pymupdf,
}


# ───────── public loader ─────────────────────────────────────────────────────
def extract_text(pdf_path, backend: Optional[str] = None) -> str:
    backend = backend or Config.TEXT_BACKEND
    if backend not in _BACKENDS:
        raise ConfigurationError(
            f"unknown text backend {backend!r} (expected one of {', '.join(Config.TEXT_BACKENDS)})")
    path = pathlib.Path(pdf_path)
    if not path.is_file():
        raise IoError(f"Input file not found: {path}")
    log.info("Extracting text from %s (%s)", path.name, backend)
    return _BACKENDS[backend](path)


def extract_all(pdf_paths: Iterable, backend: Optional[str] = None) -> str:
    """Concatenate the text of every file, in order, newline after each."""
    parts = []
    for p in pdf_paths:
        parts.append(extract_text(p, backend))
        parts.append("\n")
    return "".join(parts)

"""Tests for lecture_analyzer.pdf_loader: both text backends."""

import subprocess

import pytest

from lecture_analyzer import pdf_loader
from lecture_analyzer.errors import ConfigurationError, ExternalToolFailure, IoError


@pytest.fixture
def fake_pdf(tmp_path):
    path = tmp_path / "notes.pdf"
    path.write_bytes(b"%PDF-1.4\n")
    return path


def _fake_run(returncode=0, output=b"", stderr=b""):
    calls = []

    def run(cmd, capture_output=False):
        calls.append(cmd)
        if output is not None:
            with open(cmd[3], "wb") as fh:
                fh.write(output)
        return subprocess.CompletedProcess(cmd, returncode, b"", stderr)
    return run, calls


def test_pdftotext_success_decodes_lossy(monkeypatch, fake_pdf):
    run, calls = _fake_run(output=b"Hello \xff world")
    monkeypatch.setattr(pdf_loader.subprocess, "run", run)
    assert pdf_loader.extract_text(fake_pdf, backend="pdftotext") == "Hello � world"
    assert calls[0][:3] == ["pdftotext", "-layout", str(fake_pdf)]


def test_pdftotext_nonzero_exit(monkeypatch, fake_pdf):
    run, _ = _fake_run(returncode=1, output=None, stderr=b"Syntax Error")
    monkeypatch.setattr(pdf_loader.subprocess, "run", run)
    with pytest.raises(ExternalToolFailure, match="pdftotext failed for .*notes.pdf"):
        pdf_loader.extract_text(fake_pdf, backend="pdftotext")


def test_pdftotext_cannot_launch(monkeypatch, fake_pdf):
    def run(cmd, capture_output=False):
        raise FileNotFoundError("pdftotext")
    monkeypatch.setattr(pdf_loader.subprocess, "run", run)
    with pytest.raises(ExternalToolFailure, match="Failed to run pdftotext"):
        pdf_loader.extract_text(fake_pdf, backend="pdftotext")


def test_pdftotext_missing_output_is_io_error(monkeypatch, fake_pdf):
    run, _ = _fake_run(output=None)
    monkeypatch.setattr(pdf_loader.subprocess, "run", run)
    with pytest.raises(IoError, match="Failed to read extracted text"):
        pdf_loader.extract_text(fake_pdf, backend="pdftotext")


def test_missing_input_file(tmp_path):
    with pytest.raises(IoError, match="not found"):
        pdf_loader.extract_text(tmp_path / "absent.pdf", backend="pymupdf")


def test_unknown_backend(fake_pdf):
    with pytest.raises(ConfigurationError):
        pdf_loader.extract_text(fake_pdf, backend="ocr")


def test_pymupdf_backend_reads_text(make_pdf):
    path = make_pdf("lecture.pdf", ["Thermodynamics lecture one", "Entropy always increases."])
    text = pdf_loader.extract_text(path, backend="pymupdf")
    assert "Thermodynamics lecture one" in text
    assert "Entropy always increases." in text


def test_pymupdf_backend_rejects_garbage(tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"this is not a pdf at all")
    with pytest.raises(IoError):
        pdf_loader.extract_text(path, backend="pymupdf")


def test_extract_all_keeps_order_and_newlines(monkeypatch):
    monkeypatch.setattr(pdf_loader, "extract_text", lambda p, backend=None: f"text of {p}")
    assert pdf_loader.extract_all(["a.pdf", "b.pdf"]) == "text of a.pdf\ntext of b.pdf\n"

# ─── lecture_analyzer/errors.py ───────────────────────────────────────────────
"""Error kinds surfaced by the pipeline. The CLI catches the base class."""


class LectureAnalyzerError(Exception):
    """Base class for every failure the CLI reports."""


class ExternalToolFailure(LectureAnalyzerError):
    """Text extraction tool could not be launched or exited non-zero."""


class IoError(LectureAnalyzerError):
    """Reading extracted text or writing the output document failed."""


class ConfigurationError(LectureAnalyzerError):
    """Degenerate page geometry or layout settings."""

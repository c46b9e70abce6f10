import os


class Config:
    # Page geometry (mm)
    PAGE_WIDTH = 210.0
    PAGE_HEIGHT = 297.0
    MARGIN_LEFT = 20.0
    MARGIN_RIGHT = 20.0
    MARGIN_TOP = 17.0
    MARGIN_BOTTOM = 17.0
    LINE_HEIGHT = 9.0

    # Average glyph width as a fraction of the point size
    CHAR_WIDTH_RATIO = 0.45

    # Block styles (pt)
    TITLE_SIZE = 20.0
    HEADER_SIZE = 14.0
    ITEM_SIZE = 12.0

    # Extra vertical space (mm)
    GAP_AFTER_TITLE = 4.0
    GAP_BETWEEN_SECTIONS = 2.0

    BULLET = "•"
    FONTS = {"regular": "Helvetica", "bold": "Helvetica-Bold"}
    DOCUMENT_TITLE = "Lecture Summary"

    # Analyzer
    TOP_KEYWORDS = 5
    MIN_KEYWORD_LEN = 4           # words of length > 3
    SUMMARY_SENTENCES = 3

    # Links
    SEARCH_URL = "https://www.google.com/search?q={}"

    # Text source
    TEXT_BACKENDS = ("pdftotext", "pymupdf")
    TEXT_BACKEND = "pdftotext"
    PDFTOTEXT_BIN = "pdftotext"

    @classmethod
    def page_geometry(cls):
        from .layout import PageGeometry
        return PageGeometry(
            width         = cls.PAGE_WIDTH,
            height        = cls.PAGE_HEIGHT,
            margin_left   = cls.MARGIN_LEFT,
            margin_right  = cls.MARGIN_RIGHT,
            margin_top    = cls.MARGIN_TOP,
            margin_bottom = cls.MARGIN_BOTTOM,
            line_height   = cls.LINE_HEIGHT,
        )


# Runtime flags (default off) – set DEBUG=1 for debug logging,
# LECTURE_TEXT_BACKEND=pymupdf to skip the external pdftotext tool.
Config.DEBUG = (os.getenv("DEBUG") == "1")
Config.TEXT_BACKEND = os.getenv("LECTURE_TEXT_BACKEND", Config.TEXT_BACKEND)

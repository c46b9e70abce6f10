# ─── lecture_analyzer/layout.py ───────────────────────────────────────────────
"""
Pagination and text-flow layout.

Blocks are word-wrapped to the usable page width using an average glyph
width heuristic, then placed top-down one line at a time. A new page is
allocated whenever the next line would cross the bottom margin.

Coordinates are in page units (mm) measured from the bottom edge, the way
PDF places text: the first line of a page sits at ``height - margin_top``.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from .config import Config
from .errors import ConfigurationError

log = logging.getLogger(__name__)

WEIGHTS = ("regular", "bold")


# ─── geometry & style ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class PageGeometry:
    width:         float
    height:        float
    margin_left:   float
    margin_right:  float
    margin_top:    float
    margin_bottom: float
    line_height:   float

    def __post_init__(self):
        for name in ("width", "height", "margin_left", "margin_right",
                     "margin_top", "margin_bottom", "line_height"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)}")
        if self.usable_width <= 0:
            raise ConfigurationError(f"usable width is {self.usable_width} (width minus left/right margins)")
        if self.usable_height <= 0:
            raise ConfigurationError(f"usable height is {self.usable_height} (height minus top/bottom margins)")
        if self.line_height > self.usable_height:
            raise ConfigurationError(
                f"line height {self.line_height} does not fit in usable height {self.usable_height}")

    @property
    def usable_width(self) -> float:
        return self.width - self.margin_left - self.margin_right

    @property
    def usable_height(self) -> float:
        return self.height - self.margin_top - self.margin_bottom

    @property
    def top(self) -> float:
        """y of the first line on a fresh page."""
        return self.height - self.margin_top


@dataclass(frozen=True)
class StyleSpec:
    weight: str = "regular"
    size:   float = 12.0        # pt
    bullet: bool = False

    def __post_init__(self):
        if self.weight not in WEIGHTS:
            raise ConfigurationError(f"unknown font weight {self.weight!r}")
        if self.size <= 0:
            raise ConfigurationError(f"font size must be positive, got {self.size}")


@dataclass(frozen=True)
class TextBlock:
    text:  str
    style: StyleSpec = field(default_factory=StyleSpec)


# ─── placed output ────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Fragment:
    text:  str
    x:     float
    y:     float
    style: StyleSpec


@dataclass
class Page:
    index:     int
    fragments: List[Fragment] = field(default_factory=list)

    def place(self, fragment: Fragment) -> None:
        self.fragments.append(fragment)


@dataclass
class Document:
    """Owns the page sequence. Pages are only ever appended."""
    geometry: PageGeometry
    title:    str = Config.DOCUMENT_TITLE
    fonts:    Dict[str, str] = field(default_factory=lambda: dict(Config.FONTS))
    pages:    List[Page] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def new_page(self) -> int:
        self.pages.append(Page(index=len(self.pages)))
        return len(self.pages) - 1

    def fragments(self) -> Iterator[Fragment]:
        for page in self.pages:
            yield from page.fragments


@dataclass
class Cursor:
    page_index: Optional[int] = None    # None until the first page exists
    y:          float = 0.0


# ─── wrapping ─────────────────────────────────────────────────────────────────
def max_chars_for(usable_width: float, size: float,
                  ratio: float = Config.CHAR_WIDTH_RATIO) -> int:
    """Characters per line for a font size, truncated toward zero."""
    return int(usable_width / (size * ratio))


def _wrap(rest: str, max_chars: int) -> Iterator[str]:
    while len(rest) > max_chars:
        cut = rest.rfind(" ", 0, max_chars + 1)
        if cut > 0:
            yield rest[:cut]
            rest = rest[cut + 1:]
        else:
            # no break point inside the limit -> hard cut
            yield rest[:max_chars]
            rest = rest[max_chars:]
        rest = rest.lstrip()
    if rest:
        yield rest


def wrap_text(text: str, max_chars: int) -> Iterator[str]:
    """
    Greedy wrap at the last space at or before ``max_chars``.

    Whitespace runs are collapsed first, so joining the lines with single
    spaces gives back the collapsed input (unless a token had to be cut).
    Returns a one-shot iterator; empty input yields nothing.
    """
    if max_chars < 1:
        raise ConfigurationError(f"font too large for page width ({max_chars} characters per line)")
    return _wrap(" ".join(text.split()), max_chars)


# ─── engine ───────────────────────────────────────────────────────────────────
class LayoutEngine:
    """Single writer over one Document: wraps blocks and paginates."""

    def __init__(self, document: Document,
                 char_width_ratio: float = Config.CHAR_WIDTH_RATIO,
                 bullet: str = Config.BULLET):
        self.document = document
        self.cursor = Cursor()
        self.char_width_ratio = char_width_ratio
        self.bullet = bullet

    @property
    def geometry(self) -> PageGeometry:
        return self.document.geometry

    def _new_page(self) -> None:
        self.cursor.page_index = self.document.new_page()
        self.cursor.y = self.geometry.top
        log.debug("allocated page %d", self.cursor.page_index + 1)

    def ensure_space(self) -> None:
        """Start a new page if one more line would cross the bottom margin."""
        g = self.geometry
        if self.cursor.page_index is None or self.cursor.y - g.margin_bottom < g.line_height:
            self._new_page()

    def place_line(self, text: str, style: StyleSpec) -> Fragment:
        self.ensure_space()
        frag = Fragment(text=text, x=self.geometry.margin_left, y=self.cursor.y, style=style)
        self.document.pages[self.cursor.page_index].place(frag)
        self.cursor.y -= self.geometry.line_height
        return frag

    def write_block(self, block: TextBlock) -> int:
        """Wrap and place one block; returns the number of lines placed."""
        limit = max_chars_for(self.geometry.usable_width, block.style.size, self.char_width_ratio)
        placed = 0
        for i, line in enumerate(wrap_text(block.text, limit)):
            if i == 0 and block.style.bullet:
                line = f"{self.bullet} {line}"
            self.place_line(line, block.style)
            placed += 1
        return placed

    def add_gap(self, offset: float) -> None:
        """Move the cursor down without placing text."""
        if offset < 0:
            raise ConfigurationError(f"gap must not be negative, got {offset}")
        self.cursor.y -= offset

    def render(self, blocks: Iterable[TextBlock]) -> Document:
        for block in blocks:
            self.write_block(block)
        return self.document

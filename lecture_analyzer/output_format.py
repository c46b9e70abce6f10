from dataclasses import dataclass
from typing import List, Sequence

from .config import Config
from .layout import LayoutEngine, StyleSpec, TextBlock

TITLE_STYLE  = StyleSpec(weight="bold", size=Config.TITLE_SIZE)
HEADER_STYLE = StyleSpec(weight="bold", size=Config.HEADER_SIZE)
ITEM_STYLE   = StyleSpec(weight="regular", size=Config.ITEM_SIZE, bullet=True)


@dataclass
class Section:
    header: str
    items:  Sequence[str]

    def blocks(self) -> List[TextBlock]:
        return [TextBlock(self.header, HEADER_STYLE)] + [TextBlock(i, ITEM_STYLE) for i in self.items]


def build_sections(keywords: Sequence[str], summary: Sequence[str],
                   links: Sequence[str]) -> List[Section]:
    return [
        Section("Keywords:", keywords),
        Section("Summary:", summary),
        Section("Links:", links),
    ]


def build_blocks(keywords: Sequence[str], summary: Sequence[str],
                 links: Sequence[str], title: str = Config.DOCUMENT_TITLE) -> List[TextBlock]:
    """Title followed by every section's header and items, in layout order."""
    blocks = [TextBlock(title, TITLE_STYLE)]
    for sec in build_sections(keywords, summary, links):
        blocks.extend(sec.blocks())
    return blocks


def render_summary(engine: LayoutEngine, keywords: Sequence[str],
                   summary: Sequence[str], links: Sequence[str],
                   title: str = Config.DOCUMENT_TITLE) -> None:
    """Lay out build_blocks(); headers get the title gap first, then the section gap."""
    gap = Config.GAP_AFTER_TITLE
    for block in build_blocks(keywords, summary, links, title):
        if block.style is HEADER_STYLE:
            engine.add_gap(gap)
            gap = Config.GAP_BETWEEN_SECTIONS
        engine.write_block(block)


def format_console(keywords: Sequence[str], summary: Sequence[str],
                   links: Sequence[str]) -> str:
    return "\n".join([
        f"📌 Keywords: {', '.join(keywords)}",
        "📝 Summary:",
        *summary,
        "🔗 Links:",
        *links,
    ])

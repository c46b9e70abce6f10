"""Tests for summary document assembly and console rendering."""

import pytest

from lecture_analyzer.output_format import (
    HEADER_STYLE,
    ITEM_STYLE,
    TITLE_STYLE,
    build_blocks,
    build_sections,
    format_console,
    render_summary,
)


def test_sections_fixed_order():
    secs = build_sections(["k"], ["s"], ["l"])
    assert [s.header for s in secs] == ["Keywords:", "Summary:", "Links:"]


def test_build_blocks_order_and_styles():
    blocks = build_blocks(["alpha", "beta"], ["a sentence"], ["https://x", "https://y"])
    assert [b.text for b in blocks] == [
        "Lecture Summary",
        "Keywords:", "alpha", "beta",
        "Summary:", "a sentence",
        "Links:", "https://x", "https://y",
    ]
    assert blocks[0].style == TITLE_STYLE
    assert [b.text for b in blocks if b.style == HEADER_STYLE] == ["Keywords:", "Summary:", "Links:"]
    assert all(b.style == ITEM_STYLE and b.style.bullet for b in blocks
               if b.text not in ("Lecture Summary", "Keywords:", "Summary:", "Links:"))


def test_build_blocks_custom_title_empty_sections():
    blocks = build_blocks([], [], [], title="Week 3")
    assert [b.text for b in blocks] == ["Week 3", "Keywords:", "Summary:", "Links:"]


def test_render_summary_places_blocks_with_gaps(engine):
    render_summary(engine, ["alpha"], ["a sentence"], ["https://x"])
    frags = list(engine.document.fragments())
    assert [f.text for f in frags] == [
        "Lecture Summary",
        "Keywords:",
        "• alpha",
        "Summary:",
        "• a sentence",
        "Links:",
        "• https://x",
    ]
    ys = [f.y for f in frags]
    # title 280, gap 4, then 9 per line with a gap of 2 between sections
    assert ys == pytest.approx([280, 267, 258, 247, 238, 227, 218])
    assert [f.style.weight for f in frags[:3]] == ["bold", "bold", "regular"]
    assert frags[0].style.size == 20


def test_render_summary_empty_sections_keep_headers(engine):
    render_summary(engine, [], [], [])
    assert [f.text for f in engine.document.fragments()] == [
        "Lecture Summary", "Keywords:", "Summary:", "Links:",
    ]


def test_format_console():
    out = format_console(["entropy", "energy"], ["First.", "Second."], ["https://a"])
    assert out.splitlines() == [
        "📌 Keywords: entropy, energy",
        "📝 Summary:",
        "First.",
        "Second.",
        "🔗 Links:",
        "https://a",
    ]

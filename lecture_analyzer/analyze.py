# lecture_analyzer/analyze.py
"""Naive keyword and extractive summary extraction."""
from collections import Counter
from typing import List, Tuple

from .config import Config
from .text_utils import collapse_ws, keyword_clean, split_sentences


def rank_keywords(text: str, k: int = Config.TOP_KEYWORDS) -> List[str]:
    """Most frequent words of at least MIN_KEYWORD_LEN chars; ties keep first-seen order."""
    freq = Counter(w for w in keyword_clean(text).split() if len(w) >= Config.MIN_KEYWORD_LEN)
    # Counter keeps insertion order and most_common() sorts stably
    return [w for w, _ in freq.most_common(k)]


def longest_sentences(text: str, k: int = Config.SUMMARY_SENTENCES) -> List[str]:
    sentences = [collapse_ws(s) for s in split_sentences(text)]
    sentences = [s for s in sentences if s]
    sentences.sort(key=len, reverse=True)
    return sentences[:k]


def summarize(text: str,
              top_keywords: int = Config.TOP_KEYWORDS,
              summary_sentences: int = Config.SUMMARY_SENTENCES) -> Tuple[List[str], List[str]]:
    return rank_keywords(text, top_keywords), longest_sentences(text, summary_sentences)

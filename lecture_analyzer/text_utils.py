import re
import unicodedata

_SENT_SPLIT = re.compile(r"[.!?]")


def collapse_ws(s: str) -> str:
    return " ".join(s.split())


def keyword_clean(s: str) -> str:
    """Lowercase; anything that is neither alphanumeric nor whitespace -> space."""
    s = unicodedata.normalize("NFC", s.lower())
    return "".join(ch if ch.isalnum() or ch.isspace() else " " for ch in s)


def split_sentences(text: str):
    return _SENT_SPLIT.split(text)

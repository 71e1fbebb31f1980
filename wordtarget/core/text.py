from __future__ import annotations

import re
from typing import List

# "< " ... "<" fragments left behind by pasted markup
_TAG_NOISE_RE = re.compile(r"< [^>]+<")
_WHITESPACE_RE = re.compile(r"\s+")


def split_lines(text: str) -> List[str]:
    """Split document text into lines on ``\\n`` only (``\\r`` stays on the line)."""
    return (text or "").split("\n")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs into single spaces and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def count_words(text: str) -> int:
    """Count whitespace separated words after dropping tag-like noise.

    A blank string counts as 0 words, never 1.
    """
    if not text:
        return 0
    cleaned = normalize_whitespace(_TAG_NOISE_RE.sub("", text))
    if cleaned == "":
        return 0
    return len(cleaned.split(" "))


def count_lines(text: str) -> int:
    """Number of ``\\n`` separated pieces; a trailing newline adds an empty piece."""
    return len(split_lines(text))

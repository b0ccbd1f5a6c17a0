"""Split lyric text into words and lossless word/separator segments."""
from __future__ import annotations

import re
from typing import List

from .models import Segment

SEPARATOR_CHARS = "、。，．,.「」『』【】？！?!()（）"

SEPARATOR_RE = re.compile(r"[\s　" + re.escape(SEPARATOR_CHARS) + r"]+")
_SPLIT_RE = re.compile(f"({SEPARATOR_RE.pattern})")


def words(text: str) -> List[str]:
    """Return the words of ``text`` in order, ignoring separator runs."""

    return [part for part in SEPARATOR_RE.split(text) if part]


def is_separator(text: str) -> bool:
    return SEPARATOR_RE.fullmatch(text) is not None


def segments(text: str) -> List[Segment]:
    """Split ``text`` into alternating separator and word segments.

    Joining the segment texts gives ``text`` back unchanged, and the word
    segments appear in the same order as :func:`words`.
    """

    result: List[Segment] = []
    for part in _SPLIT_RE.split(text):
        if not part:
            continue
        result.append(Segment(text=part, is_word=not is_separator(part)))
    return result

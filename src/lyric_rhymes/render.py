"""Rebuild lyric text as HTML markup with rhyme highlights."""
from __future__ import annotations

import html
from typing import Mapping, Optional, Sequence

from .models import Highlight, Segment
from .tokenizer import segments

LINE_BREAK = "<br>"

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="ja">
<head>
<meta charset="UTF-8">
<title>{title}</title>
<style>
body {{ font-family: sans-serif; line-height: 2; }}
.word-container {{ display: inline-block; }}
.rhyme-highlight {{ border-radius: 3px; padding: 0 1px; }}
</style>
</head>
<body>
<div id="rhymeOutput">{body}</div>
</body>
</html>
"""


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


def render_word(word: str, highlight: Optional[Highlight]) -> str:
    """Render a single word, wrapping its rhyming tail when highlighted.

    The tail is the last ``len(highlight.rhyme)`` characters of the literal
    word, whatever characters the signature skipped.
    """

    if highlight is None:
        return f"<span>{_escape(word)}</span>"
    split = max(0, len(word) - len(highlight.rhyme))
    prefix, suffix = word[:split], word[split:]
    return (
        f'<span class="word-container">{_escape(prefix)}'
        f'<span class="rhyme-highlight" style="background-color: {highlight.color};" '
        f'title="{html.escape(highlight.rhyme)}">{_escape(suffix)}</span></span>'
    )


def render_separator(separator: str) -> str:
    return _escape(separator).replace("\n", LINE_BREAK)


def render(
    text: str,
    assignment: Mapping[int, Highlight],
    segment_list: Optional[Sequence[Segment]] = None,
) -> str:
    """Render ``text`` with the highlights of ``assignment`` applied.

    ``assignment`` is keyed by word index. Separators are copied through with
    newlines turned into line breaks.
    """

    if segment_list is None:
        segment_list = segments(text)
    parts = []
    word_index = 0
    for segment in segment_list:
        if segment.is_word:
            parts.append(render_word(segment.text, assignment.get(word_index)))
            word_index += 1
        else:
            parts.append(render_separator(segment.text))
    return "".join(parts)


def render_document(markup: str, title: str = "Rhyme highlights") -> str:
    """Wrap rendered markup in a standalone HTML page."""

    return DOCUMENT_TEMPLATE.format(title=_escape(title), body=markup)

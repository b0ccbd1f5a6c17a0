from __future__ import annotations

import html
import re

import _bootstrap  # noqa: F401
import pytest

from lyric_rhymes.cli import SAMPLE_LYRIC
from lyric_rhymes.rhymes import AnalysisOptions, RhymeAnalyzer


def strip_markup(markup: str) -> str:
    """Undo rendering: line breaks back to newlines, tags dropped, entities decoded."""

    text = markup.replace("<br>", "\n")
    text = re.sub(r"<[^>]+>", "", text)
    return html.unescape(text)


@pytest.fixture()
def sample_lyric() -> str:
    return SAMPLE_LYRIC


@pytest.fixture()
def analyzer() -> RhymeAnalyzer:
    return RhymeAnalyzer(AnalysisOptions(min_length=2, max_distance=10))

"""Lyric rhyme highlighter built on kana vowel signatures."""

from .phonetics import signature, to_hiragana
from .render import render, render_document
from .rhymes import AnalysisOptions, RhymeAnalyzer, find_rhymes, highlight_lyrics, select_pairs
from .tokenizer import segments, words

__all__ = [
    "AnalysisOptions",
    "RhymeAnalyzer",
    "find_rhymes",
    "highlight_lyrics",
    "render",
    "render_document",
    "segments",
    "select_pairs",
    "signature",
    "to_hiragana",
    "words",
]

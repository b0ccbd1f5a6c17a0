"""Rhyme detection and greedy pair selection for lyric text."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .models import Highlight, RhymeCandidate, RhymePair
from .phonetics import common_suffix_length, signature_for
from .render import render
from .tokenizer import words as split_words

LOGGER = logging.getLogger(__name__)

PALETTE = (
    "rgba(255, 99, 132, 0.6)",
    "rgba(54, 162, 235, 0.6)",
    "rgba(255, 206, 86, 0.6)",
    "rgba(75, 192, 192, 0.6)",
    "rgba(153, 102, 255, 0.6)",
    "rgba(255, 159, 64, 0.6)",
    "rgba(199, 199, 199, 0.6)",
    "rgba(83, 207, 189, 0.6)",
)

DEFAULT_MIN_LENGTH = 2
DEFAULT_MAX_DISTANCE = 10


def find_rhymes(
    words: Sequence[str],
    min_length: int,
    max_distance: int,
    mode: str = "vowel",
) -> List[RhymeCandidate]:
    """Find word pairs within ``max_distance`` whose signatures share a suffix.

    Candidates are ordered longest match first; equal lengths keep the order
    in which they were discovered.
    """

    signatures = [signature_for(word, mode) for word in words]
    candidates: List[RhymeCandidate] = []
    for i, first in enumerate(signatures):
        for j in range(i + 1, len(signatures)):
            if j - i > max_distance:
                break
            second = signatures[j]
            if len(first) < min_length or len(second) < min_length:
                continue
            length = common_suffix_length(first, second)
            if length >= min_length:
                rhyme = first[len(first) - length :]
                candidates.append(RhymeCandidate(i, j, length, rhyme))
    candidates.sort(key=lambda candidate: -candidate.length)
    LOGGER.debug("Found %s rhyme candidates among %s words", len(candidates), len(words))
    return candidates


def select_pairs(
    candidates: Sequence[RhymeCandidate],
    palette: Sequence[str] = PALETTE,
) -> Dict[int, Highlight]:
    """Greedily assign colors to non-overlapping candidates in order.

    A word that already carries a highlight blocks every later candidate
    that mentions it.
    """

    assignment: Dict[int, Highlight] = {}
    cursor = 0
    for candidate in candidates:
        if candidate.index1 in assignment or candidate.index2 in assignment:
            continue
        highlight = Highlight(color=palette[cursor % len(palette)], rhyme=candidate.rhyme)
        cursor += 1
        assignment[candidate.index1] = highlight
        assignment[candidate.index2] = highlight
    LOGGER.debug("Selected %s rhyme pairs", cursor)
    return assignment


@dataclass
class AnalysisOptions:
    min_length: int = DEFAULT_MIN_LENGTH
    max_distance: int = DEFAULT_MAX_DISTANCE
    mode: str = "vowel"


@dataclass
class Analysis:
    text: str
    words: List[str]
    candidates: List[RhymeCandidate] = field(default_factory=list)
    assignment: Dict[int, Highlight] = field(default_factory=dict)


class RhymeAnalyzer:
    """Run the tokenize, match, select and render pipeline."""

    def __init__(self, options: AnalysisOptions | None = None):
        self.options = options or AnalysisOptions()

    def analyze(self, text: str) -> Analysis:
        words = split_words(text)
        candidates = find_rhymes(
            words,
            self.options.min_length,
            self.options.max_distance,
            mode=self.options.mode,
        )
        return Analysis(text=text, words=words, candidates=candidates, assignment=select_pairs(candidates))

    def highlight(self, text: str) -> str:
        """Return highlight markup for ``text``; blank input gives ``""``."""

        if not text.strip():
            return ""
        analysis = self.analyze(text)
        return render(text, analysis.assignment)

    def pairs(self, text: str) -> List[RhymePair]:
        """Return the accepted rhyme pairs of ``text`` in selection order."""

        analysis = self.analyze(text)
        pairs: List[RhymePair] = []
        for candidate in analysis.candidates:
            first = analysis.assignment.get(candidate.index1)
            second = analysis.assignment.get(candidate.index2)
            # accepted candidates share the very same highlight object
            if first is None or first is not second:
                continue
            pairs.append(
                RhymePair(
                    index1=candidate.index1,
                    index2=candidate.index2,
                    word1=analysis.words[candidate.index1],
                    word2=analysis.words[candidate.index2],
                    rhyme=first.rhyme,
                    color=first.color,
                )
            )
        return pairs


def highlight_lyrics(
    text: str,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_distance: int = DEFAULT_MAX_DISTANCE,
    mode: str = "vowel",
) -> str:
    """Return ``text`` as markup with rhyming pairs color highlighted."""

    options = AnalysisOptions(min_length=min_length, max_distance=max_distance, mode=mode)
    return RhymeAnalyzer(options).highlight(text)

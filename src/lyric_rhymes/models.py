"""Dataclasses describing words, candidates and highlights."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Segment:
    text: str
    is_word: bool


@dataclass(frozen=True)
class RhymeCandidate:
    index1: int
    index2: int
    length: int
    rhyme: str

    @property
    def distance(self) -> int:
        return self.index2 - self.index1


@dataclass(frozen=True)
class Highlight:
    color: str
    rhyme: str


@dataclass
class RhymePair:
    index1: int
    index2: int
    word1: str
    word2: str
    rhyme: str
    color: str

    @property
    def distance(self) -> int:
        return self.index2 - self.index1

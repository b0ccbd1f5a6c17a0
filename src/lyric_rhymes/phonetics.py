"""Utilities for reducing kana words to approximate vowel signatures."""
from __future__ import annotations

from typing import Dict, Optional

KATAKANA_START = 0x30A1
KATAKANA_END = 0x30F6
KATAKANA_OFFSET = 0x60

VOWEL_CLASSES = {
    "あ": "あかがさざただなはばぱまやらわ",
    "い": "いきぎしじちぢにひびぴみりゐ",
    "う": "うくぐすずつづぬふぶぷむゆるゔ",
    "え": "えけげせぜてでねへべぺめれゑ",
    "お": "おこごそぞとどのほぼぽもよろを",
}

_VOWEL_LOOKUP: Dict[str, str] = {
    char: vowel for vowel, members in VOWEL_CLASSES.items() for char in members
}


def to_hiragana(text: str) -> str:
    """Fold katakana characters onto their hiragana counterparts."""

    return "".join(
        chr(ord(char) - KATAKANA_OFFSET)
        if KATAKANA_START <= ord(char) <= KATAKANA_END
        else char
        for char in text
    )


def vowel_class(char: str) -> Optional[str]:
    """Return the vowel class of a single kana, or ``None`` when it has none.

    Moraic nasals, small kana and anything outside the syllabary are not
    classified.
    """

    return _VOWEL_LOOKUP.get(to_hiragana(char))


def signature(word: str) -> str:
    """Return the vowel signature of ``word``.

    Every classifiable character contributes one of あいうえお; the rest are
    dropped, so the signature can be shorter than the word.
    """

    vowels = []
    for char in to_hiragana(word):
        vowel = _VOWEL_LOOKUP.get(char)
        if vowel is not None:
            vowels.append(vowel)
    return "".join(vowels)


def literal_signature(word: str) -> str:
    return word


def signature_for(word: str, mode: str = "vowel") -> str:
    """Compute the signature of ``word`` for the given matching mode."""

    if mode == "vowel":
        return signature(word)
    if mode == "literal":
        return literal_signature(word)
    raise ValueError(f"Unknown signature mode: {mode!r}")


def common_suffix_length(left: str, right: str) -> int:
    """Count the trailing symbols ``left`` and ``right`` share."""

    length = 0
    for k in range(1, min(len(left), len(right)) + 1):
        if left[-k] != right[-k]:
            break
        length += 1
    return length

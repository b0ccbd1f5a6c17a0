import _bootstrap  # noqa: F401

from lyric_rhymes.models import RhymeCandidate
from lyric_rhymes.rhymes import (
    PALETTE,
    AnalysisOptions,
    RhymeAnalyzer,
    find_rhymes,
    select_pairs,
)


def test_find_rhymes_vowel_suffix():
    candidates = find_rhymes(["アドバンス", "キャンバス"], 2, 5)
    assert candidates == [RhymeCandidate(0, 1, 2, "あう")]


def test_find_rhymes_literal_mode():
    assert find_rhymes(["チャンス", "アドバンス"], 2, 5) == []
    assert find_rhymes(["チャンス", "アドバンス"], 2, 5, mode="literal") == [RhymeCandidate(0, 1, 2, "ンス")]


def test_distance_bound():
    candidates = find_rhymes(["かた"] * 5, 2, 2)
    assert [(c.index1, c.index2) for c in candidates] == [
        (0, 1),
        (0, 2),
        (1, 2),
        (1, 3),
        (2, 3),
        (2, 4),
        (3, 4),
    ]
    assert all(c.distance <= 2 for c in candidates)
    assert find_rhymes(["かた"] * 5, 2, 0) == []


def test_min_length_bound():
    words = ["アドバンス", "キャンバス", "スタンス", "かな"]
    signatures = {"アドバンス": 4, "キャンバス": 3, "スタンス": 3, "かな": 2}
    for min_length in range(1, 4):
        for candidate in find_rhymes(words, min_length, 10):
            assert candidate.length >= min_length
            shortest = min(signatures[words[candidate.index1]], signatures[words[candidate.index2]])
            assert candidate.length <= shortest
    assert find_rhymes(words, 5, 10) == []


def test_zero_min_length_matches_every_pair():
    assert find_rhymes(["ん", "か"], 0, 5) == [RhymeCandidate(0, 1, 0, "")]


def test_candidates_sorted_longest_first_and_stable():
    candidates = find_rhymes(["かな", "たな", "さかな"], 2, 5)
    assert [(c.index1, c.index2, c.length) for c in candidates] == [
        (0, 1, 2),
        (0, 2, 2),
        (1, 2, 2),
    ]
    candidates = find_rhymes(["いかな", "かさな", "たかな"], 2, 5)
    assert [(c.index1, c.index2, c.length) for c in candidates] == [
        (1, 2, 3),
        (0, 1, 2),
        (0, 2, 2),
    ]


def test_select_pairs_prefers_longest_and_uses_each_word_once():
    candidates = find_rhymes(["かさな", "たかな", "いかな"], 2, 5)
    assignment = select_pairs(candidates)
    assert sorted(assignment) == [0, 1]
    assert assignment[0] is assignment[1]
    assert assignment[0].rhyme == "あああ"
    assert assignment[0].color == PALETTE[0]


def test_select_pairs_cycles_palette_from_start_each_call():
    candidates = [RhymeCandidate(2 * k, 2 * k + 1, 2, "ああ") for k in range(len(PALETTE) + 1)]
    assignment = select_pairs(candidates)
    assert assignment[0].color == PALETTE[0]
    assert assignment[2].color == PALETTE[1]
    assert assignment[2 * len(PALETTE)].color == PALETTE[0]
    assert select_pairs(candidates[1:2])[2].color == PALETTE[0]


def test_sample_lyric_analysis(analyzer, sample_lyric):
    analysis = analyzer.analyze(sample_lyric)
    assert len(analysis.words) == 7
    assert analysis.candidates[0] == RhymeCandidate(1, 3, 4, "あおあう")
    assert analysis.candidates[1] == RhymeCandidate(2, 6, 3, "いあう")
    assert sorted(analysis.assignment) == [1, 2, 3, 6]
    for index, highlight in analysis.assignment.items():
        partners = [other for other, value in analysis.assignment.items() if value is highlight]
        assert len(partners) == 2


def test_pairs_report(analyzer, sample_lyric):
    pairs = analyzer.pairs(sample_lyric)
    assert [(p.word1, p.word2, p.rhyme, p.color) for p in pairs] == [
        ("常にアドバンス", "目指すアドバンス", "あおあう", PALETTE[0]),
        ("塗り替えるキャンバス", "未来を彩る人生のキャンバス", "いあう", PALETTE[1]),
    ]
    assert pairs[0].distance == 2


def test_analyzer_defaults():
    analyzer = RhymeAnalyzer()
    assert analyzer.options == AnalysisOptions(min_length=2, max_distance=10, mode="vowel")
    assert analyzer.pairs("") == []

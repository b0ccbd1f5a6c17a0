"""Command line interface for the lyric rhyme highlighter."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from tabulate import tabulate
from tqdm import tqdm

from .models import RhymePair
from .phonetics import signature, to_hiragana
from .render import render_document
from .rhymes import DEFAULT_MAX_DISTANCE, DEFAULT_MIN_LENGTH, AnalysisOptions, RhymeAnalyzer

LOGGER = logging.getLogger("lyric_rhymes")

MIN_LENGTH_ENV = "LYRIC_RHYMES_MIN_LENGTH"
MAX_DISTANCE_ENV = "LYRIC_RHYMES_MAX_DISTANCE"

SAMPLE_LYRIC = """掴むチャンス 常にアドバンス
塗り替えるキャンバス 目指すアドバンス
過去にバイバイ 揺るがないスタンス
未来を彩る人生のキャンバス"""


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _env_int(name: str, fallback: int) -> int:
    """Read a positive integer default from the environment."""

    value = os.environ.get(name)
    if value is None or not value.strip():
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if parsed <= 0:
        raise ValueError(f"{name} must be positive, got {parsed}")
    return parsed


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("files", nargs="*", help="Lyric files to analyse (stdin when omitted)")
    parser.add_argument("--text", help="Lyric text to analyse")
    parser.add_argument("--sample", action="store_true", help="Analyse the built-in sample lyric")
    parser.add_argument("--min-length", type=int, help="Minimum number of matching trailing vowels")
    parser.add_argument("--max-distance", type=int, help="Maximum distance between rhyming words")
    parser.add_argument("--literal", action="store_true", help="Match literal characters instead of vowels")


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Highlight rhyming word pairs in lyrics")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    highlight_parser = subparsers.add_parser("highlight", help="Render lyrics as highlighted HTML markup")
    _add_input_arguments(highlight_parser)
    highlight_parser.add_argument("--document", action="store_true", help="Emit a standalone HTML page")
    highlight_parser.add_argument("--output-dir", help="Write one HTML page per input file into this directory")

    pairs_parser = subparsers.add_parser("pairs", help="List the rhyme pairs that get highlighted")
    _add_input_arguments(pairs_parser)

    signature_parser = subparsers.add_parser("signature", help="Show the vowel signature of words")
    signature_parser.add_argument("words", nargs="+", help="Words to inspect")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "signature":
        rows = [[word, to_hiragana(word), signature(word)] for word in args.words]
        print(tabulate(rows, headers=["Word", "Hiragana", "Signature"]))
        return

    try:
        options = _options_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))
    missing = [name for name in args.files if not Path(name).is_file()]
    if missing:
        parser.error(f"Lyric file(s) not found: {', '.join(missing)}")

    analyzer = RhymeAnalyzer(options)

    if args.command == "highlight" and args.output_dir:
        if not args.files:
            parser.error("--output-dir requires lyric files")
        _write_documents(analyzer, [Path(name) for name in args.files], Path(args.output_dir))
        return

    for label, text in _read_inputs(args):
        if not text.strip():
            LOGGER.warning("No lyric text supplied%s", f" in {label}" if label else "")
            continue
        if args.command == "highlight":
            markup = analyzer.highlight(text)
            print(render_document(markup, title=label or "Rhyme highlights") if args.document else markup)
        elif args.command == "pairs":
            if label:
                print(f"{label}:")
            _print_pairs(analyzer.pairs(text))


def _options_from_args(args: argparse.Namespace) -> AnalysisOptions:
    min_length = args.min_length if args.min_length is not None else _env_int(MIN_LENGTH_ENV, DEFAULT_MIN_LENGTH)
    max_distance = (
        args.max_distance if args.max_distance is not None else _env_int(MAX_DISTANCE_ENV, DEFAULT_MAX_DISTANCE)
    )
    if min_length <= 0:
        raise ValueError("--min-length must be a positive integer")
    if max_distance <= 0:
        raise ValueError("--max-distance must be a positive integer")
    return AnalysisOptions(
        min_length=min_length,
        max_distance=max_distance,
        mode="literal" if args.literal else "vowel",
    )


def _read_inputs(args: argparse.Namespace) -> List[Tuple[str, str]]:
    inputs: List[Tuple[str, str]] = []
    if args.text is not None:
        inputs.append(("", args.text))
    if args.sample:
        inputs.append(("", SAMPLE_LYRIC))
    for name in args.files:
        inputs.append((name, Path(name).read_text(encoding="utf8")))
    if not inputs:
        inputs.append(("", sys.stdin.read()))
    return inputs


def _write_documents(analyzer: RhymeAnalyzer, files: List[Path], output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    for path in tqdm(files, desc="Highlighting"):
        text = path.read_text(encoding="utf8")
        if not text.strip():
            LOGGER.warning("No lyric text supplied in %s", path)
        destination = output_dir / f"{path.stem}.html"
        destination.write_text(render_document(analyzer.highlight(text), title=path.stem), encoding="utf8")
        LOGGER.debug("Wrote %s", destination)
    LOGGER.info("Wrote %s page(s) to %s", len(files), output_dir)


def _print_pairs(pairs: list[RhymePair]) -> None:
    if not pairs:
        print("No rhymes found")
        return
    rows = [
        [number, pair.word1, pair.word2, pair.distance, len(pair.rhyme), pair.rhyme, pair.color]
        for number, pair in enumerate(pairs, start=1)
    ]
    headers = ["#", "Word 1", "Word 2", "Distance", "Length", "Rhyme", "Color"]
    print(tabulate(rows, headers=headers))


if __name__ == "__main__":  # pragma: no cover
    main()

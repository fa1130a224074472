"""CLI entrypoint for the Greek stemmer.

Usage:
  greekstem stem αγριοσ γραμματα
  greekstem analyze --text "Τα ρολόγια της αγοράς"
  greekstem check-samples --samples tests/resources/stemming_samples.txt
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List

from .analysis import analyze
from .errors import ConfigurationError
from .normalize import fold_greek_token
from .report import print_summary, write_mismatches_csv
from .samples import check_samples, read_samples, update_samples
from .stemmer import GreekStemmer
from .stopwords import load_stopwords

DEFAULT_CONFIG = {
    "stopwords_path": None,
    "samples_path": "tests/resources/stemming_samples.txt",
}


def load_config(path: str | Path) -> dict:
    path = Path(path)
    if not path.exists():
        return dict(DEFAULT_CONFIG)
    cfg = dict(DEFAULT_CONFIG)
    cfg.update(json.loads(path.read_text(encoding="utf-8")))
    return cfg


def _build_stemmer(args: argparse.Namespace, cfg: dict) -> GreekStemmer:
    stopwords_path = getattr(args, "stopwords", None) or cfg.get("stopwords_path")
    return GreekStemmer(stopwords=load_stopwords(stopwords_path))


def _samples_path(args: argparse.Namespace, cfg: dict) -> Path:
    return Path(args.samples or cfg["samples_path"])


def cmd_stem(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    stemmer = _build_stemmer(args, cfg)
    for word in args.words:
        folded = fold_greek_token(word)
        print(f"{word} -> {stemmer.stem_word(folded)}")
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    stemmer = _build_stemmer(args, cfg)

    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            print(f"Error: Input file not found: {input_path}")
            return 1
        lines = input_path.read_text(encoding="utf-8").splitlines()
    else:
        lines = [args.text or ""]

    keywords = set(args.keyword or [])
    for line in lines:
        print(" ".join(analyze(line, stemmer=stemmer, keywords=keywords)))
    return 0


def cmd_check_samples(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    stemmer = _build_stemmer(args, cfg)
    path = _samples_path(args, cfg)
    try:
        samples = read_samples(path)
    except (ConfigurationError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    mismatches = check_samples(samples, stemmer)
    print_summary(len(samples), mismatches)
    if args.out:
        write_mismatches_csv(args.out, mismatches)
        print(f"Wrote report: {args.out}")
    return 1 if mismatches else 0


def cmd_update_samples(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    stemmer = _build_stemmer(args, cfg)
    path = _samples_path(args, cfg)
    try:
        before = {s.word: s.stem for s in read_samples(path)}
        updated = update_samples(path, stemmer)
    except (ConfigurationError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    changed = sum(1 for s in updated if before.get(s.word) != s.stem)
    print(f"Updated {len(updated)} samples ({changed} changed)")
    print(f"Wrote samples: {path}")
    return 0


def cmd_doctor(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    stemmer = _build_stemmer(args, cfg)
    print(f"Stopwords loaded: {len(stemmer.stopwords)}")
    for w in ["αγριοσ", "γραμματα", "ρολογια", "διχτυα", "απο"]:
        print(f"stem('{w}') -> '{stemmer.stem_word(w)}'")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="greekstem", description="Greek stemmer CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--config",
            default="resources/config.json",
            help="Path to config.json (optional; defaults will be used if missing)",
        )
        sp.add_argument(
            "--stopwords",
            help="Path to a stopwords file (one word per line); bundled list if omitted",
        )

    stem = sub.add_parser("stem", help="Stem individual words")
    stem.add_argument("words", nargs="+", help="Words to stem (folded before stemming)")
    add_common(stem)
    stem.set_defaults(func=cmd_stem)

    an = sub.add_parser("analyze", help="Tokenize, fold and stem running text")
    src = an.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", help="Text to analyze")
    src.add_argument("--input", help="UTF-8 text file to analyze line by line")
    an.add_argument(
        "--keyword",
        action="append",
        help="Word to keep unstemmed (repeatable)",
    )
    add_common(an)
    an.set_defaults(func=cmd_analyze)

    check = sub.add_parser("check-samples", help="Compare the stemmer against a samples file")
    check.add_argument("--samples", help="Path to word,stem samples file")
    check.add_argument("--out", help="Optional CSV report of mismatches")
    add_common(check)
    check.set_defaults(func=cmd_check_samples)

    update = sub.add_parser("update-samples", help="Regenerate stems in a samples file")
    update.add_argument("--samples", help="Path to word,stem samples file")
    add_common(update)
    update.set_defaults(func=cmd_update_samples)

    doctor = sub.add_parser("doctor", help="Verify stopwords and a few reference stems")
    add_common(doctor)
    doctor.set_defaults(func=cmd_doctor)

    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

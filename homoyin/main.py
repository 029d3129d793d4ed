"""homoyin CLI - English words that read as pinyin.

Print English words that can be read as (toneless) pinyin syllables, along
with the Chinese words they correspond to.

Usage:
    python -m homoyin.main
    python -m homoyin.main -n cedict_1_0_ts_utf-8_mdbg.txt /usr/share/dict/words
"""

import argparse
import sys
from typing import Optional, Sequence

from .ingest import cedict, wordlist
from .matcher import Matcher
from .segmenter import Segmenter
from . import config as cfg


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, with defaults from config.json."""
    default_cedict = cfg.default_cedict()
    default_words = cfg.default_words()

    parser = argparse.ArgumentParser(
        prog="homoyin",
        description=(
            "Print English words that can be read as (toneless) pinyin "
            "syllables, along with the Chinese words they correspond to."
        ),
    )
    parser.add_argument(
        "-n",
        "--nonsense",
        action=argparse.BooleanOptionalAction,
        default=cfg.default_nonsense(),
        help=(
            "Print words that can be split into pinyin syllables but which "
            "have no Chinese homonym; --no-nonsense selects match mode"
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=cfg.default_verbose(),
        help="Print load statistics to stderr",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=cfg.default_workers(),
        help=(
            "Worker threads for matching; matching is CPU-bound, so extra "
            f"threads rarely speed it up (default: {cfg.default_workers()})"
        ),
    )
    parser.add_argument(
        "cedict",
        nargs="?",
        default=default_cedict,
        metavar="CEDICT",
        help=(
            "Location of the CEDICT dictionary to use; see "
            "https://www.mdbg.net/chinese/dictionary?page=cc-cedict "
            f"(default: {default_cedict})"
        ),
    )
    parser.add_argument(
        "words",
        nargs="?",
        default=default_words,
        metavar="WORDS",
        help=f"Location of the English dictionary to use (default: {default_words})",
    )
    return parser


def log(message: str, verbose: bool) -> None:
    """Print a progress message to stderr when verbose."""
    if verbose:
        print(message, file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.workers < 1:
        parser.error("--workers must be at least 1")

    log(f"Loading CEDICT: {args.cedict}", args.verbose)
    try:
        index, stats = cedict.ingest(args.cedict)
    except cedict.CedictFormatError as e:
        print(f"homoyin: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"homoyin: cannot read {args.cedict}: {e}", file=sys.stderr)
        return 1

    log(f"  {stats!r}", args.verbose)
    log(f"  {len(index):,} keys, {index.entry_count():,} entries", args.verbose)
    for reason, count in sorted(stats.rejected.items()):
        log(f"  skipped {reason}: {count:,}", args.verbose)
    for error in stats.errors:
        log(f"  {error}", args.verbose)

    segmenter = Segmenter(max_length=cfg.default_max_syllable_length())
    matcher = Matcher(index, segmenter=segmenter, nonsense=args.nonsense)

    log(f"Matching words: {args.words}", args.verbose)
    try:
        reported = matcher.run(
            wordlist.iter_words(args.words),
            out=sys.stdout,
            workers=args.workers,
        )
    except OSError as e:
        print(f"homoyin: cannot read {args.words}: {e}", file=sys.stderr)
        return 1

    log(f"Reported {reported:,} segmentations", args.verbose)
    return 0


def main_entry() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    sys.exit(main())

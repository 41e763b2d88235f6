import argparse
import logging
import sys

from spellsuggest.common.config import settings
from spellsuggest.spellcheck.dictionary import load_dictionary
from spellsuggest.spellcheck.engine import distance_matrix
from spellsuggest.spellcheck.ranker import Ranker


def _format_table(source: str, target: str) -> str:
    dp = distance_matrix(source, target)
    width = max(len(str(cell)) for row in dp for cell in row) + 1
    header = " " * (width * 2) + "".join(ch.rjust(width) for ch in target)
    lines = [header]
    for i, row in enumerate(dp):
        label = source[i - 1] if i else " "
        lines.append(label.rjust(width) + "".join(str(cell).rjust(width) for cell in row))
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rank dictionary words by weighted edit distance to a word."
    )
    parser.add_argument("word", nargs="?", default="", help="Input to find suggestions for")
    parser.add_argument(
        "--dictionary",
        default=settings.dictionary_source,
        help="Path or URL of a newline-delimited word list",
    )
    parser.add_argument("--limit", type=int, default=settings.suggest_limit, help="Number of suggestions")
    parser.add_argument("--workers", type=int, default=settings.suggest_workers, help="Ranking threads")
    parser.add_argument("--distances", action="store_true", help="Print the distance next to each word")
    parser.add_argument(
        "--table",
        nargs=2,
        metavar=("A", "B"),
        help="Print the full distance table between two words and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level.upper())

    if args.table:
        print(_format_table(*args.table))
        return 0

    dictionary = load_dictionary(args.dictionary, timeout_s=settings.request_timeout_s)
    ranked = Ranker(workers=args.workers).rank(args.word, dictionary, args.limit)
    for item in ranked:
        print(f"{item.word}\t{item.distance}" if args.distances else item.word)
    return 0


if __name__ == "__main__":
    sys.exit(main())

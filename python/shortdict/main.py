"""shortdict CLI - Short strings for integers over arbitrary alphabets.

Usage:
    python -m shortdict.main shorten 14794393443
    python -m shortdict.main lengthen 2dD
    python -m shortdict.main rearrange "hello world" -r case -r leet -o hello.json
    python -m shortdict.main shorten 42 --dictionary-file hello.json
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .converter import lengthen, shorten
from .dictionary import Dictionary, make_dictionary
from .errors import ShortDictError
from .rearrange import list_rearrangers, rearrange
from . import config as cfg


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with defaults from config.json."""
    parser = argparse.ArgumentParser(
        description="shortdict - Short strings for integers over arbitrary alphabets"
    )
    parser.add_argument(
        "--dictionary",
        "-d",
        type=str,
        default=cfg.default_dictionary(),
        help="Alphabet to use (default: from config.json)",
    )
    parser.add_argument(
        "--dictionary-file",
        "-f",
        type=Path,
        help="Load the alphabet from a saved dictionary JSON file",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=cfg.default_strict(),
        help="Reject empty dictionaries and duplicate symbols",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        default=cfg.default_quiet(),
        help="Print bare results only",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    p_shorten = subparsers.add_parser("shorten", help="Convert an integer to a string")
    p_shorten.add_argument("value", type=int, help="Non-negative integer")

    p_lengthen = subparsers.add_parser("lengthen", help="Convert a string to an integer")
    p_lengthen.add_argument("text", type=str, help="Shortened string")

    p_rearrange = subparsers.add_parser(
        "rearrange", help="Reorder the dictionary to spell a phrase"
    )
    p_rearrange.add_argument("phrase", type=str, help="Target phrase")
    p_rearrange.add_argument(
        "--rearranger",
        "-r",
        action="append",
        dest="rearrangers",
        help=f"Substitution strategy, repeatable (default: {', '.join(cfg.default_strategies())})",
    )
    p_rearrange.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Save the rearranged dictionary as JSON",
    )

    subparsers.add_parser("strategies", help="List substitution strategies")

    return parser


def _load_dictionary(args: argparse.Namespace) -> Dictionary:
    if args.dictionary_file:
        loaded = Dictionary.load(args.dictionary_file)
        return make_dictionary(loaded.symbols, name=loaded.name, strict=args.strict)
    return make_dictionary(args.dictionary, strict=args.strict)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "strategies":
        for name in list_rearrangers():
            print(name)
        return 0

    try:
        dictionary = _load_dictionary(args)

        if args.command == "shorten":
            output = shorten(dictionary, args.value)
            if args.quiet:
                print(output)
            else:
                print(f"Base: {dictionary.base}")
                print(f"{args.value} shortens to: {output}")

        elif args.command == "lengthen":
            output = lengthen(dictionary, args.text)
            if args.quiet:
                print(output)
            else:
                print(f"Base: {dictionary.base}")
                print(f"{args.text} lengthens to: {output}")

        elif args.command == "rearrange":
            strategies = args.rearrangers or cfg.default_strategies()
            result = rearrange(dictionary, args.phrase, strategies)
            result.raise_for_status()

            print(result.dictionary)
            if not args.quiet:
                print(f"Strategies: {', '.join(strategies) or '-'}")
                if result.skipped:
                    print(f"Skipped: {''.join(result.skipped)!r}")
            if args.output:
                result.dictionary.save(args.output)
                if not args.quiet:
                    print(f"Saved: {args.output}")

    except (ShortDictError, ValueError, OSError) as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
bibterm - Scripture Lookup
Command-line lookup of verses from a local JSON verse collection
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger
from rich.console import Console
from rich.markup import escape

from bibterm.config import Config
from bibterm.errors import ArgumentParseError, ConfigError, DatasetLoadError, UsageError
from bibterm.modules.dataset import VerseRecord, load_dataset
from bibterm.modules.formatter import display, format_passage, format_verse
from bibterm.modules.lookup_parser import LookupKey, parse_lookup_key
from bibterm.modules.verse_matcher import find_first, match_verses
from bibterm.utils.logger import setup_logger

console = Console(stderr=True)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_PARSE_ERROR = 2
EXIT_LOAD_ERROR = 3

USAGE = "Usage: `bibterm [book] [chapter] [verses]`"
USAGE_SINGLE = "Usage: `bibterm [book] [chapter] [verse]`"
PARSE_ERROR_LINES = [
    "Error parsing scripture lookup key",
    "Please ensure you enter a valid book, chapter, and verse",
]


class ScriptureLookup:
    """Loads the verse collection and answers lookup keys against it"""

    def __init__(self, dataset_path: Path):
        self.dataset_path = Path(dataset_path)
        self._records: Optional[List[VerseRecord]] = None

    @property
    def records(self) -> List[VerseRecord]:
        """Verse collection, read from disk on first use"""
        if self._records is None:
            self._records = load_dataset(self.dataset_path)
        return self._records

    def lookup(self, key: LookupKey, single: bool = False) -> List[str]:
        """
        Find verses for a key and format them for output

        Args:
            key: Parsed lookup key
            single: Return only the first match as a single verse

        Returns:
            list: Output lines
        """
        if single:
            record = find_first(self.records, key)
            logger.debug(f"Single verse lookup for {key.book} {key.chapter}:{key.verse}: {'hit' if record else 'miss'}")
            return format_verse(record)

        found = match_verses(self.records, key)
        logger.debug(f"Found {len(found)} verses for {key.book} {key.chapter}")
        return format_passage(found)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Command-line options; lookup tokens are collected positionally"""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="bibterm - look up scripture from a local verse collection"
    )
    parser.add_argument(
        'tokens',
        nargs='*',
        metavar='TOKEN',
        help='book, chapter, then verses (e.g. "John 3 16", "2 John 1 3-6", "Gen 1 1 3 5")'
    )
    parser.add_argument(
        '--dataset',
        metavar='PATH',
        help='Verse collection JSON file (default from config, then ./kjv.json)'
    )
    parser.add_argument(
        '--config',
        metavar='PATH',
        help='YAML configuration file'
    )
    parser.add_argument(
        '--single',
        action='store_true',
        help='Look up exactly one verse and show only the first match'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Debug logging on stderr'
    )
    return parser


def main(argv: Optional[Sequence[str]] = None, single: bool = False, prog: Optional[str] = None) -> int:
    """Main entry point"""
    parser = build_parser(prog)
    args = parser.parse_intermixed_args(argv)
    single = single or args.single

    # Usage and parse errors are reported before any file is read
    setup_logger(Config.defaults(), verbose=args.verbose)

    try:
        key = parse_lookup_key(args.tokens, single=single)
    except UsageError as e:
        logger.debug(str(e))
        print(USAGE_SINGLE if single else USAGE)
        return EXIT_USAGE
    except ArgumentParseError as e:
        logger.debug(f"Lookup key rejected: {e}")
        for line in PARSE_ERROR_LINES:
            print(line)
        return EXIT_PARSE_ERROR

    try:
        settings = Config(args.config)
    except ConfigError as e:
        logger.error(str(e))
        console.print(f"[red]ERROR: {escape(str(e))}[/red]", highlight=False)
        return EXIT_LOAD_ERROR

    setup_logger(settings, verbose=args.verbose)

    dataset_path = Path(args.dataset) if args.dataset else settings.dataset_path
    lookup = ScriptureLookup(dataset_path)

    try:
        lines = lookup.lookup(key, single=single)
    except DatasetLoadError as e:
        logger.error(f"Dataset load failed: {e}")
        console.print(f"[red]ERROR: {escape(str(e))}[/red]", highlight=False)
        return EXIT_LOAD_ERROR

    display(lines)
    return EXIT_OK


def cli():
    """Console script for the range/list lookup"""
    sys.exit(main())


def cli_single():
    """Console script for the single-verse lookup"""
    sys.exit(main(single=True, prog="bibterm-verse"))


if __name__ == "__main__":
    cli()

"""Command-line token parser producing a lookup key"""
import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from loguru import logger

from ..errors import ArgumentParseError, UsageError

MIN_TOKENS = 3

_INT_RE = re.compile(r'\+?[0-9]+')


@dataclass(frozen=True)
class LookupKey:
    """Lookup key built from command-line arguments"""
    book: str
    chapter: int
    verses: Tuple[int, ...]

    @property
    def verse(self) -> int:
        """The verse of a single-verse key"""
        return self.verses[0]


@dataclass(frozen=True)
class PlainBook:
    """Book given as one token, e.g. `Genesis` or `Gen`"""
    name: str

    @property
    def text(self) -> str:
        return self.name

    @property
    def consumed(self) -> int:
        return 1


@dataclass(frozen=True)
class PrefixedBook:
    """Book given as a number plus a name, e.g. `2 John`"""
    prefix: str
    name: str

    @property
    def text(self) -> str:
        return f"{self.prefix} {self.name}"

    @property
    def consumed(self) -> int:
        return 2


BookName = Union[PlainBook, PrefixedBook]


def is_integer(token: str) -> bool:
    """Check whether a token is a plain decimal integer"""
    return _INT_RE.fullmatch(token) is not None


def parse_number(token: str) -> int:
    """
    Parse a chapter or verse number

    Raises:
        ArgumentParseError: If the token is not a positive integer
    """
    if not is_integer(token):
        raise ArgumentParseError(f"Not a number: {token!r}", token=token)
    value = int(token)
    if value < 1:
        raise ArgumentParseError(f"Must be at least 1: {token!r}", token=token)
    return value


def parse_range(token: str) -> List[int]:
    """
    Expand an inclusive `start-end` range

    A reversed range such as `5-3` expands to nothing.
    """
    start, _, end = token.partition('-')
    first = parse_number(start)
    last = parse_number(end)
    return list(range(first, last + 1))


def detect_book(tokens: Sequence[str]) -> BookName:
    """
    Work out the book name from the leading tokens

    A numeric first token is a book prefix and is joined with the next one.
    """
    if is_integer(tokens[0]):
        if len(tokens) < 2:
            raise ArgumentParseError("Book prefix without a book name", token=tokens[0])
        return PrefixedBook(tokens[0], tokens[1])
    return PlainBook(tokens[0])


def parse_verses(tokens: Sequence[str]) -> List[int]:
    """Parse verse tokens: single numbers and `start-end` ranges, in order"""
    verses: List[int] = []
    for token in tokens:
        if '-' in token:
            verses.extend(parse_range(token))
        else:
            verses.append(parse_number(token))
    return verses


def parse_lookup_key(tokens: Sequence[str], single: bool = False) -> LookupKey:
    """
    Build a lookup key from positional command-line tokens

    Args:
        tokens: Arguments without the program name
        single: Accept exactly one verse number instead of a list or range

    Returns:
        LookupKey

    Raises:
        UsageError: Fewer than three tokens
        ArgumentParseError: Any token that should be numeric is not
    """
    if len(tokens) < MIN_TOKENS:
        raise UsageError(f"Expected at least {MIN_TOKENS} arguments, got {len(tokens)}")

    book = detect_book(tokens)
    rest = list(tokens[book.consumed:])

    if len(rest) < 2:
        raise ArgumentParseError("Missing chapter or verse")

    chapter = parse_number(rest[0])
    verse_tokens = rest[1:]

    if single:
        if len(verse_tokens) != 1:
            raise ArgumentParseError("Expected exactly one verse")
        verses = [parse_number(verse_tokens[0])]
    else:
        verses = parse_verses(verse_tokens)

    key = LookupKey(book=book.text, chapter=chapter, verses=tuple(verses))
    logger.debug(f"Lookup key: {key}")
    return key

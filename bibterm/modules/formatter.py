"""Result formatting and printing"""
from typing import Iterable, List, Optional, Sequence

from .dataset import VerseRecord

NOT_FOUND = "Could not find that scripture"


def format_passage(records: Sequence[VerseRecord]) -> List[str]:
    """
    Format matched verses as a passage

    Args:
        records: Matches in the order they were found

    Returns:
        Header line from the first record, then one `<verse>: <text>` line each
    """
    if not records:
        return [NOT_FOUND]
    first = records[0]
    lines = [f"{first.book_name} {first.chapter}:"]
    lines.extend(f"{record.verse}: {record.text}" for record in records)
    return lines


def format_verse(record: Optional[VerseRecord]) -> List[str]:
    """Format a single verse as a reference line plus tab-indented text"""
    if record is None:
        return [NOT_FOUND]
    return [
        f"{record.book_name} {record.chapter}:{record.verse}",
        f"\t{record.text}",
    ]


def display(lines: Iterable[str]) -> None:
    """Print formatted lines to stdout as plain text"""
    for line in lines:
        print(line)

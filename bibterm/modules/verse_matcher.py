"""Verse matcher for filtering the loaded collection"""
from typing import Iterable, List, Optional

from .dataset import VerseRecord
from .lookup_parser import LookupKey


def matches(record: VerseRecord, key: LookupKey) -> bool:
    """Check a record against a lookup key (book name or ID, case-insensitive)"""
    book = key.book.casefold()
    return (
        (record.book_name.casefold() == book or record.book_id.casefold() == book)
        and record.chapter == key.chapter
        and record.verse in key.verses
    )


def match_verses(records: Iterable[VerseRecord], key: LookupKey) -> List[VerseRecord]:
    """All matching records in dataset order, duplicates included"""
    return [record for record in records if matches(record, key)]


def find_first(records: Iterable[VerseRecord], key: LookupKey) -> Optional[VerseRecord]:
    """First matching record in dataset order"""
    return next((record for record in records if matches(record, key)), None)

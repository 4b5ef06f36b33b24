"""Verse collection loader"""
import json
from pathlib import Path
from typing import List, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, TypeAdapter, ValidationError

from ..errors import DatasetFormatError, DatasetReadError


class VerseRecord(BaseModel):
    """A single verse"""
    model_config = ConfigDict(frozen=True)

    chapter: StrictInt
    verse: StrictInt
    text: StrictStr
    translation_id: StrictStr
    book_id: StrictStr
    book_name: StrictStr


VerseList = TypeAdapter(List[VerseRecord])


def _describe(error: ValidationError) -> str:
    """Turn the first validation error into `Record <n> ...` wording"""
    detail = error.errors()[0]
    loc = detail['loc']
    if len(loc) == 1:
        return f"Record {loc[0]} is not an object"
    index, field = loc[0], loc[1]
    if detail['type'] == 'missing':
        return f"Record {index} is missing field '{field}'"
    return f"Record {index} field '{field}': {detail['msg']}"


def load_dataset(path: Union[str, Path]) -> List[VerseRecord]:
    """
    Read the verse collection from a JSON file

    The file must hold a JSON array of verse objects. Extra fields are
    ignored. Nothing is returned unless every record is valid.

    Args:
        path: Dataset file path

    Returns:
        List of VerseRecord in file order

    Raises:
        DatasetReadError: If the file is missing or unreadable
        DatasetFormatError: If the content is not valid verse data
    """
    path = Path(path)
    logger.debug(f"Loading dataset from {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetReadError(f"Could not read dataset {path}: {e}", path=path) from e

    try:
        items = json.loads(data)
    except json.JSONDecodeError as e:
        raise DatasetFormatError(f"Dataset {path} is not valid JSON: {e}", path=path) from e

    if not isinstance(items, list):
        raise DatasetFormatError(f"Dataset {path} must contain a JSON array", path=path)

    try:
        records = VerseList.validate_python(items)
    except ValidationError as e:
        raise DatasetFormatError(f"Dataset {path}: {_describe(e)}", path=path) from e

    logger.debug(f"Loaded {len(records)} verses from {path}")
    return records

import json
from pathlib import Path

import pytest
from loguru import logger

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def dataset_path():
    """Small Genesis/John/2 John collection"""
    return FIXTURES / "verses.json"


@pytest.fixture
def make_verse():
    def _make(book_name="Genesis", book_id="Gen", chapter=1, verse=1, text="text", translation_id="KJV"):
        return {
            "chapter": chapter,
            "verse": verse,
            "text": text,
            "translation_id": translation_id,
            "book_id": book_id,
            "book_name": book_name,
        }
    return _make


@pytest.fixture
def write_dataset(tmp_path):
    """Write a list of verse dicts (or raw text) to a JSON file and return its path"""
    def _write(content, name="dataset.json"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def reset_logger(monkeypatch):
    monkeypatch.delenv("BIBTERM_DATASET", raising=False)
    monkeypatch.delenv("BIBTERM_CONFIG", raising=False)
    monkeypatch.delenv("BIBTERM_LOG_LEVEL", raising=False)
    yield
    logger.remove()

import pytest
from pydantic import ValidationError

from bibterm.errors import DatasetFormatError, DatasetLoadError, DatasetReadError
from bibterm.modules.dataset import VerseRecord, load_dataset


def test_loads_records_in_file_order(dataset_path):
    records = load_dataset(dataset_path)

    assert len(records) == 9
    assert records[0] == VerseRecord(
        chapter=1,
        verse=1,
        text="In the beginning God created the heaven and the earth.",
        translation_id="KJV",
        book_id="Gen",
        book_name="Genesis",
    )
    assert [r.book_id for r in records[-2:]] == ["2John", "2John"]


def test_accepts_string_path(dataset_path):
    assert len(load_dataset(str(dataset_path))) == 9


def test_extra_fields_are_ignored(write_dataset, make_verse):
    item = make_verse()
    item["notes"] = "ignored"
    records = load_dataset(write_dataset([item]))
    assert records == [VerseRecord(chapter=1, verse=1, text="text", translation_id="KJV", book_id="Gen", book_name="Genesis")]


def test_duplicates_are_kept(write_dataset, make_verse):
    records = load_dataset(write_dataset([make_verse(), make_verse()]))
    assert len(records) == 2


def test_empty_array(write_dataset):
    assert load_dataset(write_dataset([])) == []


def test_missing_file(tmp_path):
    with pytest.raises(DatasetReadError) as excinfo:
        load_dataset(tmp_path / "missing.json")
    assert isinstance(excinfo.value, DatasetLoadError)
    assert excinfo.value.path == tmp_path / "missing.json"


def test_invalid_json(write_dataset):
    with pytest.raises(DatasetFormatError, match="not valid JSON"):
        load_dataset(write_dataset("[{"))


def test_top_level_must_be_array(write_dataset, make_verse):
    with pytest.raises(DatasetFormatError, match="JSON array"):
        load_dataset(write_dataset(make_verse()))


def test_record_must_be_object(write_dataset, make_verse):
    with pytest.raises(DatasetFormatError, match="Record 1 is not an object"):
        load_dataset(write_dataset([make_verse(), "Genesis 1:1"]))


def test_missing_field(write_dataset, make_verse):
    item = make_verse()
    del item["book_name"]
    with pytest.raises(DatasetFormatError, match="missing field 'book_name'"):
        load_dataset(write_dataset([item]))


@pytest.mark.parametrize("field,value", [
    ("chapter", "1"),
    ("verse", 1.5),
    ("verse", True),
    ("text", 5),
    ("translation_id", None),
])
def test_wrong_field_type(write_dataset, make_verse, field, value):
    item = make_verse()
    item[field] = value
    with pytest.raises(DatasetFormatError, match=f"field '{field}'"):
        load_dataset(write_dataset([item]))


def test_format_error_carries_path(write_dataset, make_verse):
    item = make_verse()
    del item["text"]
    path = write_dataset([item])
    with pytest.raises(DatasetFormatError) as excinfo:
        load_dataset(path)
    assert excinfo.value.path == path


def test_records_are_immutable(dataset_path):
    record = load_dataset(dataset_path)[0]
    with pytest.raises(ValidationError):
        record.verse = 2


def test_error_names_record_index(write_dataset, make_verse):
    bad = make_verse(verse=2)
    bad["chapter"] = "two"
    with pytest.raises(DatasetFormatError, match="Record 2 field 'chapter'"):
        load_dataset(write_dataset([make_verse(), make_verse(), bad]))

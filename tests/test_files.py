import pytest

from exlibs.files import (
    PATH_SEPARATOR,
    ExtFile,
    FileType,
    is_exist_dir,
    is_exist_file,
    normalize_path,
)

SEP = PATH_SEPARATOR
OTHER = "/" if SEP == "\\" else "\\"


@pytest.fixture
def data_file(tmp_path):
    target = tmp_path / "data.txt"
    target.write_text("content")
    return target


def test_is_exist_file(data_file, tmp_path):
    assert is_exist_file(str(data_file)) is True
    assert is_exist_file(str(tmp_path)) is True
    assert is_exist_file(str(tmp_path / "missing.txt")) is False


def test_is_exist_dir(data_file, tmp_path):
    assert is_exist_dir(str(tmp_path)) is True
    assert is_exist_dir(str(data_file)) is False
    assert is_exist_dir(str(tmp_path / "missing")) is False


def test_normalize_path_replaces_foreign_separators():
    assert normalize_path(f"a{OTHER}b{OTHER}c") == f"a{SEP}b{SEP}c"


def test_normalize_path_trailing_separator_drops_two_characters():
    assert normalize_path(f"a{SEP}bc{SEP}") == f"a{SEP}b"


def test_normalize_path_single_separator_unchanged():
    assert normalize_path(SEP) == SEP


def test_normalize_path_without_trailing_separator():
    assert normalize_path(f"x{SEP}y") == f"x{SEP}y"


def test_directory_entry(tmp_path):
    entry = ExtFile(str(tmp_path))
    assert entry.file_type is FileType.DIR
    assert entry.path() == str(tmp_path)
    assert entry.name() == ""
    assert entry.full_path() == str(tmp_path)
    assert entry.is_exist() is True


def test_regular_file_entry(data_file):
    entry = ExtFile(str(data_file))
    assert entry.file_type is FileType.FILE
    assert entry.name() == SEP + "data.txt"
    assert entry.full_path() == entry.path() + SEP + SEP + "data.txt"


def test_missing_entry(tmp_path):
    entry = ExtFile(str(tmp_path / "missing.txt"))
    assert entry.file_type is FileType.NONE
    assert entry.path() == ""
    assert entry.name() == ""
    assert entry.full_path() == ""
    assert entry.is_exist() is False


def test_default_entry_is_empty():
    entry = ExtFile()
    assert entry.full_path() == ""
    assert entry.file_type is FileType.NONE


def test_set_path_replaces_previous_state(data_file, tmp_path):
    entry = ExtFile(str(data_file))
    entry.set_path(str(tmp_path))
    assert entry.file_type is FileType.DIR
    assert entry.name() == ""
    assert entry.full_path() == str(tmp_path)


def test_set_path_to_missing_clears(data_file, tmp_path):
    entry = ExtFile(str(data_file))
    entry.set_path(str(tmp_path / "gone"))
    assert entry.full_path() == ""
    assert entry.file_type is FileType.NONE


def test_file_type_labels():
    assert FileType(2).label == "디렉토리"
    assert FileType(1).label == "파일"
    assert FileType(0).label == "알수없음"


def test_file_type_values():
    assert [FileType(v) for v in range(5)] == list(FileType)
    with pytest.raises(ValueError):
        FileType(5)
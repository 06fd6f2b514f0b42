import pytest

from taskplanner.core.errors import StorageError
from taskplanner.db.files import rename_file, write_text_atomic


def test_write_text_atomic_replaces_content(tmp_path):
    path = tmp_path / "plans" / "15-Jan-2024.md"
    write_text_atomic(path, "first")
    write_text_atomic(path, "second")
    assert path.read_text() == "second"
    assert [p.name for p in path.parent.iterdir()] == ["15-Jan-2024.md"]


def test_unencodable_text_is_storage_error_and_leaves_no_temp_file(tmp_path):
    path = tmp_path / "15-Jan-2024.md"
    write_text_atomic(path, "# Monday")

    with pytest.raises(StorageError):
        write_text_atomic(path, "# bad \ud800")

    assert path.read_text() == "# Monday"
    assert [p.name for p in tmp_path.iterdir()] == ["15-Jan-2024.md"]


def test_rename_missing_file_is_storage_error(tmp_path):
    with pytest.raises(StorageError):
        rename_file(tmp_path / "A.json", tmp_path / "B.json")

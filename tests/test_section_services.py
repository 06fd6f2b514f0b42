import json
import os

import pytest

from taskplanner.api.sections import services
from taskplanner.api.tasks import services as task_services
from taskplanner.api.tasks.schemas import TaskCreate
from taskplanner.core.errors import AlreadyExistsError, NotFoundError, StorageError, ValidationError


def test_create_section_then_list(section_store):
    created = services.create_section(section_store, "Work")
    assert created.name == "Work"
    assert created.tasks == []

    sections = services.get_sections(section_store)
    assert [(s.name, s.tasks) for s in sections] == [("Work", [])]


def test_create_section_writes_json_record(section_store):
    services.create_section(section_store, "Work")
    raw = json.loads((section_store.root / "Work.json").read_text())
    assert raw == {"name": "Work", "tasks": []}


def test_create_duplicate_section_fails_and_keeps_state(section_store):
    services.create_section(section_store, "Work")
    task_services.create_task(section_store, TaskCreate(section_name="Work", description="a", priority="Low"))

    with pytest.raises(AlreadyExistsError):
        services.create_section(section_store, "Work")

    assert len(services.get_section(section_store, "Work").tasks) == 1


@pytest.mark.parametrize("name", ["", "   ", "a/b", "..", "a\\b"])
def test_create_section_rejects_unsafe_names(section_store, name):
    with pytest.raises(ValidationError):
        services.create_section(section_store, name)


def test_get_sections_sorted_by_name(section_store):
    for name in ["beta", "Alpha", "alpha", "Gamma"]:
        services.create_section(section_store, name)
    assert [s.name for s in services.get_sections(section_store)] == ["Alpha", "Gamma", "alpha", "beta"]


def test_get_sections_empty_when_directory_missing(section_store):
    assert services.get_sections(section_store) == []


def test_get_sections_skips_corrupt_records(section_store):
    services.create_section(section_store, "Good")
    (section_store.root / "Broken.json").write_text("{not json")
    (section_store.root / "Wrong.json").write_text(json.dumps({"tasks": "nope"}))
    (section_store.root / "notes.txt").write_text("ignored")

    assert [s.name for s in services.get_sections(section_store)] == ["Good"]


def test_get_section_corrupt_record_propagates(section_store):
    section_store.root.mkdir(parents=True)
    (section_store.root / "Broken.json").write_text("{not json")
    with pytest.raises(StorageError):
        services.get_section(section_store, "Broken")


def test_rename_section_moves_record_with_tasks(section_store):
    task = task_services.create_task(
        section_store, TaskCreate(section_name="Old", description="Keep me", priority="High")
    )

    renamed = services.rename_section(section_store, "Old", "New")

    assert renamed.name == "New"
    assert not (section_store.root / "Old.json").exists()
    stored = services.get_section(section_store, "New")
    assert stored.name == "New"
    assert stored.tasks == [task]


def test_rename_missing_section(section_store):
    with pytest.raises(NotFoundError):
        services.rename_section(section_store, "Nope", "New")


def test_rename_onto_existing_name_keeps_original(section_store):
    services.create_section(section_store, "A")
    task_services.create_task(section_store, TaskCreate(section_name="A", description="x", priority="Medium"))
    services.create_section(section_store, "B")

    with pytest.raises(AlreadyExistsError):
        services.rename_section(section_store, "A", "B")

    original = services.get_section(section_store, "A")
    assert len(original.tasks) == 1
    assert services.get_section(section_store, "B").tasks == []


def test_rename_is_a_single_file_move(section_store, monkeypatch):
    task_services.create_task(section_store, TaskCreate(section_name="A", description="x", priority="Low"))
    old_path = section_store.path_for("A")
    raw = old_path.read_bytes()
    moves = []
    real_rename = os.rename

    def recording_rename(source, target):
        moves.append((source, target))
        return real_rename(source, target)

    monkeypatch.setattr("taskplanner.db.files.os.rename", recording_rename)

    services.rename_section(section_store, "A", "B")

    assert moves == [(old_path, section_store.path_for("B"))]
    assert section_store.path_for("B").read_bytes() == raw
    assert not old_path.exists()


def test_rename_failure_leaves_original_in_place(section_store, monkeypatch):
    services.create_section(section_store, "A")
    old_path = section_store.path_for("A")

    def failing_rename(source, target):
        raise PermissionError("read-only")

    monkeypatch.setattr("taskplanner.db.files.os.rename", failing_rename)

    with pytest.raises(StorageError):
        services.rename_section(section_store, "A", "B")

    assert old_path.exists()
    assert not section_store.path_for("B").exists()


def test_delete_section_cascades_tasks(section_store):
    task_services.create_task(section_store, TaskCreate(section_name="Work", description="x", priority="Low"))

    assert services.delete_section(section_store, "Work") is True

    assert services.get_sections(section_store) == []
    assert task_services.get_tasks_by_section(section_store, "Work") == []


def test_delete_missing_section(section_store):
    with pytest.raises(NotFoundError):
        services.delete_section(section_store, "Nope")


def test_record_name_follows_file_name(section_store):
    section_store.root.mkdir(parents=True)
    (section_store.root / "Home.json").write_text(json.dumps({"name": "Other", "tasks": []}))
    assert services.get_section(section_store, "Home").name == "Home"

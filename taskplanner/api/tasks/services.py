import logging
import uuid
from datetime import datetime, timedelta, timezone

from taskplanner.core.errors import NotFoundError, StorageError, ValidationError
from taskplanner.db.models.section import PRIORITY_ORDER, Section, Task
from taskplanner.db.section_store import SectionStore
from . import schemas

logger = logging.getLogger(__name__)

# Fields where an explicit null means "keep the current value"
_NON_NULLABLE_FIELDS = ("description", "priority", "completed")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

def _check_description(description: str) -> str:
    if not description or not description.strip():
        raise ValidationError("Task description must not be empty")
    return description

def _task_sort_key(task: Task):
    return (
        PRIORITY_ORDER[task.priority],
        task.due_date is None,
        task.due_date or datetime.min.date(),
    )

def _load_section(store: SectionStore, section_name: str) -> Section:
    section = store.read(section_name)
    if section is None:
        raise NotFoundError(f"Section '{section_name}' not found")
    return section

def _find_task_index(section: Section, task_id: str) -> int:
    for index, task in enumerate(section.tasks):
        if task.id == task_id:
            return index
    raise NotFoundError(f"Task with ID '{task_id}' not found in section '{section.name}'")


def get_tasks(store: SectionStore) -> list[Task]:
    tasks = []
    for name in store.names():
        try:
            section = store.read(name)
        except StorageError as e:
            logger.error("Skipping section file %s: %s", name, e.message)
            continue
        if section is not None:
            tasks.extend(section.tasks)
    return tasks

def get_tasks_by_section(store: SectionStore, section_name: str) -> list[Task]:
    try:
        section = store.read(section_name)
    except ValidationError:
        # not a usable file name, so no such section can exist
        return []
    if section is None:
        return []
    return sorted(section.tasks, key=_task_sort_key)

def create_task(store: SectionStore, task: schemas.TaskCreate) -> Task:
    """Append a new task to ``task.section_name``.

    A section that has no record yet is created on the spot; a record that
    exists but cannot be read is reported, never overwritten.
    """
    _check_description(task.description)
    section = store.read(task.section_name)
    if section is None:
        logger.info("Section '%s' does not exist yet, creating it", task.section_name)
        section = Section(name=task.section_name, tasks=[])

    now = _utcnow()
    new_task = Task(
        id=str(uuid.uuid4()),
        description=task.description,
        priority=task.priority,
        due_date=task.due_date,
        comments=task.comments,
        completed=False,
        created_at=now,
        updated_at=now,
    )
    section.tasks.append(new_task)
    store.write(section)
    logger.info("Created task %s in section '%s'", new_task.id, section.name)
    return new_task

def update_task(store: SectionStore, section_name: str, task_id: str, task: schemas.TaskUpdate) -> Task:
    section = _load_section(store, section_name)
    index = _find_task_index(section, task_id)
    existing = section.tasks[index]

    changes = {}
    for key, value in task.model_dump(exclude_unset=True).items():
        if value is None and key in _NON_NULLABLE_FIELDS:
            continue
        changes[key] = value
    if "description" in changes:
        _check_description(changes["description"])

    now = _utcnow()
    if now <= existing.updated_at:
        now = existing.updated_at + timedelta(microseconds=1)
    changes["updated_at"] = now

    updated = existing.model_copy(update=changes)
    section.tasks[index] = updated
    store.write(section)
    logger.info("Updated task %s in section '%s'", task_id, section_name)
    return updated

def delete_task(store: SectionStore, section_name: str, task_id: str) -> bool:
    section = _load_section(store, section_name)
    index = _find_task_index(section, task_id)
    del section.tasks[index]
    store.write(section)
    logger.info("Deleted task %s from section '%s'", task_id, section_name)
    return True

import logging

from taskplanner.core.errors import AlreadyExistsError, NotFoundError, StorageError
from taskplanner.db.models.section import Section
from taskplanner.db.section_store import SectionStore, validate_section_name

logger = logging.getLogger(__name__)


def get_sections(store: SectionStore) -> list[Section]:
    sections = []
    for name in store.names():
        try:
            section = store.read(name)
        except StorageError as e:
            logger.error("Skipping section file %s: %s", name, e.message)
            continue
        if section is not None:
            sections.append(section)
    sections.sort(key=lambda s: s.name)
    return sections

def get_section(store: SectionStore, name: str) -> Section:
    section = store.read(name)
    if section is None:
        raise NotFoundError(f"Section '{name}' not found")
    return section

def create_section(store: SectionStore, name: str) -> Section:
    validate_section_name(name)
    if store.exists(name):
        raise AlreadyExistsError(f"Section '{name}' already exists")
    section = Section(name=name, tasks=[])
    store.write(section)
    logger.info("Created section '%s'", name)
    return section

def rename_section(store: SectionStore, old_name: str, new_name: str) -> Section:
    validate_section_name(new_name)
    section = store.read(old_name)
    if section is None:
        raise NotFoundError(f"Section '{old_name}' not found")
    if store.exists(new_name):
        raise AlreadyExistsError(f"Section '{new_name}' already exists")
    renamed = section.model_copy(update={"name": new_name})
    store.move(old_name, new_name)
    logger.info("Renamed section '%s' to '%s'", old_name, new_name)
    return renamed

def delete_section(store: SectionStore, name: str) -> bool:
    if not store.exists(name):
        raise NotFoundError(f"Section '{name}' not found")
    store.delete(name)
    logger.info("Deleted section '%s'", name)
    return True

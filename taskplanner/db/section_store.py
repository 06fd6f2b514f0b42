# taskplanner/db/section_store.py

import json
import logging
from pathlib import Path
from typing import Iterator, Optional

import pydantic

from taskplanner.core.errors import StorageError, ValidationError
from taskplanner.db.files import read_text, remove_file, rename_file, write_text_atomic
from taskplanner.db.models.section import Section

logger = logging.getLogger(__name__)

SECTION_SUFFIX = ".json"


def validate_section_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Section name must not be empty")
    if name in (".", "..") or any(ch in name for ch in ("/", "\\", "\0")):
        raise ValidationError(f"Section name '{name}' is not a valid file name")
    return name


class SectionStore:
    """One JSON record per section under ``root``, keyed by section name."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        return self.root / f"{validate_section_name(name)}{SECTION_SUFFIX}"

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def names(self) -> Iterator[str]:
        if not self.root.is_dir():
            return
        for path in sorted(self.root.glob(f"*{SECTION_SUFFIX}")):
            name = path.name[: -len(SECTION_SUFFIX)]
            try:
                validate_section_name(name)
            except ValidationError:
                logger.warning("Ignoring section file with unusable name: %s", path.name)
                continue
            yield name

    def read(self, name: str) -> Optional[Section]:
        """Load a section record; ``None`` when there is no file for it."""
        path = self.path_for(name)
        if not path.is_file():
            return None
        raw = read_text(path)
        try:
            section = Section.model_validate(json.loads(raw))
        except (json.JSONDecodeError, pydantic.ValidationError) as e:
            raise StorageError(f"Section file {path.name} is corrupt: {e}") from e
        # the file name is the identity, whatever the record says
        section.name = name
        return section

    def write(self, section: Section) -> None:
        payload = section.model_dump(mode="json")
        write_text_atomic(self.path_for(section.name), json.dumps(payload, indent=2))

    def delete(self, name: str) -> None:
        remove_file(self.path_for(name))

    def move(self, old_name: str, new_name: str) -> None:
        """Rename the file of ``old_name`` to ``new_name`` in one step.

        The record inside still carries the old name until the next write;
        ``read`` takes the name from the file.
        """
        rename_file(self.path_for(old_name), self.path_for(new_name))
